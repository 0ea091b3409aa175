from sqlmodel import SQLModel, Field
from datetime import date
from typing import Optional


class Tarefa(SQLModel, table=True):
    __tablename__ = "tarefas"

    id: Optional[int] = Field(default=None, primary_key=True)
    texto: str
    prazo: Optional[date] = None
    prioridade: Optional[str] = None
    usuario_id: int = Field(foreign_key="usuarios.id", index=True)
