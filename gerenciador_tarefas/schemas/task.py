from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from gerenciador_tarefas.models.task import Tarefa


def _require_texto(v: Optional[str]) -> str:
    if v is None or not v.strip():
        raise ValueError("O campo texto é obrigatório.")
    return v.strip()


class TarefaCreate(BaseModel):
    texto: str
    prazo: Optional[date] = None
    prioridade: Optional[str] = None

    @field_validator("texto")
    @classmethod
    def _texto(cls, v: str) -> str:
        return _require_texto(v)


class TarefaUpdate(BaseModel):
    """Value coercion for partial updates; only keys the caller sent are kept."""
    model_config = ConfigDict(extra="forbid")

    texto: Optional[str] = None
    prazo: Optional[date] = None
    prioridade: Optional[str] = None

    @field_validator("texto")
    @classmethod
    def _texto(cls, v: Optional[str]) -> str:
        # explicit null/blank would break the NOT NULL column
        return _require_texto(v)


class TarefaDeletada(BaseModel):
    message: str
    deletedTask: Tarefa
