from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import Optional


class Usuario(SQLModel, table=True):
    __tablename__ = "usuarios"

    id: Optional[int] = Field(default=None, primary_key=True)
    nome: str
    email: str = Field(index=True, unique=True)
    senha: str  # bcrypt hash, never serialized

    # set/cleared together; stores sha256 of the emailed token
    reset_token: Optional[str] = Field(default=None, index=True)
    reset_token_expires: Optional[datetime] = Field(
        default=None, sa_type=DateTime(timezone=True)
    )
