from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gerenciador_tarefas.core.security import MAX_PASSWORD_BYTES


def _normalize_email(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    return v.strip().lower()


def _check_password(v: str) -> str:
    if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"senha excede {MAX_PASSWORD_BYTES} bytes")
    return v


class RegisterRequest(BaseModel):
    nome: str = Field(min_length=1)
    email: str = Field(min_length=1)
    senha: str = Field(min_length=1)

    @field_validator("nome")
    @classmethod
    def _strip_nome(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("nome é obrigatório")
        return v

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        v = _normalize_email(v)
        if not v:
            raise ValueError("email é obrigatório")
        return v

    @field_validator("senha")
    @classmethod
    def _senha(cls, v: str) -> str:
        return _check_password(v)


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    senha: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def _email(cls, v):
        v = _normalize_email(v)
        if not v:
            raise ValueError("email é obrigatório")
        return v


class ForgotPasswordRequest(BaseModel):
    # optional on purpose: the endpoint answers the same way regardless
    email: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, v: Any) -> Optional[str]:
        # non-string input simply matches no account
        if not isinstance(v, str):
            return None
        return _normalize_email(v)


class ResetPasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(min_length=1)
    nova_senha: str = Field(alias="novaSenha", min_length=1)

    @field_validator("nova_senha")
    @classmethod
    def _senha(cls, v: str) -> str:
        return _check_password(v)


class RegisterResponse(BaseModel):
    id: int
    email: str
    nome: str


class TokenResponse(BaseModel):
    token: str


class MeResponse(BaseModel):
    nome: str
    email: str


class MessageResponse(BaseModel):
    message: str
