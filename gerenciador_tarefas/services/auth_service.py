from __future__ import annotations

import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from gerenciador_tarefas.core.security import get_password_hash, verify_password
from gerenciador_tarefas.core.tokens import create_access_token
from gerenciador_tarefas.models.user import Usuario
from gerenciador_tarefas.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

# checked when the email is unknown so both login failures cost one bcrypt round
_DUMMY_HASH = get_password_hash("gerenciador-tarefas-dummy-password")


def get_user_by_email(db: Session, email: str) -> Usuario | None:
    return db.exec(select(Usuario).where(Usuario.email == email)).first()


def register_user(db: Session, data: RegisterRequest) -> Usuario:
    usuario = Usuario(
        nome=data.nome,
        email=data.email,
        senha=get_password_hash(data.senha),
    )
    db.add(usuario)
    try:
        db.commit()
    except IntegrityError:
        # unique index on usuarios.email; no pre-check so concurrent signups can't both win
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Este e-mail já está cadastrado.",
        )
    db.refresh(usuario)
    logger.info("user registered id=%s", usuario.id)
    return usuario


def login(db: Session, data: LoginRequest) -> str:
    """Return a fresh session token, or 401 without saying which half was wrong."""
    usuario = get_user_by_email(db, data.email)
    stored_hash = usuario.senha if usuario is not None else _DUMMY_HASH
    if not verify_password(data.senha, stored_hash) or usuario is None:
        logger.warning("login failed for %s", data.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciais inválidas.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return create_access_token(usuario.id)


def get_profile(db: Session, user_id: int) -> Usuario:
    usuario = db.get(Usuario, user_id)
    if usuario is None:
        # token outlived the account
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Usuário não encontrado.")
    return usuario
