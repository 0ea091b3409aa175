"""Password reset: issue a one-time token, then trade it for a new password."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlalchemy import update
from sqlmodel import Session

from gerenciador_tarefas.core.security import get_password_hash
from gerenciador_tarefas.core.tokens import new_reset_token, reset_token_expiry, sha256_hex
from gerenciador_tarefas.models.user import Usuario
from gerenciador_tarefas.services.auth_service import get_user_by_email

logger = logging.getLogger(__name__)

GENERIC_RESET_MESSAGE = (
    "Se o e-mail estiver cadastrado, você receberá as instruções para redefinir a senha."
)
RESET_DONE_MESSAGE = "Senha redefinida com sucesso."

_usuarios = Usuario.__table__


def deliver_reset_token(usuario: Usuario, token: str) -> None:
    # 메일 발송 대신 로그로 전달. swap this out for a real mailer
    logger.info("password reset token for %s: %s", usuario.email, token)


def request_reset(db: Session, email: str | None) -> str:
    """
    Store a fresh reset token for ``email`` if such a user exists.
    The answer is identical either way so callers can't tell which emails have accounts.
    """
    usuario = get_user_by_email(db, email) if email else None
    if usuario is None:
        logger.info("password reset requested for unknown email")
        return GENERIC_RESET_MESSAGE

    token = new_reset_token()
    # only the digest is persisted; a later request overwrites any pending token
    usuario.reset_token = sha256_hex(token)
    usuario.reset_token_expires = reset_token_expiry()
    db.add(usuario)
    db.commit()

    logger.info("password reset requested user_id=%s", usuario.id)
    deliver_reset_token(usuario, token)
    return GENERIC_RESET_MESSAGE


def complete_reset(db: Session, token: str, new_password: str) -> str:
    now = datetime.now(timezone.utc)
    # match + consume in a single statement: a token can be redeemed at most once
    stmt = (
        update(_usuarios)
        .where(
            _usuarios.c.reset_token == sha256_hex(token),
            _usuarios.c.reset_token_expires > now,
        )
        .values(
            senha=get_password_hash(new_password),
            reset_token=None,
            reset_token_expires=None,
        )
        .returning(_usuarios.c.id)
    )
    user_id = db.exec(stmt).scalar_one_or_none()
    if user_id is None:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Token inválido ou expirado.",
        )
    db.commit()
    logger.info("password reset completed user_id=%s", user_id)
    return RESET_DONE_MESSAGE
