from __future__ import annotations

import hashlib
import os
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import jwt, JWTError


# ---- 설정 ----
ALG = os.getenv("JWT_ALGORITHM", "HS256")

ACCESS_SECRET = os.getenv("JWT_SECRET_KEY", "gerenciador-tarefas-dev-secret")
ACCESS_MIN = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

RESET_MIN = int(os.getenv("RESET_TOKEN_EXPIRE_MINUTES", "60"))


class InvalidTokenError(Exception):
    """Bearer token is malformed, expired, badly signed or of the wrong type."""


# ---- 공통 ----
def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


def _exp_in(minutes: int = 0) -> datetime:
    return _utcnow() + timedelta(minutes=minutes)


def _make_jwt(payload: Dict[str, Any], secret: str, lifetime: timedelta) -> str:
    to_encode = payload.copy()
    iat = int(_utcnow().timestamp())
    to_encode["iat"] = iat
    to_encode["exp"] = iat + int(lifetime.total_seconds())
    return jwt.encode(to_encode, secret, algorithm=ALG)


def _decode(token: str, secret: str) -> Dict[str, Any]:
    # jose.jwt.decode는 검증 실패(서명/만료/형식) 시 JWTError를 던짐
    return jwt.decode(token, secret, algorithms=[ALG])


def sha256_hex(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()


# ---- Access Token ----
def create_access_token(user_id: int, expires_delta: timedelta | None = None) -> str:
    """
    Issue a session token bound to ``user_id``.

    Tokens are stateless: nothing is stored server side, so a token stays
    valid until ``exp`` even if the user's password changes meanwhile.
    """
    payload = {"sub": str(user_id), "typ": "access"}
    lifetime = expires_delta if expires_delta is not None else timedelta(minutes=ACCESS_MIN)
    return _make_jwt(payload, ACCESS_SECRET, lifetime)


def verify_access_token(token: str) -> int:
    """
    Return the user id bound to ``token``.
    Raises InvalidTokenError on bad signature, expiry, wrong type or a
    subject that is not a user id.
    """
    try:
        payload = _decode(token, ACCESS_SECRET)
    except JWTError as exc:
        raise InvalidTokenError(str(exc)) from exc

    if payload.get("typ") != "access":
        raise InvalidTokenError("Invalid token type")
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidTokenError("Invalid subject") from exc


# ---- Password reset token (일회용) ----
def new_reset_token() -> str:
    # 32 bytes -> 256 bits of entropy
    return secrets.token_urlsafe(32)


def reset_token_expiry() -> datetime:
    """UTC deadline for a freshly issued reset token."""
    return _exp_in(minutes=RESET_MIN)
