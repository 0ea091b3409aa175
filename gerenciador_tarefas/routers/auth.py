from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from gerenciador_tarefas.db.session import get_session
from gerenciador_tarefas.dependencies.auth import get_current_user_id
from gerenciador_tarefas.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    MeResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    ResetPasswordRequest,
    TokenResponse,
)
from gerenciador_tarefas.services import auth_service, password_reset

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])


@auth_router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, db: Session = Depends(get_session)):
    usuario = auth_service.register_user(db, body)
    return RegisterResponse(id=usuario.id, email=usuario.email, nome=usuario.nome)


@auth_router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, db: Session = Depends(get_session)):
    return TokenResponse(token=auth_service.login(db, body))


@auth_router.get("/me", response_model=MeResponse)
def me(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_session),
):
    usuario = auth_service.get_profile(db, user_id)
    return MeResponse(nome=usuario.nome, email=usuario.email)


@auth_router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(body: ForgotPasswordRequest, db: Session = Depends(get_session)):
    """Always answers with the same message, whether or not the email exists."""
    return MessageResponse(message=password_reset.request_reset(db, body.email))


@auth_router.post("/reset-password", response_model=MessageResponse)
def reset_password(body: ResetPasswordRequest, db: Session = Depends(get_session)):
    return MessageResponse(message=password_reset.complete_reset(db, body.token, body.nova_senha))
