# gerenciador_tarefas/main.py
import os
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# .env must be loaded before the modules below read os.getenv at import time
load_dotenv()

from fastapi import Depends, FastAPI, HTTPException, Request, status  # noqa: E402
from fastapi.exceptions import RequestValidationError  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402
from sqlalchemy.exc import SQLAlchemyError  # noqa: E402
from sqlmodel import Session, text  # noqa: E402

from gerenciador_tarefas.core.logging_config import setup_logging  # noqa: E402
from gerenciador_tarefas.db.session import dispose_engine, get_session  # noqa: E402

# 모델 모듈 임포트(테이블 등록 보장용)
from gerenciador_tarefas.db import base as _models  # noqa: F401,E402

# 라우터
from gerenciador_tarefas.routers import auth, task  # noqa: E402

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info("gerenciador-tarefas starting")
    try:
        yield
    finally:
        dispose_engine()


app = FastAPI(
    title="Gerenciador de Tarefas",
    version=os.getenv("APP_VERSION", "0.1.0"),
    lifespan=lifespan,
)

# CORS
_default_origins = "http://localhost:3000,http://localhost:5173"
origins = [
    o.strip()
    for o in os.getenv("CORS_ALLOW_ORIGINS", _default_origins).split(",")
    if o.strip()
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # missing/blank fields are a plain 400 for clients, not FastAPI's 422
    fields = [
        ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Dados inválidos ou campos obrigatórios ausentes.", "fields": fields},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("DB error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Erro no servidor."},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # hashing failures and other bugs: same generic body, details only in the log
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Erro no servidor."},
    )


# 라우터 등록
app.include_router(auth.auth_router)
app.include_router(task.router)


@app.get("/health")
def health_app():
    return {"ok": True}


@app.get("/health/db")
def health_db(db: Session = Depends(get_session)):
    # Migration is a deployment concern. Runtime only verifies DB connectivity.
    try:
        db.exec(text("SELECT 1"))
        return {"ok": True}
    except SQLAlchemyError:
        logger.exception("DB health check failed")
        raise HTTPException(status_code=500, detail="Database connection failed")
