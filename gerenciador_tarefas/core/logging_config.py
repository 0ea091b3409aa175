# gerenciador_tarefas/core/logging_config.py
import logging
import os
import sys

_ALLOWED_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# per-statement and per-request chatter that drowns the app's own records
_NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "httpx")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [gerenciador-tarefas] - %(message)s"


def _level_from_env(default: int = logging.INFO) -> int:
    name = os.getenv("LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    if name not in _ALLOWED_LEVELS:
        allowed = "|".join(_ALLOWED_LEVELS)
        raise RuntimeError(f"LOG_LEVEL must be one of {allowed}")
    return logging.getLevelName(name)


def setup_logging(level: int | None = None) -> None:
    """
    Configure the root logger for the API process.

    ``level`` wins over ``LOG_LEVEL``. When a handler is already installed
    (uvicorn, pytest) only the noisy third-party loggers are adjusted.
    """
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(level if level is not None else _level_from_env())
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
