import logging

import pytest

from gerenciador_tarefas.core import logging_config


@pytest.fixture
def bare_root(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    saved_level = root.level
    yield root
    root.setLevel(saved_level)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), (" error ", logging.ERROR), ("", logging.INFO)],
)
def test_level_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("LOG_LEVEL", raw)

    assert logging_config._level_from_env() == expected


def test_level_from_env_rejects_unknown_name(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

    with pytest.raises(RuntimeError, match="LOG_LEVEL must be one of"):
        logging_config._level_from_env()


def test_setup_logging_installs_stdout_handler_at_env_level(monkeypatch, bare_root):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    logging_config.setup_logging()

    assert bare_root.level == logging.DEBUG
    assert len(bare_root.handlers) == 1
    assert bare_root.handlers[0].formatter._fmt == logging_config.LOG_FORMAT


def test_explicit_level_wins_over_env(monkeypatch, bare_root):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    logging_config.setup_logging(logging.ERROR)

    assert bare_root.level == logging.ERROR


def test_noisy_loggers_quieted_even_when_already_configured(monkeypatch):
    for name in ("sqlalchemy.engine", "sqlalchemy.pool", "httpx"):
        monkeypatch.setattr(logging.getLogger(name), "level", logging.NOTSET)
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [logging.NullHandler()])

    logging_config.setup_logging()

    for name in ("sqlalchemy.engine", "sqlalchemy.pool", "httpx"):
        assert logging.getLogger(name).level == logging.WARNING
