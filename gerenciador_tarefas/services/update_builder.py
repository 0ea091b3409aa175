"""Partial UPDATE statements for ``tarefas``.

Caller-supplied keys are checked against ``UPDATABLE_COLUMNS`` before any of
them reaches statement structure; columns are then resolved from the table
object and every value is sent as a bound parameter. The ownership predicate
is always appended, so a statement can only touch the caller's own row.
"""
from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError
from sqlalchemy import update
from sqlalchemy.sql.dml import Update

from gerenciador_tarefas.models.task import Tarefa
from gerenciador_tarefas.schemas.task import TarefaUpdate

UPDATABLE_COLUMNS = frozenset({"texto", "prazo", "prioridade"})

_tarefas = Tarefa.__table__


class UpdateFieldsError(ValueError):
    """The supplied field map cannot be turned into an UPDATE."""


class EmptyUpdateError(UpdateFieldsError):
    def __init__(self) -> None:
        super().__init__("Nenhum campo para atualizar foi fornecido.")


class UnknownFieldError(UpdateFieldsError):
    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Campos não atualizáveis: {', '.join(fields)}")


class InvalidValueError(UpdateFieldsError):
    pass


def build_task_update(task_id: int, owner_id: int, fields: Mapping[str, Any]) -> Update:
    if not fields:
        raise EmptyUpdateError()

    unknown = sorted(str(k) for k in fields if k not in UPDATABLE_COLUMNS)
    if unknown:
        raise UnknownFieldError(unknown)

    try:
        values = TarefaUpdate.model_validate(dict(fields)).model_dump(exclude_unset=True)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise InvalidValueError(f"Valores inválidos: {problems}") from exc

    stmt = update(_tarefas).values({_tarefas.c[name]: value for name, value in values.items()})
    # ownership predicate goes last
    return stmt.where(
        _tarefas.c.id == task_id,
        _tarefas.c.usuario_id == owner_id,
    ).returning(*_tarefas.c)
