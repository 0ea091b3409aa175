from __future__ import annotations

from typing import Any, Mapping, Optional

from sqlalchemy import delete
from sqlmodel import Session, select

from gerenciador_tarefas.models.task import Tarefa
from gerenciador_tarefas.schemas.task import TarefaCreate
from gerenciador_tarefas.services.update_builder import build_task_update

_tarefas = Tarefa.__table__


def list_tasks(db: Session, owner_id: int) -> list[Tarefa]:
    stmt = select(Tarefa).where(Tarefa.usuario_id == owner_id).order_by(Tarefa.id)
    return list(db.exec(stmt).all())


def get_task(db: Session, task_id: int, owner_id: int) -> Optional[Tarefa]:
    stmt = select(Tarefa).where(Tarefa.id == task_id, Tarefa.usuario_id == owner_id)
    return db.exec(stmt).first()


def create_task(db: Session, owner_id: int, data: TarefaCreate) -> Tarefa:
    tarefa = Tarefa(
        texto=data.texto,
        prazo=data.prazo,
        prioridade=data.prioridade,
        usuario_id=owner_id,
    )
    db.add(tarefa)
    db.commit()
    db.refresh(tarefa)
    return tarefa


def update_task(
    db: Session, task_id: int, owner_id: int, fields: Mapping[str, Any]
) -> Optional[Tarefa]:
    """
    Apply a partial update. Returns None when no row matches both id and
    owner; "missing" and "someone else's" are deliberately the same answer.
    Raises UpdateFieldsError for an empty or unrecognized field map.
    """
    stmt = build_task_update(task_id, owner_id, fields)
    row = db.exec(stmt).first()
    db.commit()
    if row is None:
        return None
    return Tarefa(**row._mapping)


def delete_task(db: Session, task_id: int, owner_id: int) -> Optional[Tarefa]:
    """Hard delete; returns the row as it was just before removal."""
    stmt = (
        delete(_tarefas)
        .where(_tarefas.c.id == task_id, _tarefas.c.usuario_id == owner_id)
        .returning(*_tarefas.c)
    )
    row = db.exec(stmt).first()
    db.commit()
    if row is None:
        return None
    return Tarefa(**row._mapping)
