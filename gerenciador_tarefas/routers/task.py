from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlmodel import Session

from gerenciador_tarefas.db.session import get_session
from gerenciador_tarefas.dependencies.auth import get_current_user_id
from gerenciador_tarefas.models.task import Tarefa
from gerenciador_tarefas.schemas.task import TarefaCreate, TarefaDeletada
from gerenciador_tarefas.services import task_repository
from gerenciador_tarefas.services.update_builder import UpdateFieldsError

router = APIRouter(prefix="/api/tarefas", tags=["Tarefas"])

_NOT_FOUND = "Tarefa não encontrada ou não pertence a este usuário."


@router.get("", response_model=list[Tarefa])
def list_tarefas(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_session),
):
    return task_repository.list_tasks(db, user_id)


@router.post("", response_model=Tarefa, status_code=status.HTTP_201_CREATED)
def create_tarefa(
    body: TarefaCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_session),
):
    return task_repository.create_task(db, user_id, body)


@router.get("/{tarefa_id}", response_model=Tarefa)
def get_tarefa(
    tarefa_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_session),
):
    tarefa = task_repository.get_task(db, tarefa_id, user_id)
    if tarefa is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return tarefa


@router.put("/{tarefa_id}", response_model=Tarefa)
def update_tarefa(
    tarefa_id: int,
    campos: Dict[str, Any] = Body(...),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_session),
):
    try:
        tarefa = task_repository.update_task(db, tarefa_id, user_id, campos)
    except UpdateFieldsError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    if tarefa is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return tarefa


@router.delete("/{tarefa_id}", response_model=TarefaDeletada)
def delete_tarefa(
    tarefa_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_session),
):
    tarefa = task_repository.delete_task(db, tarefa_id, user_id)
    if tarefa is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return TarefaDeletada(message="Tarefa deletada com sucesso!", deletedTask=tarefa)
