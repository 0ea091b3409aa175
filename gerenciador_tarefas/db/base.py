"""Centralized SQLModel imports to ensure metadata is populated."""

from gerenciador_tarefas.models import user as _user  # noqa: F401
from gerenciador_tarefas.models import task as _task  # noqa: F401
