import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from core.domain.exceptions import ValidationError
from core.domain.models.task import Task, TaskStatus, is_blank
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    title: str | None
    description: str | None = None
    status: TaskStatus | None = None
    due_date: datetime | None = None


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: UUID | None, cmd: UpdateTaskCommand) -> Task | None:
        logger.info(f"Actualizando tarea {task_id}")

        if task_id is None:
            raise ValidationError("El id de la tarea no puede ser nulo")
        if is_blank(cmd.title):
            raise ValidationError("El título de la tarea no puede estar vacío")

        task = self._repository.find_by_id(task_id)
        if task is None:
            logger.warning(f"Tarea {task_id} no encontrada para actualizar")
            return None

        task.title = cmd.title
        task.description = cmd.description
        # Sin estado en la petición se mantiene el actual.
        if cmd.status is not None:
            task.status = cmd.status
        task.due_date = cmd.due_date

        updated = self._repository.save(task)
        logger.info(f"Tarea {task_id} actualizada")
        return updated
