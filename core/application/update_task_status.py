import logging
from uuid import UUID

from core.domain.exceptions import ValidationError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class UpdateTaskStatusUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: UUID | None, status: TaskStatus | None) -> Task | None:
        logger.info(f"Actualizando estado de la tarea {task_id} a {status}")

        if task_id is None:
            raise ValidationError("El id de la tarea no puede ser nulo")
        if status is None:
            raise ValidationError("El estado de la tarea no puede ser nulo")

        task = self._repository.find_by_id(task_id)
        if task is None:
            logger.warning(f"Tarea {task_id} no encontrada para actualizar estado")
            return None

        task.status = status
        updated = self._repository.save(task)
        logger.info(f"Estado de la tarea {task_id} actualizado")
        return updated
