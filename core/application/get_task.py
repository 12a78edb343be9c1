import logging
from uuid import UUID

from core.domain.exceptions import ValidationError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class GetTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: UUID | None) -> Task | None:
        logger.debug(f"Buscando tarea {task_id}")
        if task_id is None:
            raise ValidationError("El id de la tarea no puede ser nulo")
        return self._repository.find_by_id(task_id)
