import logging
from uuid import UUID

from core.domain.exceptions import ValidationError
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: UUID | None) -> bool:
        logger.info(f"Eliminando tarea {task_id}")
        if task_id is None:
            raise ValidationError("El id de la tarea no puede ser nulo")

        if not self._repository.delete_by_id(task_id):
            logger.warning(f"Tarea {task_id} no encontrada para eliminar")
            return False

        logger.info(f"Tarea {task_id} eliminada")
        return True
