import logging
from datetime import datetime

from core.domain.exceptions import ValidationError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Task]:
        logger.debug("Listando todas las tareas")
        return self._repository.find_all()


class ListTasksByStatusUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, status: TaskStatus | None) -> list[Task]:
        logger.debug(f"Listando tareas con estado {status}")
        if status is None:
            raise ValidationError("El estado de la tarea no puede ser nulo")
        return self._repository.find_by_status(status)


class ListTasksDueBetweenUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, start: datetime | None, end: datetime | None) -> list[Task]:
        logger.debug(f"Listando tareas con vencimiento entre {start} y {end}")
        if start is None or end is None:
            raise ValidationError("Las fechas de inicio y fin son obligatorias")
        if start > end:
            raise ValidationError("La fecha de inicio no puede ser posterior a la de fin")
        return self._repository.find_by_due_date_between(start, end)
