import logging
from dataclasses import dataclass
from datetime import datetime

from core.domain.exceptions import ValidationError
from core.domain.models.task import Task, TaskStatus, is_blank
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str | None
    description: str | None = None
    status: TaskStatus | None = None
    due_date: datetime | None = None


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        logger.info(f"Creando tarea con título: {cmd.title}")

        if is_blank(cmd.title):
            raise ValidationError("El título de la tarea no puede estar vacío")

        task = self._repository.save(
            Task(
                title=cmd.title,
                description=cmd.description,
                status=cmd.status or TaskStatus.PENDING,
                due_date=cmd.due_date,
            )
        )
        logger.info(f"Tarea creada con id {task.id}")
        return task
