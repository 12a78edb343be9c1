from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from core.domain.clock import normalize
from core.domain.models.task import Task, TaskStatistics, TaskStatus


class CamelModel(BaseModel):
    """Modelos del API: snake_case en Python, camelCase en el JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskPayload(CamelModel):
    # Título opcional a nivel de esquema: el caso de uso responde 400 si falta.
    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    due_date: datetime | None = None

    @field_validator("due_date")
    @classmethod
    def _to_utc(cls, value: datetime | None) -> datetime | None:
        return normalize(value)


class CreateTaskRequest(TaskPayload):
    pass


class UpdateTaskRequest(TaskPayload):
    pass


class UpdateTaskStatusRequest(CamelModel):
    status: TaskStatus | None = None


class TaskResponse(CamelModel):
    id: UUID
    title: str
    description: str | None = None
    status: TaskStatus
    due_date: datetime | None = None
    created_date: datetime
    updated_date: datetime

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            due_date=task.due_date,
            created_date=task.created_date,
            updated_date=task.updated_date,
        )


class TaskStatisticsResponse(CamelModel):
    total: int
    pending: int
    in_progress: int
    completed: int
    cancelled: int
    overdue: int

    @classmethod
    def from_domain(cls, stats: TaskStatistics) -> "TaskStatisticsResponse":
        return cls(
            total=stats.total,
            pending=stats.pending,
            in_progress=stats.in_progress,
            completed=stats.completed,
            cancelled=stats.cancelled,
            overdue=stats.overdue,
        )
