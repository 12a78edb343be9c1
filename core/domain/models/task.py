from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from core.domain.clock import TICK, normalize
from core.domain.exceptions import ValidationError

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000


class TaskStatus(Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# Estados que nunca cuentan como vencidos.
CLOSED_STATUSES = (TaskStatus.COMPLETED, TaskStatus.CANCELLED)


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(slots=True)
class Task:
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    due_date: datetime | None = None
    id: UUID | None = None
    created_date: datetime | None = None
    updated_date: datetime | None = None

    def validate(self) -> None:
        """Comprueba las restricciones de almacenamiento de la entidad."""
        if is_blank(self.title):
            raise ValidationError("El título de la tarea no puede estar vacío")
        if len(self.title) > TITLE_MAX_LENGTH:
            raise ValidationError(
                f"El título no puede superar {TITLE_MAX_LENGTH} caracteres"
            )
        if (
            self.description is not None
            and len(self.description) > DESCRIPTION_MAX_LENGTH
        ):
            raise ValidationError(
                f"La descripción no puede superar {DESCRIPTION_MAX_LENGTH} caracteres"
            )
        if not isinstance(self.status, TaskStatus):
            raise ValidationError(f"Estado de tarea inválido: {self.status!r}")

    def mark_created(self, now: datetime) -> None:
        now = normalize(now)
        self.id = uuid4()
        self.created_date = now
        self.updated_date = now
        self.due_date = normalize(self.due_date)

    def touch(self, created_date: datetime, previous_updated: datetime, now: datetime) -> None:
        """
        Prepara la entidad para sobrescribir un registro existente.

        `created_date` se conserva del registro guardado y `updated_date`
        siempre avanza respecto al valor anterior, aunque el reloj no lo haga.
        """
        now = normalize(now)
        if now <= previous_updated:
            now = previous_updated + TICK
        self.created_date = created_date
        self.updated_date = now
        self.due_date = normalize(self.due_date)


@dataclass(slots=True, frozen=True)
class TaskStatistics:
    total: int
    pending: int
    in_progress: int
    completed: int
    cancelled: int
    overdue: int
