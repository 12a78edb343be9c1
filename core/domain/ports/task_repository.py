from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable
from uuid import UUID

from core.domain.models.task import CLOSED_STATUSES, Task, TaskStatus


def due_date_sort_key(task: Task) -> tuple:
    """Orden canónico de listados: fecha límite ascendente, sin fecha al final."""
    return (
        task.due_date is None,
        task.due_date or datetime.min,
        task.created_date or datetime.min,
    )


class TaskRepository(ABC):
    @abstractmethod
    def save(self, task: Task) -> Task:
        """
        Inserta (id vacío) o actualiza (id presente) una tarea.

        En la inserción asigna el id y ambas fechas; en la actualización
        conserva `created_date` y refresca `updated_date`. Lanza
        `TaskNotFoundError` si se actualiza un id que ya no existe.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, task_id: UUID) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def find_by_status(self, status: TaskStatus) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def find_overdue(
        self,
        now: datetime,
        excluded_statuses: Iterable[TaskStatus] = CLOSED_STATUSES,
    ) -> list[Task]:
        """Tareas con `due_date < now` cuyo estado no está excluido."""
        raise NotImplementedError

    @abstractmethod
    def find_by_due_date_between(self, start: datetime, end: datetime) -> list[Task]:
        """Tareas con `start <= due_date <= end`."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def count_by_status(self, status: TaskStatus) -> int:
        raise NotImplementedError

    @abstractmethod
    def search_by_text(self, term: str) -> list[Task]:
        """Coincidencia parcial, sin distinguir mayúsculas, en título o descripción."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, task_id: UUID) -> bool:
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, task_id: UUID) -> bool:
        raise NotImplementedError
