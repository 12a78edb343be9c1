import threading
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable
from uuid import UUID

from core.domain.clock import Clock, utcnow
from core.domain.exceptions import TaskNotFoundError
from core.domain.models.task import CLOSED_STATUSES, Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository, due_date_sort_key


class InMemoryTaskRepository(TaskRepository):
    """
    Almacén en memoria protegido por un lock.

    Guarda y devuelve copias para que nadie fuera del repositorio pueda
    modificar un registro sin pasar por `save`.
    """

    def __init__(self, clock: Clock = utcnow) -> None:
        self._clock = clock
        self._data: dict[UUID, Task] = {}
        self._lock = threading.Lock()

    def _select(self, predicate: Callable[[Task], bool]) -> list[Task]:
        with self._lock:
            matches = [replace(t) for t in self._data.values() if predicate(t)]
        return sorted(matches, key=due_date_sort_key)

    def save(self, task: Task) -> Task:
        task.validate()
        stored = replace(task)
        with self._lock:
            if stored.id is None:
                stored.mark_created(self._clock())
            else:
                existing = self._data.get(stored.id)
                if existing is None:
                    raise TaskNotFoundError(stored.id)
                stored.touch(existing.created_date, existing.updated_date, self._clock())
            self._data[stored.id] = stored
        return replace(stored)

    def find_by_id(self, task_id: UUID) -> Task | None:
        with self._lock:
            task = self._data.get(task_id)
        return replace(task) if task is not None else None

    def find_all(self) -> list[Task]:
        return self._select(lambda t: True)

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        return self._select(lambda t: t.status == status)

    def find_overdue(
        self,
        now: datetime,
        excluded_statuses: Iterable[TaskStatus] = CLOSED_STATUSES,
    ) -> list[Task]:
        excluded = set(excluded_statuses)
        return self._select(
            lambda t: t.due_date is not None
            and t.due_date < now
            and t.status not in excluded
        )

    def find_by_due_date_between(self, start: datetime, end: datetime) -> list[Task]:
        return self._select(
            lambda t: t.due_date is not None and start <= t.due_date <= end
        )

    def count(self) -> int:
        with self._lock:
            return len(self._data)

    def count_by_status(self, status: TaskStatus) -> int:
        with self._lock:
            return sum(1 for t in self._data.values() if t.status == status)

    def search_by_text(self, term: str) -> list[Task]:
        needle = term.casefold()
        return self._select(
            lambda t: needle in t.title.casefold()
            or (t.description is not None and needle in t.description.casefold())
        )

    def delete_by_id(self, task_id: UUID) -> bool:
        with self._lock:
            return self._data.pop(task_id, None) is not None

    def exists_by_id(self, task_id: UUID) -> bool:
        with self._lock:
            return task_id in self._data
