from dataclasses import replace
from datetime import datetime
from typing import Iterable, List
from uuid import UUID
from peewee import fn
from core.domain.clock import Clock, utcnow
from core.domain.exceptions import TaskNotFoundError
from core.domain.models.task import CLOSED_STATUSES, Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import IS_SQLITE, db

class PeeweeTaskRepository(TaskRepository):
    def __init__(self, clock: Clock = utcnow):
        # Las tablas se crean al iniciar; en producción esto iría en migraciones.
        db.connect(reuse_if_open=True)
        db.create_tables([TaskModel], safe=True)
        self._clock = clock

    @staticmethod
    def _to_domain(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            title=model.title,
            description=model.description,
            status=TaskStatus(model.status),
            due_date=model.due_date,
            created_date=model.created_date,
            updated_date=model.updated_date,
        )

    def _select(self, *conditions) -> List[Task]:
        query = TaskModel.select()
        if conditions:
            query = query.where(*conditions)
        # Sin fecha límite al final, con orden estable por fecha de creación
        query = query.order_by(
            TaskModel.due_date.is_null(),
            TaskModel.due_date.asc(),
            TaskModel.created_date.asc(),
        )
        return [self._to_domain(t) for t in query]

    def save(self, task: Task) -> Task:
        task.validate()
        task = replace(task)
        with db.atomic():
            if task.id is None:
                task.mark_created(self._clock())
                model = TaskModel.create(
                    id=task.id,
                    title=task.title,
                    description=task.description,
                    status=task.status.value,
                    due_date=task.due_date,
                    created_date=task.created_date,
                    updated_date=task.updated_date,
                )
                return self._to_domain(model)

            existing = TaskModel.get_or_none(TaskModel.id == task.id)
            if existing is None:
                raise TaskNotFoundError(task.id)
            task.touch(existing.created_date, existing.updated_date, self._clock())
            existing.title = task.title
            existing.description = task.description
            existing.status = task.status.value
            existing.due_date = task.due_date
            existing.updated_date = task.updated_date
            existing.save()
            return self._to_domain(existing)

    def find_by_id(self, task_id: UUID) -> Task | None:
        model = TaskModel.get_or_none(TaskModel.id == task_id)
        return self._to_domain(model) if model is not None else None

    def find_all(self) -> List[Task]:
        return self._select()

    def find_by_status(self, status: TaskStatus) -> List[Task]:
        return self._select(TaskModel.status == status.value)

    def find_overdue(
        self,
        now: datetime,
        excluded_statuses: Iterable[TaskStatus] = CLOSED_STATUSES,
    ) -> List[Task]:
        conditions = [TaskModel.due_date < now]
        excluded = [s.value for s in excluded_statuses]
        if excluded:
            conditions.append(TaskModel.status.not_in(excluded))
        return self._select(*conditions)

    def find_by_due_date_between(self, start: datetime, end: datetime) -> List[Task]:
        return self._select(TaskModel.due_date.between(start, end))

    def count(self) -> int:
        return TaskModel.select().count()

    def count_by_status(self, status: TaskStatus) -> int:
        return TaskModel.select().where(TaskModel.status == status.value).count()

    def search_by_text(self, term: str) -> List[Task]:
        if IS_SQLITE:
            # Se compara el texto plegado con casefold(), registrada en la conexión
            needle = term.casefold()
            return self._select(
                fn.casefold(TaskModel.title).contains(needle)
                | fn.casefold(TaskModel.description).contains(needle)
            )
        # contains() usa ILIKE: sin distinguir mayúsculas
        return self._select(
            TaskModel.title.contains(term) | TaskModel.description.contains(term)
        )

    def delete_by_id(self, task_id: UUID) -> bool:
        with db.atomic():
            deleted = TaskModel.delete().where(TaskModel.id == task_id).execute()
        return deleted > 0

    def exists_by_id(self, task_id: UUID) -> bool:
        return TaskModel.select().where(TaskModel.id == task_id).exists()
