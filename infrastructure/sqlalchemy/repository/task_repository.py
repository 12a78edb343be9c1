from dataclasses import replace
from datetime import datetime
from typing import Iterable
from uuid import UUID

from sqlalchemy import String, func, or_, select

from core.domain.clock import Clock, utcnow
from core.domain.exceptions import TaskNotFoundError
from core.domain.models.task import CLOSED_STATUSES, Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.model.models import TaskModel
from infrastructure.sqlalchemy.session.db import IS_SQLITE, get_session, init_db


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, clock: Clock = utcnow) -> None:
        init_db()
        self._clock = clock

    @staticmethod
    def _to_domain(task_model: TaskModel) -> Task:
        return Task(
            id=UUID(task_model.id),
            title=task_model.title,
            description=task_model.description,
            status=TaskStatus(task_model.status),
            due_date=task_model.due_date,
            created_date=task_model.created_date,
            updated_date=task_model.updated_date,
        )

    def _select(self, *conditions) -> list[Task]:
        stmt = (
            select(TaskModel)
            .where(*conditions)
            .order_by(
                TaskModel.due_date.is_(None),
                TaskModel.due_date.asc(),
                TaskModel.created_date.asc(),
            )
        )
        session = get_session()
        try:
            return [self._to_domain(m) for m in session.scalars(stmt)]
        finally:
            session.close()

    def _count(self, *conditions) -> int:
        stmt = select(func.count()).select_from(TaskModel).where(*conditions)
        session = get_session()
        try:
            return session.scalar(stmt) or 0
        finally:
            session.close()

    def save(self, task: Task) -> Task:
        task.validate()
        task = replace(task)
        session = get_session()
        try:
            if task.id is None:
                task.mark_created(self._clock())
                task_model = TaskModel(
                    id=str(task.id),
                    created_date=task.created_date,
                )
                session.add(task_model)
            else:
                task_model = session.get(TaskModel, str(task.id), with_for_update=True)
                if task_model is None:
                    raise TaskNotFoundError(task.id)
                task.touch(
                    task_model.created_date, task_model.updated_date, self._clock()
                )

            task_model.title = task.title
            task_model.description = task.description
            task_model.status = task.status.value
            task_model.due_date = task.due_date
            task_model.updated_date = task.updated_date
            session.commit()
            return self._to_domain(task_model)
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def find_by_id(self, task_id: UUID) -> Task | None:
        session = get_session()
        try:
            task_model = session.get(TaskModel, str(task_id))
            if task_model is None:
                return None
            return self._to_domain(task_model)
        finally:
            session.close()

    def find_all(self) -> list[Task]:
        return self._select()

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        return self._select(TaskModel.status == status.value)

    def find_overdue(
        self,
        now: datetime,
        excluded_statuses: Iterable[TaskStatus] = CLOSED_STATUSES,
    ) -> list[Task]:
        conditions = [TaskModel.due_date < now]
        excluded = [s.value for s in excluded_statuses]
        if excluded:
            conditions.append(TaskModel.status.not_in(excluded))
        return self._select(*conditions)

    def find_by_due_date_between(self, start: datetime, end: datetime) -> list[Task]:
        return self._select(TaskModel.due_date.between(start, end))

    def count(self) -> int:
        return self._count()

    def count_by_status(self, status: TaskStatus) -> int:
        return self._count(TaskModel.status == status.value)

    def search_by_text(self, term: str) -> list[Task]:
        if IS_SQLITE:
            # casefold() se registra en cada conexión SQLite (ver session/db.py)
            needle = term.casefold()
            return self._select(
                or_(
                    func.casefold(TaskModel.title, type_=String).contains(
                        needle, autoescape=True
                    ),
                    func.casefold(TaskModel.description, type_=String).contains(
                        needle, autoescape=True
                    ),
                )
            )
        return self._select(
            or_(
                TaskModel.title.icontains(term, autoescape=True),
                TaskModel.description.icontains(term, autoescape=True),
            )
        )

    def delete_by_id(self, task_id: UUID) -> bool:
        session = get_session()
        try:
            task_model = session.get(TaskModel, str(task_id))
            if task_model is None:
                return False
            session.delete(task_model)
            session.commit()
            return True
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def exists_by_id(self, task_id: UUID) -> bool:
        return self._count(TaskModel.id == str(task_id)) > 0
