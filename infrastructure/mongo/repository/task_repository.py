import logging
import re
from dataclasses import replace
from datetime import datetime
from typing import Any, Iterable
from uuid import UUID

from pymongo import ASCENDING
from pymongo.collection import Collection

from core.domain.clock import Clock, utcnow
from core.domain.exceptions import TaskNotFoundError
from core.domain.models.task import CLOSED_STATUSES, Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.mongo.models.task import TaskMongo
from infrastructure.mongo.session.client import get_db

logger = logging.getLogger(__name__)

# Mongo ordena los nulos primero; se recolocan al final en _find.
_SORT = [("due_date", ASCENDING), ("created_date", ASCENDING)]


class MongoTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository usando MongoDB (Synchronous).

    Cada operación toca un único documento, que es atómica en MongoDB.
    """

    def __init__(
        self,
        collection: Collection[Any] | None = None,
        clock: Clock = utcnow,
    ) -> None:
        self.collection: Collection[Any] = (
            collection if collection is not None else get_db().tasks
        )
        self._clock = clock

    def _find(self, query: dict[str, Any]) -> list[Task]:
        tasks = [TaskMongo(**doc).to_domain() for doc in self.collection.find(query, sort=_SORT)]
        # sorted() es estable: conserva el orden de Mongo dentro de cada grupo
        return sorted(tasks, key=lambda t: t.due_date is None)

    def save(self, task: Task) -> Task:
        """
        Inserta o reemplaza una tarea.

        Argumentos:
            task (Task): La tarea a guardar. Sin id se inserta como nueva.

        Retorna:
            Task: La tarea persistida, con id y fechas asignados.
        """
        task.validate()
        task = replace(task)

        if task.id is None:
            task.mark_created(self._clock())
            self.collection.insert_one(TaskMongo.from_domain(task).model_dump(by_alias=True))
            return task

        # Reemplazo condicionado a la versión leída: si otro escritor la cambió
        # entretanto, se vuelve a leer para que updated_date siga creciendo.
        while True:
            doc = self.collection.find_one({"_id": str(task.id)})
            if doc is None:
                raise TaskNotFoundError(task.id)
            existing = TaskMongo(**doc)
            task.touch(existing.created_date, existing.updated_date, self._clock())

            result = self.collection.replace_one(
                {"_id": str(task.id), "updated_date": existing.updated_date},
                TaskMongo.from_domain(task).model_dump(by_alias=True),
            )
            if result.matched_count == 1:
                return task
            logger.debug(f"Tarea {task.id} modificada concurrentemente, releyendo")

    def find_by_id(self, task_id: UUID) -> Task | None:
        """
        Obtiene una tarea por su ID.

        Argumentos:
            task_id (UUID): El ID de la tarea.

        Retorna:
            Task | None: La tarea encontrada o None si no existe.
        """
        doc = self.collection.find_one({"_id": str(task_id)})
        if not doc:
            return None
        return TaskMongo(**doc).to_domain()

    def find_all(self) -> list[Task]:
        return self._find({})

    def find_by_status(self, status: TaskStatus) -> list[Task]:
        return self._find({"status": status.value})

    def find_overdue(
        self,
        now: datetime,
        excluded_statuses: Iterable[TaskStatus] = CLOSED_STATUSES,
    ) -> list[Task]:
        query: dict[str, Any] = {"due_date": {"$lt": now}}
        excluded = [s.value for s in excluded_statuses]
        if excluded:
            query["status"] = {"$nin": excluded}
        return self._find(query)

    def find_by_due_date_between(self, start: datetime, end: datetime) -> list[Task]:
        return self._find({"due_date": {"$gte": start, "$lte": end}})

    def count(self) -> int:
        return self.collection.count_documents({})

    def count_by_status(self, status: TaskStatus) -> int:
        return self.collection.count_documents({"status": status.value})

    def search_by_text(self, term: str) -> list[Task]:
        """
        Busca el término dentro del título o la descripción.

        Argumentos:
            term (str): Texto literal; se escapa antes de usarlo como regex.
        """
        pattern = {"$regex": re.escape(term), "$options": "i"}
        return self._find({"$or": [{"title": pattern}, {"description": pattern}]})

    def delete_by_id(self, task_id: UUID) -> bool:
        """
        Elimina una tarea por su ID.

        Retorna:
            bool: True si existía y se eliminó.
        """
        result = self.collection.delete_one({"_id": str(task_id)})
        return result.deleted_count > 0

    def exists_by_id(self, task_id: UUID) -> bool:
        return self.collection.count_documents({"_id": str(task_id)}, limit=1) > 0
