from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from core.domain.models.task import Task, TaskStatus


class TaskMongo(BaseModel):
    """
    Modelo de Tarea para MongoDB.
    Representa cómo se almacena la tarea en la colección `tasks`.
    """

    id: str = Field(alias="_id")
    title: str
    description: str | None = None
    status: str
    due_date: datetime | None = None
    created_date: datetime
    updated_date: datetime

    model_config = {"populate_by_name": True}

    def to_domain(self) -> Task:
        """
        Convierte el documento de MongoDB a la entidad de dominio.

        Retorna:
            Task: La entidad de dominio.
        """
        return Task(
            id=UUID(self.id),
            title=self.title,
            description=self.description,
            status=TaskStatus(self.status),
            due_date=self.due_date,
            created_date=self.created_date,
            updated_date=self.updated_date,
        )

    @classmethod
    def from_domain(cls, task: Task) -> "TaskMongo":
        """
        Crea el documento a partir de una entidad ya sellada por el repositorio.

        Argumentos:
            task (Task): La entidad de dominio, con id y fechas asignados.

        Retorna:
            TaskMongo: El modelo de MongoDB.
        """
        return cls(
            id=str(task.id),
            title=task.title,
            description=task.description,
            status=task.status.value,
            due_date=task.due_date,
            created_date=task.created_date,
            updated_date=task.updated_date,
        )
