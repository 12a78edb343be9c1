import logging
import os
from functools import lru_cache

from core.application.sample_data import InitializeSampleDataUseCase
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_task_repository() -> TaskRepository:
    # Una única instancia por proceso: el backend en memoria vive en ella.
    orm = os.getenv("ORM", "peewee").lower()
    logger.info(f"TaskRepository backend={orm}")

    # Imports diferidos: solo se carga el driver del backend elegido.
    if orm == "sqlalchemy":
        from infrastructure.sqlalchemy.repository.task_repository import (
            SqlAlchemyTaskRepository,
        )

        return SqlAlchemyTaskRepository()
    elif orm == "mongo":
        from infrastructure.mongo.repository.task_repository import MongoTaskRepository

        return MongoTaskRepository()
    elif orm == "memory":
        from infrastructure.memory.repository.task_repository import (
            InMemoryTaskRepository,
        )

        return InMemoryTaskRepository()
    elif orm != "peewee":
        raise ValueError(f"ORM no soportado: {orm}")

    from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository

    return PeeweeTaskRepository()


def get_initialize_sample_data_use_case() -> InitializeSampleDataUseCase:
    return InitializeSampleDataUseCase(repository=get_task_repository())
