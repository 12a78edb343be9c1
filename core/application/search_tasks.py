import logging

from core.domain.models.task import Task, is_blank
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class SearchTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, term: str | None) -> list[Task]:
        logger.debug(f"Buscando tareas con el término: {term!r}")
        if is_blank(term):
            return self._repository.find_all()
        return self._repository.search_by_text(term)
