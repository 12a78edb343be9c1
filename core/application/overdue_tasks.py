import logging

from core.domain.clock import Clock, utcnow
from core.domain.models.task import CLOSED_STATUSES, Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class ListOverdueTasksUseCase:
    def __init__(self, repository: TaskRepository, clock: Clock = utcnow) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self) -> list[Task]:
        now = self._clock()
        logger.debug(f"Buscando tareas vencidas a {now.isoformat()}")
        return self._repository.find_overdue(now, CLOSED_STATUSES)
