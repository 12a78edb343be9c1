import logging

from core.application.overdue_tasks import ListOverdueTasksUseCase
from core.domain.clock import Clock, utcnow
from core.domain.models.task import TaskStatistics, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class GetTaskStatisticsUseCase:
    """Recuento por estado calculado en cada llamada, sin caché."""

    def __init__(self, repository: TaskRepository, clock: Clock = utcnow) -> None:
        self._repository = repository
        self._overdue = ListOverdueTasksUseCase(repository, clock=clock)

    def execute(self) -> TaskStatistics:
        logger.debug("Calculando estadísticas de tareas")
        return TaskStatistics(
            total=self._repository.count(),
            pending=self._repository.count_by_status(TaskStatus.PENDING),
            in_progress=self._repository.count_by_status(TaskStatus.IN_PROGRESS),
            completed=self._repository.count_by_status(TaskStatus.COMPLETED),
            cancelled=self._repository.count_by_status(TaskStatus.CANCELLED),
            overdue=len(self._overdue.execute()),
        )
