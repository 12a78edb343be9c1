import logging
from datetime import timedelta

from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.domain.clock import Clock, utcnow
from core.domain.models.task import TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class InitializeSampleDataUseCase:
    """
    Carga tareas de ejemplo para desarrollo si el almacén está vacío.

    Es idempotente: con cualquier tarea ya guardada no hace nada.
    """

    def __init__(self, repository: TaskRepository, clock: Clock = utcnow) -> None:
        self._repository = repository
        self._clock = clock
        self._create = CreateTaskUseCase(repository)

    def _sample_commands(self) -> list[CreateTaskCommand]:
        now = self._clock()
        return [
            CreateTaskCommand(
                title="Review case documents",
                description="Review all submitted documents for case ABC123",
                status=TaskStatus.PENDING,
                due_date=now + timedelta(days=2),
            ),
            CreateTaskCommand(
                title="Schedule hearing",
                description="Schedule hearing for case DEF456",
                status=TaskStatus.IN_PROGRESS,
                due_date=now + timedelta(days=5),
            ),
            CreateTaskCommand(
                title="Prepare case summary",
                description="Prepare comprehensive case summary for review",
                status=TaskStatus.COMPLETED,
                due_date=now - timedelta(days=1),
            ),
            # Queda vencida desde el primer momento.
            CreateTaskCommand(
                title="File legal documents",
                description="File required legal documents for case GHI789",
                status=TaskStatus.PENDING,
                due_date=now - timedelta(days=1),
            ),
        ]

    def execute(self) -> int:
        if self._repository.count() > 0:
            logger.debug("Ya existen tareas, se omite la carga de ejemplo")
            return 0

        logger.info("Cargando tareas de ejemplo")
        commands = self._sample_commands()
        for cmd in commands:
            self._create.execute(cmd)
        logger.info(f"{len(commands)} tareas de ejemplo creadas")
        return len(commands)
