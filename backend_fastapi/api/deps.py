from fastapi import Depends

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import (
    ListTasksByStatusUseCase,
    ListTasksDueBetweenUseCase,
    ListTasksUseCase,
)
from core.application.overdue_tasks import ListOverdueTasksUseCase
from core.application.search_tasks import SearchTasksUseCase
from core.application.task_statistics import GetTaskStatisticsUseCase
from core.application.update_task import UpdateTaskUseCase
from core.application.update_task_status import UpdateTaskStatusUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.container import get_task_repository


def task_repository() -> TaskRepository:
    return get_task_repository()


def create_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=repository)


def get_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> GetTaskUseCase:
    return GetTaskUseCase(repository=repository)


def list_tasks_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository)


def list_tasks_by_status_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> ListTasksByStatusUseCase:
    return ListTasksByStatusUseCase(repository=repository)


def list_tasks_due_between_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> ListTasksDueBetweenUseCase:
    return ListTasksDueBetweenUseCase(repository=repository)


def update_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=repository)


def update_task_status_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> UpdateTaskStatusUseCase:
    return UpdateTaskStatusUseCase(repository=repository)


def delete_task_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=repository)


def list_overdue_tasks_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> ListOverdueTasksUseCase:
    return ListOverdueTasksUseCase(repository=repository)


def task_statistics_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> GetTaskStatisticsUseCase:
    return GetTaskStatisticsUseCase(repository=repository)


def search_tasks_use_case(
    repository: TaskRepository = Depends(task_repository),
) -> SearchTasksUseCase:
    return SearchTasksUseCase(repository=repository)
