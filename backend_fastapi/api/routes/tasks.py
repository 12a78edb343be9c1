from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_overdue_tasks_use_case,
    list_tasks_by_status_use_case,
    list_tasks_due_between_use_case,
    list_tasks_use_case,
    search_tasks_use_case,
    task_statistics_use_case,
    update_task_status_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import (
    CreateTaskRequest,
    TaskResponse,
    TaskStatisticsResponse,
    UpdateTaskRequest,
    UpdateTaskStatusRequest,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
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
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.application.update_task_status import UpdateTaskStatusUseCase
from core.domain.clock import normalize
from core.domain.exceptions import TaskNotFoundError
from core.domain.models.task import Task, TaskStatus

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


def _parse_task_id(raw_id: str) -> UUID:
    # Un id que no es UUID no puede existir: se trata como 404, no como 422.
    try:
        return UUID(raw_id)
    except ValueError:
        raise TaskNotFoundError(raw_id) from None


def _to_response(tasks: list[Task]) -> list[TaskResponse]:
    return [TaskResponse.from_domain(t) for t in tasks]


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def create_task(
    body: CreateTaskRequest,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> TaskResponse:
    """
    Crea una nueva tarea.

    - **title**: Título obligatorio (no vacío).
    - **description**: Descripción opcional.
    - **status**: Estado inicial (por defecto PENDING).
    - **dueDate**: Fecha límite opcional (ISO-8601).
    """
    task = use_case.execute(
        CreateTaskCommand(
            title=body.title,
            description=body.description,
            status=body.status,
            due_date=body.due_date,
        )
    )
    return TaskResponse.from_domain(task)


@router.get(
    "",
    response_model=list[TaskResponse],
    summary="Listar tareas",
)
def list_tasks(
    status_filter: TaskStatus | None = Query(default=None, alias="status"),
    list_all: ListTasksUseCase = Depends(list_tasks_use_case),
    list_by_status: ListTasksByStatusUseCase = Depends(list_tasks_by_status_use_case),
) -> list[TaskResponse]:
    """
    Lista las tareas ordenadas por fecha límite (las que no tienen, al final).
    Con `?status=` filtra por estado.
    """
    if status_filter is not None:
        return _to_response(list_by_status.execute(status_filter))
    return _to_response(list_all.execute())


@router.get(
    "/statuses",
    response_model=list[TaskStatus],
    summary="Estados de tarea disponibles",
)
def list_statuses() -> list[TaskStatus]:
    return list(TaskStatus)


@router.get(
    "/overdue",
    response_model=list[TaskResponse],
    summary="Tareas vencidas",
)
def list_overdue_tasks(
    use_case: ListOverdueTasksUseCase = Depends(list_overdue_tasks_use_case),
) -> list[TaskResponse]:
    """Tareas con fecha límite pasada que no están completadas ni canceladas."""
    return _to_response(use_case.execute())


@router.get(
    "/statistics",
    response_model=TaskStatisticsResponse,
    summary="Estadísticas de tareas",
)
def task_statistics(
    use_case: GetTaskStatisticsUseCase = Depends(task_statistics_use_case),
) -> TaskStatisticsResponse:
    return TaskStatisticsResponse.from_domain(use_case.execute())


@router.get(
    "/search",
    response_model=list[TaskResponse],
    summary="Buscar tareas por texto",
)
def search_tasks(
    q: str | None = None,
    use_case: SearchTasksUseCase = Depends(search_tasks_use_case),
) -> list[TaskResponse]:
    """
    Busca `q` en título o descripción sin distinguir mayúsculas.
    Sin término devuelve todas las tareas.
    """
    return _to_response(use_case.execute(q))


@router.get(
    "/due",
    response_model=list[TaskResponse],
    summary="Tareas con vencimiento en un intervalo",
)
def list_tasks_due_between(
    start: datetime | None = None,
    end: datetime | None = None,
    use_case: ListTasksDueBetweenUseCase = Depends(list_tasks_due_between_use_case),
) -> list[TaskResponse]:
    return _to_response(use_case.execute(normalize(start), normalize(end)))


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Obtener una tarea",
)
def get_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskResponse:
    parsed_id = _parse_task_id(task_id)
    task = use_case.execute(parsed_id)
    if task is None:
        raise TaskNotFoundError(parsed_id)
    return TaskResponse.from_domain(task)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Editar una tarea existente",
)
def update_task(
    task_id: str,
    body: UpdateTaskRequest,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> TaskResponse:
    """
    Sobrescribe título, descripción y fecha límite.
    El estado solo cambia si viene en la petición.
    """
    parsed_id = _parse_task_id(task_id)
    task = use_case.execute(
        parsed_id,
        UpdateTaskCommand(
            title=body.title,
            description=body.description,
            status=body.status,
            due_date=body.due_date,
        ),
    )
    if task is None:
        raise TaskNotFoundError(parsed_id)
    return TaskResponse.from_domain(task)


@router.put(
    "/{task_id}/status",
    response_model=TaskResponse,
    summary="Cambiar el estado de una tarea",
)
def update_task_status(
    task_id: str,
    body: UpdateTaskStatusRequest,
    use_case: UpdateTaskStatusUseCase = Depends(update_task_status_use_case),
) -> TaskResponse:
    parsed_id = _parse_task_id(task_id)
    task = use_case.execute(parsed_id, body.status)
    if task is None:
        raise TaskNotFoundError(parsed_id)
    return TaskResponse.from_domain(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> None:
    parsed_id = _parse_task_id(task_id)
    if not use_case.execute(parsed_id):
        raise TaskNotFoundError(parsed_id)
