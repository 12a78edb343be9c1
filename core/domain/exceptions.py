class TaskError(Exception):
    """Error base del dominio de tareas."""


class ValidationError(TaskError, ValueError):
    """Los datos recibidos violan una precondición (título vacío, id nulo...)."""


class TaskNotFoundError(TaskError, LookupError):
    def __init__(self, task_id: object) -> None:
        self.task_id = task_id
        super().__init__(f"Tarea con id {task_id} no encontrada")
