"""
Task Controller

Responsibility:
    In-process entry point for external callers (an HTTP handler, a CLI,
    a test). Forwards every call to TaskUseCase unchanged.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (TaskUseCase)
    - No business logic, no validation, no error mapping
"""

from typing import Optional

from src.application.services import TaskUseCase
from src.domain.tasks import Task


class TaskController:
    """
    Thin wrapper around TaskUseCase.

    Examples:
        >>> controller = TaskController(use_case=use_case)
        >>> task = controller.create_task("Buy milk")
        >>> controller.get_task_by_id(task.id) == task
        True
    """

    def __init__(self, use_case: TaskUseCase) -> None:
        self.use_case = use_case

    def create_task(self, description: str) -> Task:
        """Create a task (delegates to TaskUseCase.create_task)."""
        return self.use_case.create_task(description)

    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        """Fetch a task or None (delegates to TaskUseCase.get_task_by_id)."""
        return self.use_case.get_task_by_id(task_id)
