"""
Task Use Case

Responsibility:
    Business rules of the task list: creates tasks with sequential ids
    and retrieves them by id. Storage is delegated to an injected repository.

Architecture Notes:
    - Part of Application Layer (Services)
    - Depends on TaskRepositoryProtocol (Domain Layer), never on a concrete class
    - Called by API Layer (TaskController)
    - Synchronous, single-step operations

Does NOT contain:
    - Storage details (delegated to Infrastructure Layer)
    - Caller-facing concerns (belongs to API Layer)
"""

import logging
from typing import Optional

from src.domain.tasks import Task, TaskRepositoryProtocol

logger = logging.getLogger(__name__)


class TaskUseCase:
    """
    Use case for creating and looking up tasks.

    Id assignment:
        The next id is the number of tasks already stored plus one, as a
        string. Ids are therefore "1", "2", ... per repository instance.

    Examples:
        >>> from src.infrastructure import InMemoryTaskRepository
        >>> use_case = TaskUseCase(repository=InMemoryTaskRepository())
        >>> use_case.create_task("Buy milk")
        Task(id='1', description='Buy milk', completed=False)
        >>> use_case.get_task_by_id("1")
        Task(id='1', description='Buy milk', completed=False)
        >>> use_case.get_task_by_id("2") is None
        True
    """

    def __init__(self, repository: TaskRepositoryProtocol) -> None:
        """
        Initialize with dependencies.

        Args:
            repository: Any object implementing TaskRepositoryProtocol
        """
        self.repository = repository

    def create_task(self, description: str) -> Task:
        """
        Create a new task and persist it.

        Process Flow:
            1. Compute next id from the repository count
            2. Build Task with completed=False
            3. Save it (exactly one repository write)
            4. Return the created task

        Args:
            description: Free-form task text, stored as given

        Returns:
            The created Task
        """
        task_id = str(self.repository.count() + 1)
        task = Task(id=task_id, description=description, completed=False)

        self.repository.save(task)
        logger.info(f"Task created: id={task.id}")

        return task

    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        """
        Look a task up by id.

        Args:
            task_id: Id returned by create_task()

        Returns:
            The stored Task, or None if no task has this id
        """
        return self.repository.find_by_id(task_id)
