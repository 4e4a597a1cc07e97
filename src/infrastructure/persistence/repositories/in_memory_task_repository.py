"""
In-Memory Task Repository Implementation

Concrete implementation of TaskRepositoryProtocol from Domain Layer.
Keeps tasks in an append-only list owned by the repository instance.

Responsibility:
    - Implement Domain repository interface
    - Store tasks for the lifetime of the process
    - Look tasks up by linear scan in insertion order

Architecture Notes:
    - Infrastructure Layer (implements Domain interface)
    - No module-level state: every instance owns its own list
    - No locking, single in-process caller
"""

import logging
from typing import Optional

from src.domain.tasks import Task

logger = logging.getLogger(__name__)


class InMemoryTaskRepository:
    """
    List-backed implementation of TaskRepositoryProtocol.

    Storage Strategy:
        - Python list, append on save
        - find_by_id() returns the first match, so a duplicate id never
          shadows the task saved before it
        - Data is lost when the process exits

    Examples:
        >>> repo = InMemoryTaskRepository()
        >>> repo.save(Task(id="1", description="Buy milk"))
        >>> repo.find_by_id("1")
        Task(id='1', description='Buy milk', completed=False)
        >>> repo.find_by_id("2") is None
        True
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def save(self, task: Task) -> None:
        """Append task to the backing list (implements Protocol method)."""
        self._tasks.append(task)
        logger.debug(f"Task saved: id={task.id} (total={len(self._tasks)})")

    def find_by_id(self, task_id: str) -> Optional[Task]:
        """
        Retrieve the first task with a matching id (implements Protocol method).

        Args:
            task_id: Id to look up

        Returns:
            Task if found, None otherwise
        """
        for task in self._tasks:
            if task.id == task_id:
                return task

        logger.debug(f"Task not found: id={task_id}")
        return None

    def count(self) -> int:
        """Number of stored tasks (implements Protocol method)."""
        return len(self._tasks)
