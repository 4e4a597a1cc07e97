"""
TaskRepository Interface

Repository pattern interface for Task persistence.
Defines the contract for storing and retrieving tasks.

Responsibility:
    - Define data access contract (interface)
    - Enable Dependency Inversion (Domain defines, Infrastructure implements)
    - Support testing (any object with these methods can be injected)

Architecture Notes:
    - Protocol-based interface (structural typing, no inheritance needed)
    - Synchronous methods (single in-process caller)
    - Implementation in Infrastructure layer (InMemoryTaskRepository)
"""

from typing import Optional, Protocol

from ..entities.task import Task


class TaskRepositoryProtocol(Protocol):
    """
    Protocol defining the contract for Task persistence.

    Defined in the Domain Layer, implemented in the Infrastructure Layer.
    The Application Layer (TaskUseCase) depends only on this contract.

    Scope:
        - save(): Store a task
        - find_by_id(): Retrieve a task by its id
        - count(): Number of stored tasks (used to assign the next id)

    Not included:
        - update() / delete(): tasks are never changed or removed
        - filtering/pagination

    Usage:
        >>> class TaskUseCase:
        ...     def __init__(self, repository: TaskRepositoryProtocol):
        ...         self.repository = repository
    """

    def save(self, task: Task) -> None:
        """
        Store a task.

        Business Rules:
            - Appends the task; existing tasks are untouched
            - No duplicate-id check: saving a second task with the same id
              succeeds silently and the first one keeps winning lookups

        Args:
            task: Fully-formed Task entity to store
        """
        ...

    def find_by_id(self, task_id: str) -> Optional[Task]:
        """
        Retrieve a task by its id.

        Args:
            task_id: Id of the task to retrieve

        Returns:
            First stored Task with this id (insertion order), None if absent.
            A missing id is a normal outcome, never an error.
        """
        ...

    def count(self) -> int:
        """
        Number of tasks currently stored.

        Returns:
            Count of saved tasks, duplicates included
        """
        ...
