"""
Task Entity.

Core domain entity of the task list: a plain record with identity,
a free-form description and a completion flag.

Architecture Notes:
    - Part of Domain Layer (no framework or storage imports)
    - Frozen dataclass: tasks are never mutated after creation
    - Identity is assigned by the Application Layer (TaskUseCase),
      not generated here
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    """
    Immutable entity representing a single task.

    Equality is by value, so a task fetched back from a repository compares
    equal to the task that was created.

    Attributes:
        id: Sequential identifier as string ("1", "2", ...), unique within
            one repository instance, not stable across process restarts
        description: Caller-supplied text, no length or content rules
        completed: Completion flag, False at creation

    Examples:
        >>> task = Task(id="1", description="Buy milk")
        >>> task.completed
        False
        >>> task == Task(id="1", description="Buy milk", completed=False)
        True
    """

    id: str
    description: str
    completed: bool = False
