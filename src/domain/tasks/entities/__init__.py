"""
Task Domain Entities.

Available Entities:
    - Task: Immutable record of a single task
"""

from src.domain.tasks.entities.task import Task

__all__ = [
    "Task",
]
