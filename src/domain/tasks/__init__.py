"""
Tasks Subdomain

Entities and repository contracts of the task list.

Exports:
    - Task: Core entity
    - TaskRepositoryProtocol: Repository interface
"""

from .entities import Task
from .repositories import TaskRepositoryProtocol

__all__ = [
    "Task",
    "TaskRepositoryProtocol",
]
