"""
Domain Layer - Core Business Logic

Heart of the task list. Contains the entity and the repository contract.
Framework-independent and highly testable.

Architecture:
    - Clean Architecture: Domain Layer is the center, no external dependencies
    - Dependency Inversion: Domain defines interfaces, Infrastructure implements

Subdomains:
    - tasks: Task entity and TaskRepositoryProtocol

Usage:
    >>> # Preferred: Import from domain module
    >>> from src.domain import Task, TaskRepositoryProtocol
    >>>
    >>> # Alternative: Import from specific module
    >>> from src.domain.tasks.entities import Task
"""

from .tasks import Task, TaskRepositoryProtocol

__all__ = [
    "Task",
    "TaskRepositoryProtocol",
]
