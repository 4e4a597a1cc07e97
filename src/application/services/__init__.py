"""
Application Services

Responsibility:
    Use cases that orchestrate domain entities and repositories.

Contains:
    - TaskUseCase: Create tasks and look them up by id

Does NOT contain:
    - Direct infrastructure calls (use dependency injection)
"""

from src.application.services.task_use_case import TaskUseCase

__all__ = ["TaskUseCase"]
