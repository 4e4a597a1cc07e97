"""
Application Layer - Use Cases

Responsibility:
    Coordinates the flow of data between API and Domain layers.

Contains:
    - services/: Use Cases (TaskUseCase)

Does NOT contain:
    - Domain entities or contracts (in Domain Layer)
    - Caller-facing adapters (in API Layer)
    - Storage implementations (in Infrastructure Layer)
"""

from src.application.services import TaskUseCase

__all__ = [
    "TaskUseCase",
]
