"""
Infrastructure Layer - Technical Implementations

Implements the contracts defined by the Domain Layer.

Architecture:
    - Implements Domain repository interfaces (Dependency Inversion)
    - No Domain business logic (only technical implementations)

Modules:
    - persistence: Repository implementations

Exports:
    From persistence:
        - InMemoryTaskRepository: Process-memory task storage

Usage:
    >>> from src.infrastructure import InMemoryTaskRepository
    >>> repository = InMemoryTaskRepository()
"""

# Persistence
from .persistence import InMemoryTaskRepository

__all__ = [
    # Persistence
    "InMemoryTaskRepository",
]
