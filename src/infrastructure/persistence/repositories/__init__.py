"""
Repository Implementations Module

Concrete implementations of Domain repository interfaces.

Exports:
    - InMemoryTaskRepository: List-backed implementation
"""

from .in_memory_task_repository import InMemoryTaskRepository

__all__ = [
    "InMemoryTaskRepository",
]
