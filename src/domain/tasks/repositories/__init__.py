"""
Task Repository Interfaces Module

Repository contracts defined in Domain Layer, implemented in Infrastructure Layer.

This module exports:
    - TaskRepositoryProtocol: Repository interface for Task
"""

from .task_repository import TaskRepositoryProtocol

__all__ = [
    "TaskRepositoryProtocol",
]
