"""
Persistence Infrastructure Module

Data persistence implementations.

Exports:
    From repositories:
        - InMemoryTaskRepository
"""

from .repositories import InMemoryTaskRepository

__all__ = [
    "InMemoryTaskRepository",
]
