"""
API Controllers Package

Controllers are thin wrappers around Application Layer use cases.

Available Controllers:
    - TaskController: Task creation and lookup
"""

from .task_controller import TaskController

__all__ = ["TaskController"]
