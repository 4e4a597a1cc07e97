"""
Pytest Configuration and Shared Fixtures

Fixtures:
    - repository: Empty InMemoryTaskRepository
    - use_case: TaskUseCase wired to the repository fixture
    - controller: TaskController wired to the use_case fixture

Architecture Notes:
    - Every test gets a fresh object graph (function scope)
    - No shared state between tests

Usage:
    def test_something(controller):
        task = controller.create_task("Buy milk")
        assert task.id == "1"
"""

import pytest

from src.api.controllers import TaskController
from src.application.services import TaskUseCase
from src.infrastructure.persistence import InMemoryTaskRepository


@pytest.fixture
def repository():
    """Empty in-memory repository."""
    return InMemoryTaskRepository()


@pytest.fixture
def use_case(repository):
    """TaskUseCase backed by the repository fixture."""
    return TaskUseCase(repository=repository)


@pytest.fixture
def controller(use_case):
    """TaskController backed by the use_case fixture."""
    return TaskController(use_case=use_case)
