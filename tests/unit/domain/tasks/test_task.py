"""
Tests for Task Entity.
Covers: creation, defaults, immutability, value equality.
"""

import dataclasses

import pytest

from src.domain import Task


def test_create_task_defaults_to_not_completed():
    """Test Task is created with completed=False by default."""
    task = Task(id="1", description="Buy milk")

    assert task.id == "1"
    assert task.description == "Buy milk"
    assert task.completed is False


def test_task_accepts_any_description():
    """Test Task stores empty and long descriptions unchanged."""
    assert Task(id="1", description="").description == ""
    assert Task(id="2", description="x" * 10_000).description == "x" * 10_000


def test_task_is_immutable():
    """Test Task fields cannot be reassigned after creation."""
    task = Task(id="1", description="Buy milk")

    with pytest.raises(dataclasses.FrozenInstanceError):
        task.completed = True  # type: ignore[misc]


def test_tasks_with_same_values_are_equal():
    """Test Task equality is by value."""
    assert Task(id="1", description="Buy milk") == Task(
        id="1", description="Buy milk", completed=False
    )
    assert Task(id="1", description="Buy milk") != Task(id="2", description="Buy milk")
