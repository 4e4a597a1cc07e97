"""
Tests for InMemoryTaskRepository.

Covers:
- save() and find_by_id() round trip
- Missing id returns None
- Insertion order and duplicate ids
- count()
- Instance isolation
"""

from src.domain import Task
from src.infrastructure.persistence import InMemoryTaskRepository


# ============================================================================
# HAPPY PATH TESTS
# ============================================================================


def test_save_then_find_by_id_returns_task(repository):
    """Test saved task can be found by id."""
    task = Task(id="1", description="Buy milk")

    repository.save(task)

    assert repository.find_by_id("1") == task


def test_find_by_id_on_empty_repository_returns_none(repository):
    """Test lookup on empty repository returns None."""
    assert repository.find_by_id("1") is None


def test_find_by_id_unknown_id_returns_none(repository):
    """Test lookup of an id that was never saved returns None."""
    repository.save(Task(id="1", description="Buy milk"))

    assert repository.find_by_id("2") is None
    assert repository.find_by_id("") is None


def test_count_tracks_saved_tasks(repository):
    """Test count() increases with every save."""
    assert repository.count() == 0

    repository.save(Task(id="1", description="a"))
    repository.save(Task(id="2", description="b"))

    assert repository.count() == 2


# ============================================================================
# EDGE CASES
# ============================================================================


def test_duplicate_id_is_stored_and_first_wins(repository):
    """
    Test saving a duplicate id succeeds silently.

    Verifies:
    - Both tasks are stored (count == 2)
    - find_by_id() returns the first one in insertion order
    """
    first = Task(id="1", description="first")
    second = Task(id="1", description="second")

    repository.save(first)
    repository.save(second)

    assert repository.count() == 2
    assert repository.find_by_id("1") == first


def test_repositories_do_not_share_storage():
    """Test each instance owns its own list."""
    repo_a = InMemoryTaskRepository()
    repo_b = InMemoryTaskRepository()

    repo_a.save(Task(id="1", description="only in a"))

    assert repo_b.find_by_id("1") is None
    assert repo_b.count() == 0
