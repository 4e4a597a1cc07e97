"""
Composition Root

Main entry point for the task list demo.

Responsibility:
    - Build the object graph: repository -> use case -> controller
    - Run the walkthrough: create one task, fetch it back
    - Load settings and configure logging

Architecture Notes:
    - The only module that knows about concrete classes of every layer
    - Dependencies are constructed explicitly and injected, nothing is
      cached at module level

Usage:
    python -m src.main
    python -m src.main --description "Water plants" --log-level DEBUG
    clean-tasks-demo --description "Water plants"
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from src.api.controllers import TaskController
from src.application.services import TaskUseCase
from src.domain.tasks import Task, TaskRepositoryProtocol
from src.infrastructure.persistence import InMemoryTaskRepository
from src.shared import configure_logging, get_settings
from src.shared.config import VALID_LOG_LEVELS

logger = logging.getLogger(__name__)


def build_task_controller(
    repository: Optional[TaskRepositoryProtocol] = None,
) -> TaskController:
    """
    Wire the layers together.

    Args:
        repository: Repository to inject (default: a new InMemoryTaskRepository)

    Returns:
        TaskController backed by its own TaskUseCase and repository

    Examples:
        >>> controller = build_task_controller()
        >>> controller.create_task("Buy milk").id
        '1'
    """
    if repository is None:
        repository = InMemoryTaskRepository()

    use_case = TaskUseCase(repository=repository)
    return TaskController(use_case=use_case)


def run_demo(
    controller: TaskController, description: str
) -> tuple[Task, Optional[Task]]:
    """Create one task through the controller and fetch it back by id."""
    created = controller.create_task(description)
    fetched = controller.get_task_by_id(created.id)
    return created, fetched


def parse_args(
    argv: Optional[Sequence[str]] = None, default_description: str = "Buy milk"
) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Create a task in an in-memory task list and fetch it back",
    )

    parser.add_argument(
        "--description",
        default=default_description,
        help=f"Description of the task to create (default: {default_description!r})",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Override LOG_LEVEL for this run (e.g. DEBUG)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the demo.

    Returns:
        0 if the fetched task equals the created one, 1 otherwise
    """
    settings = get_settings()
    args = parse_args(argv, default_description=settings.demo_task_description)
    configure_logging(settings, level=args.log_level)

    controller = build_task_controller()
    created, fetched = run_demo(controller, args.description)

    print(f"Created: {created}")
    print(f"Fetched: {fetched}")

    if fetched != created:
        logger.error(f"Fetched task does not match created task: id={created.id}")
        return 1

    logger.info("Demo completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
