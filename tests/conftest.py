"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config, data and log
directories.
"""

from __future__ import annotations

import logging
import logging.handlers
from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from rich.logging import RichHandler

from tasklist_cli.models import Difficulty, Task, TaskStatus
from tasklist_cli.repositories import TaskRepository
from tasklist_cli.services.task_service import TaskService

# ---------------------------------------------------------------------------
# Logging / config isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send the application log to tmp_path and rebuild it for every test."""
    import tasklist_cli.utils.logger as logger_mod

    def _reset():
        logger = logging.getLogger("tasklist_cli")
        for handler in list(logger.handlers):
            if not isinstance(handler, (logging.handlers.RotatingFileHandler, RichHandler)):
                continue
            handler.close()
            logger.removeHandler(handler)
        logger_mod._logger = None

    _reset()
    with patch("tasklist_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    _reset()


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only.
    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from tasklist_cli.services.config_service import ConfigService, get_config_service

    get_config_service.cache_clear()
    with (
        patch(
            "tasklist_cli.services.config_service.user_config_dir",
            return_value=str(tmp_path / "config"),
        ),
        patch(
            "tasklist_cli.services.config_service.user_data_dir",
            return_value=str(tmp_path / "data"),
        ),
    ):
        yield ConfigService()
    get_config_service.cache_clear()


@pytest.fixture()
def cli_env(tmp_path):
    """Patch platform dirs for whole CLI runs that go through get_config_service()."""
    from tasklist_cli.services.config_service import get_config_service

    get_config_service.cache_clear()
    with (
        patch(
            "tasklist_cli.services.config_service.user_config_dir",
            return_value=str(tmp_path / "config"),
        ),
        patch(
            "tasklist_cli.services.config_service.user_data_dir",
            return_value=str(tmp_path / "data"),
        ),
    ):
        yield tmp_path
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Task helpers
# ---------------------------------------------------------------------------


class MemoryTaskRepository(TaskRepository):
    """Repository keeping the last saved snapshot in memory."""

    def __init__(self, tasks: list[Task] | None = None):
        self.saved: list[Task] = list(tasks or [])
        self.save_calls = 0

    def load_all(self) -> list[Task]:
        return [t.model_copy() for t in self.saved]

    def save_all(self, tasks: list[Task]) -> None:
        self.save_calls += 1
        self.saved = [t.model_copy() for t in tasks]


def make_task(id_: int = 1, title: str = "Buy milk", **fields) -> Task:
    """Build a valid Task with fixed timestamps."""
    stamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)
    data = {
        "id": id_,
        "title": title,
        "description": "",
        "status": TaskStatus.PENDING,
        "difficulty": Difficulty.EASY,
        "created_at": stamp,
        "due_date": "",
        "edited_at": stamp,
        "cost": 0.0,
    }
    data.update(fields)
    return Task(**data)


@pytest.fixture()
def memory_repo():
    return MemoryTaskRepository()


@pytest.fixture()
def task_service(memory_repo):
    """TaskService over an empty in-memory repository."""
    service = TaskService(memory_repo)
    service.load()
    return service


@pytest.fixture()
def task_factory():
    """The make_task builder, for tests that need several tasks."""
    return make_task


@pytest.fixture()
def cli_store(cli_env):
    """TaskService bound to the tasks file CLI runs use; call .load() to re-read."""
    from tasklist_cli.adapters import JsonTaskRepository

    service = TaskService(JsonTaskRepository(cli_env / "data" / "tasks.json"))
    service.load()
    return service
