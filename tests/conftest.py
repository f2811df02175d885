# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist.config import AppOptions, AppState
from tasklist.repository import TaskRepository
from tasklist.service import TaskService

from .fakes import FakeDatabase

SAMPLE_TASKS = [
    {"title": "打扫房间", "is_complete": False},
    {"title": "买菜", "is_complete": False},
    {"title": "买水", "is_complete": True},
    {"title": "洗衣服", "is_complete": True},
    {"title": "洗碗", "is_complete": True},
]


@pytest.fixture()
def db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture()
def repo(db: FakeDatabase) -> TaskRepository:
    return TaskRepository(db)


@pytest.fixture()
def filled_repo(repo: TaskRepository) -> TaskRepository:
    """Repository holding SAMPLE_TASKS in order."""
    repo.insert_many(SAMPLE_TASKS)
    return repo


@pytest.fixture()
def service(repo: TaskRepository) -> TaskService:
    return TaskService(repo)


@pytest.fixture()
def task_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def options(task_file: Path) -> AppOptions:
    return AppOptions(state=AppState(show_completed=True), storage_location=task_file)
