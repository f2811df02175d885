"""
TASKLIST - Local Task List Manager
==================================

Tasks are kept in a single JSON document and edited from an interactive
terminal menu.

Usage:
    from tasklist import TaskDatabase, TaskDocument, TaskFilter, TaskRepository, TaskService

    db = TaskDatabase("~/tasks.json", TaskDocument())
    service = TaskService(TaskRepository(db))

    task = service.add("Clean the room")
    service.mark_as_complete(task.id)
    service.search(TaskFilter(title="room", is_complete=True))
    service.remove_complete()
"""

from .schema import (
    Task,
    TaskDraft,
    TaskDocument,
    TaskModel,
    TaskStats,
    TaskFilter,
    TitleContains,
    TitleMatches,
)

from .database import Database, TaskDatabase, StorageError
from .repository import TaskRepository
from .service import TaskService
from .config import AppOptions, AppState
from .app import Application, Commands

__version__ = "1.0.0"
__all__ = [
    "Application",
    "AppOptions",
    "AppState",
    "Commands",
    "Database",
    "StorageError",
    "Task",
    "TaskDatabase",
    "TaskDocument",
    "TaskDraft",
    "TaskFilter",
    "TaskModel",
    "TaskRepository",
    "TaskService",
    "TaskStats",
    "TitleContains",
    "TitleMatches",
]
