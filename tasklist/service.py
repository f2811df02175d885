"""
TASKLIST - Task Service
=======================
Display-facing wrapper around TaskRepository.
"""

import logging
from typing import List, Optional

from .repository import TaskRepository
from .schema import TaskFilter, TaskModel, TaskStats

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, task_repository: TaskRepository):
        self.task_repository = task_repository

    def add(self, title: str) -> TaskModel:
        task = self.task_repository.insert_one(title, is_complete=False)
        logger.info(f"➕ Added task: {task.title} ({task.id})")
        return TaskModel.from_task(task)

    def get_by_id(self, task_id: str) -> Optional[TaskModel]:
        task = self.task_repository.get_by_id(task_id)
        if task is None:
            return None
        return TaskModel.from_task(task)

    def search(self, task_filter: Optional[TaskFilter] = None) -> List[TaskModel]:
        return [TaskModel.from_task(task) for task in self.task_repository.get_many(task_filter)]

    def mark_as_complete(self, task_id: str) -> None:
        self.task_repository.update_by_id(task_id, is_complete=True)

    def mark_as_incomplete(self, task_id: str) -> None:
        self.task_repository.update_by_id(task_id, is_complete=False)

    def remove(self, task_id: str) -> None:
        self.task_repository.remove_by_id(task_id)

    def remove_complete(self) -> None:
        self.task_repository.remove_many(TaskFilter(is_complete=True))

    def get_stats(self) -> TaskStats:
        """Counts from full scans; incomplete is derived so the totals always add up"""
        total = len(self.search())
        completed = len(self.search(TaskFilter(is_complete=True)))
        return TaskStats(total=total, completed=completed, incomplete=total - completed)
