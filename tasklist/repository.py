"""
TASKLIST - Task Repository
==========================
Insert, lookup, filtered update and filtered removal over the task
document. All writes go through Database.update, one call per operation.
"""

import logging
from typing import Any, Collection, Iterable, List, Mapping, Optional, Union

from .database import Database
from .schema import Task, TaskDraft, TaskFilter, new_task_id

logger = logging.getLogger(__name__)


class TaskRepository:
    """Filter/update engine for task records"""

    def __init__(self, db: Database):
        self.db = db

    # ========================================
    # INSERT
    # ========================================

    def insert_one(self, title: str, is_complete: bool = False) -> Task:
        return self.insert_many([TaskDraft(title=title, is_complete=is_complete)])[0]

    def insert_many(self, drafts: Iterable[Union[TaskDraft, Mapping[str, Any]]]) -> List[Task]:
        """Append one record per draft (input order) in a single write"""
        drafts = [
            d if isinstance(d, TaskDraft) else TaskDraft.model_validate(d)
            for d in drafts
        ]
        if not drafts:
            return []

        taken = {task.id for task in self.db.data.tasks}
        tasks = []
        for draft in drafts:
            task_id = new_task_id()
            while task_id in taken:
                task_id = new_task_id()
            taken.add(task_id)
            tasks.append(Task(id=task_id, title=draft.title, is_complete=draft.is_complete))

        def append(data):
            data.tasks.extend(task.model_copy() for task in tasks)

        self.db.update(append)
        logger.debug(f"Inserted {len(tasks)} tasks: {[t.id for t in tasks]}")
        return tasks

    # ========================================
    # LOOKUP
    # ========================================

    def get_by_id(self, task_id: str) -> Optional[Task]:
        for task in self.db.data.tasks:
            if task.id == task_id:
                return task.model_copy()
        return None

    def get_many(self, task_filter: Optional[TaskFilter] = None) -> List[Task]:
        """Tasks matching every predicate of task_filter, in stored order"""
        tasks = self.db.data.tasks
        if task_filter is not None:
            tasks = [task for task in tasks if task_filter.matches(task)]
        return [task.model_copy() for task in tasks]

    # ========================================
    # UPDATE
    # ========================================

    def _update(
        self,
        task_ids: Collection[str],
        title: Optional[str] = None,
        is_complete: Optional[bool] = None,
    ) -> None:
        if title is None and is_complete is None:
            return

        task_ids = set(task_ids)
        if not any(task.id in task_ids for task in self.db.data.tasks):
            return

        def apply(data):
            for task in data.tasks:
                if task.id not in task_ids:
                    continue
                if title is not None:
                    task.title = title
                if is_complete is not None:
                    task.is_complete = is_complete

        self.db.update(apply)
        logger.debug(f"Updated {len(task_ids)} tasks (title={title!r}, is_complete={is_complete})")

    def update_by_id(
        self,
        task_id: str,
        *,
        title: Optional[str] = None,
        is_complete: Optional[bool] = None,
    ) -> None:
        if self.get_by_id(task_id) is None:
            logger.warning(f"Update skipped, task not found: {task_id}")
            return
        self._update([task_id], title=title, is_complete=is_complete)

    def update_many(
        self,
        task_filter: Optional[TaskFilter],
        *,
        title: Optional[str] = None,
        is_complete: Optional[bool] = None,
    ) -> None:
        # The id set is fixed before anything changes; tasks that start
        # matching because of this update are not revisited.
        task_ids = [task.id for task in self.get_many(task_filter)]
        self._update(task_ids, title=title, is_complete=is_complete)

    # ========================================
    # REMOVE
    # ========================================

    def _remove(self, task_ids: Collection[str]) -> None:
        task_ids = set(task_ids)
        if not any(task.id in task_ids for task in self.db.data.tasks):
            return

        def drop(data):
            data.tasks = [task for task in data.tasks if task.id not in task_ids]

        self.db.update(drop)
        logger.debug(f"Removed {len(task_ids)} tasks")

    def remove_by_id(self, task_id: str) -> None:
        if self.get_by_id(task_id) is None:
            logger.warning(f"Remove skipped, task not found: {task_id}")
            return
        self._remove([task_id])

    def remove_many(self, task_filter: Optional[TaskFilter]) -> None:
        task_ids = [task.id for task in self.get_many(task_filter)]
        self._remove(task_ids)
