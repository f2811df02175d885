"""
TASKLIST - Schema Definition
============================
Persisted document, task records and the filter value types used to
select them.
"""

import re
import uuid
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


def new_task_id() -> str:
    """Opaque task identifier"""
    return uuid.uuid4().hex


class TaskDraft(BaseModel):
    """Task fields supplied by the caller before an id is assigned"""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    is_complete: bool = Field(default=False, alias="isComplete")


class Task(BaseModel):
    """Individual task record as stored in the document"""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_task_id)
    title: str
    is_complete: bool = Field(default=False, alias="isComplete")


class TaskModel(Task):
    """Task as handed to the display layer"""

    @classmethod
    def from_task(cls, task: Task) -> "TaskModel":
        return cls(id=task.id, title=task.title, is_complete=task.is_complete)

    def __str__(self) -> str:
        return f"{self.title}\t{'(completed)' if self.is_complete else ''}"


class TaskDocument(BaseModel):
    """Complete task file - everything that is written to disk"""
    tasks: List[Task] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_ids(self) -> "TaskDocument":
        seen = set()
        for task in self.tasks:
            if task.id in seen:
                raise ValueError(f"duplicate task id: {task.id}")
            seen.add(task.id)
        return self

    def dump(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class TaskStats(BaseModel):
    total: int = 0
    completed: int = 0
    incomplete: int = 0


# ============================================================
# FILTERS
# ============================================================

@dataclass(frozen=True)
class TitleContains:
    """Literal substring match"""
    text: str

    def matches(self, title: str) -> bool:
        return self.text in title


@dataclass(frozen=True)
class TitleMatches:
    """Regular expression match (re.search semantics)"""
    pattern: re.Pattern

    def matches(self, title: str) -> bool:
        return self.pattern.search(title) is not None


TitleFilter = Union[TitleContains, TitleMatches]


def _title_filter(value) -> Optional[TitleFilter]:
    if value is None or isinstance(value, (TitleContains, TitleMatches)):
        return value
    if isinstance(value, str):
        return TitleContains(value)
    if isinstance(value, re.Pattern):
        return TitleMatches(value)
    raise TypeError(f"title filter must be str or re.Pattern, got {type(value).__name__}")


def _id_filter(value) -> Union[None, str, FrozenSet[str]]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, Iterable):
        ids = frozenset(value)
        if all(isinstance(i, str) for i in ids):
            return ids
    raise TypeError(f"id filter must be str or a collection of str, got {type(value).__name__}")


@dataclass(frozen=True)
class TaskFilter:
    """
    Conjunction of optional predicates.

    A missing predicate puts no constraint on that field, so
    TaskFilter() matches every task.
    """
    id: Union[None, str, FrozenSet[str]] = None
    title: Optional[TitleFilter] = None
    is_complete: Optional[bool] = None

    def __post_init__(self):
        # Raw str / re.Pattern forms are resolved once, here
        object.__setattr__(self, "id", _id_filter(self.id))
        object.__setattr__(self, "title", _title_filter(self.title))
        if self.is_complete is not None and not isinstance(self.is_complete, bool):
            raise TypeError("is_complete filter must be a bool")

    def matches(self, task: Task) -> bool:
        if self.id is not None:
            if isinstance(self.id, str):
                if task.id != self.id:
                    return False
            elif task.id not in self.id:
                return False

        if self.title is not None and not self.title.matches(task.title):
            return False

        if self.is_complete is not None and task.is_complete != self.is_complete:
            return False

        return True
