"""
TASKLIST - Configuration
========================
One explicit options object. Override fields by constructing AppOptions
or with model_copy(update=...); nested models are replaced whole.
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field

from .schema import TaskDocument

ENV_FILE = "TASKLIST_FILE"
DEFAULT_FILENAME = "tasks.json"


def default_storage_location() -> Path:
    """$TASKLIST_FILE if set, else ~/tasks.json"""
    raw = os.getenv(ENV_FILE)
    if raw is None or raw.strip() == "":
        return Path.home() / DEFAULT_FILENAME
    return Path(raw).expanduser()


class AppState(BaseModel):
    """Mutable display state of the interactive shell"""
    show_completed: bool = True


class AppOptions(BaseModel):
    state: AppState = Field(default_factory=AppState)
    storage_location: Path = Field(default_factory=default_storage_location)
    default_data: TaskDocument = Field(default_factory=TaskDocument)
