"""
TASKLIST - Storage Adapter
==========================
Whole-document JSON persistence. The document is read once when the
database is opened; every update rewrites the complete file.
"""

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Callable, Protocol, Union

from .schema import TaskDocument

logger = logging.getLogger(__name__)


class StorageError(ValueError):
    """Task file exists but cannot be loaded"""


class Database(Protocol):
    """What the repository needs from storage"""

    @property
    def data(self) -> TaskDocument:
        ...

    def update(self, fn: Callable[[TaskDocument], Any]) -> None:
        ...


class TaskDatabase:
    """
    JSON file backed task document.

    The file is only created on the first update; until then a missing
    file simply means "start from default_data".
    """

    def __init__(self, filename: Union[str, Path], default_data: TaskDocument):
        self.path = Path(filename).expanduser()
        self._data = self._read(default_data)

    @property
    def data(self) -> TaskDocument:
        return self._data

    def update(self, fn: Callable[[TaskDocument], Any]) -> None:
        """Apply fn to the in-memory document, then persist all of it"""
        fn(self._data)
        self._write()

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def _read(self, default_data: TaskDocument) -> TaskDocument:
        if not self.path.exists():
            logger.debug(f"No task file at {self.path}, starting from defaults")
            return default_data.model_copy(deep=True)

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            data = TaskDocument.model_validate(raw)
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError, UnicodeDecodeError and ValidationError
            raise StorageError(f"Cannot load task file {self.path}: {e}") from e

        logger.info(f"📂 Loaded {len(data.tasks)} tasks from {self.path}")
        return data

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._data.dump(), f, indent=2, ensure_ascii=False)
            self._copy_mode(tmp_name)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.info(f"✅ Saved {len(self._data.tasks)} tasks to {self.path}")

    def _copy_mode(self, tmp_name: str) -> None:
        """mkstemp creates 0600 files; keep the permissions the task file had"""
        if self.path.exists():
            shutil.copymode(self.path, tmp_name)
        else:
            umask = os.umask(0)
            os.umask(umask)
            os.chmod(tmp_name, 0o666 & ~umask)
