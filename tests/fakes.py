# tests/fakes.py

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any, Callable

from tasklist.app import Choice
from tasklist.schema import TaskDocument


class FakeDatabase:
    """
    In-memory Database: applies updates and counts them instead of
    writing a file.
    """

    def __init__(self, data: TaskDocument | None = None) -> None:
        self.data = data if data is not None else TaskDocument()
        self.writes = 0

    def update(self, fn: Callable[[TaskDocument], Any]) -> None:
        fn(self.data)
        self.writes += 1


class FakePrompter:
    """
    Scripted Prompter.

    - select() pops the next scripted answer (raises EOFError when the script runs out)
    - checkbox() answers may be a list of values or a callable(choices) -> list
    - every call is recorded for assertions
    """

    def __init__(
        self,
        selections: Iterable[Any] = (),
        texts: Iterable[str] = (),
        checkboxes: Iterable[Any] = (),
    ) -> None:
        self.selections = deque(selections)
        self.texts = deque(texts)
        self.checkboxes = deque(checkboxes)
        self.menus: list[list[Choice]] = []
        self.checkbox_choices: list[list[Choice]] = []
        self.clears = 0

    def clear(self) -> None:
        self.clears += 1

    def select(self, message: str, choices: list[Choice]) -> Any:
        self.menus.append(choices)
        if not self.selections:
            raise EOFError
        return self.selections.popleft()

    def text(self, message: str) -> str:
        return self.texts.popleft()

    def checkbox(self, message: str, choices: list[Choice]) -> list[Any]:
        self.checkbox_choices.append(choices)
        answer = self.checkboxes.popleft()
        return answer(choices) if callable(answer) else list(answer)
