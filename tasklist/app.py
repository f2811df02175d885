"""
TASKLIST - Interactive Shell
============================
Menu loop: show the task list, ask for a command, run it, repeat.
"""

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol

from .config import AppOptions
from .database import TaskDatabase
from .repository import TaskRepository
from .schema import TaskFilter
from .service import TaskService

logger = logging.getLogger(__name__)


class Commands(str, Enum):
    TOGGLE = "Toggle"
    ADD = "Add"
    COMPLETE = "Complete"
    PURGE = "Purge"
    QUIT = "Quit"


@dataclass
class Choice:
    name: str
    value: Any
    description: str = ""
    disabled: bool = False
    checked: bool = False


# ============================================================
# PROMPTS
# ============================================================

class Prompter(Protocol):
    def select(self, message: str, choices: List[Choice]) -> Any:
        ...

    def text(self, message: str) -> str:
        ...

    def checkbox(self, message: str, choices: List[Choice]) -> List[Any]:
        ...

    def clear(self) -> None:
        ...


class ConsolePrompter:
    """
    Line based prompts on stdin/stdout.

    EOFError / KeyboardInterrupt from input() are not handled here; the
    application treats them as "quit".
    """

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None, stream=None):
        self._input = input_fn or input
        self._stream = stream or sys.stdout

    def _print(self, line: str = "") -> None:
        print(line, file=self._stream)

    def clear(self) -> None:
        if self._stream.isatty():
            self._stream.write("\033[2J\033[H")
            self._stream.flush()

    def text(self, message: str) -> str:
        return self._input(f"? {message}").strip()

    def select(self, message: str, choices: List[Choice]) -> Any:
        while True:
            self._print(f"? {message}")
            for i, choice in enumerate(choices, 1):
                if choice.disabled:
                    suffix = " (disabled)"
                elif choice.description:
                    suffix = f" - {choice.description}"
                else:
                    suffix = ""
                self._print(f"  {i}) {choice.name}{suffix}")

            raw = self._input("> ").strip()
            try:
                index = int(raw)
            except ValueError:
                index = 0
            if 1 <= index <= len(choices) and not choices[index - 1].disabled:
                return choices[index - 1].value
            self._print("Pick the number of an enabled option.")

    def checkbox(self, message: str, choices: List[Choice]) -> List[Any]:
        checked = [choice.checked for choice in choices]
        while True:
            self._print(f"? {message} (numbers toggle, empty line confirms)")
            for i, (choice, on) in enumerate(zip(choices, checked), 1):
                self._print(f"  {i}) [{'x' if on else ' '}] {choice.name}")

            raw = self._input("> ").strip()
            if not raw:
                return [choice.value for choice, on in zip(choices, checked) if on]

            for part in raw.replace(",", " ").split():
                try:
                    index = int(part)
                except ValueError:
                    continue
                if 1 <= index <= len(choices):
                    checked[index - 1] = not checked[index - 1]


# ============================================================
# APPLICATION
# ============================================================

class Application:
    def __init__(
        self,
        options: Optional[AppOptions] = None,
        prompter: Optional[Prompter] = None,
    ):
        options = options or AppOptions()

        self.state = options.state.model_copy()
        self.task_service = TaskService(
            TaskRepository(TaskDatabase(options.storage_location, options.default_data))
        )
        self.prompter = prompter or ConsolePrompter()
        self._handlers: Dict[Commands, Callable[[], None]] = {
            Commands.TOGGLE: self.handle_toggle_command,
            Commands.ADD: self.handle_add_command,
            Commands.COMPLETE: self.handle_complete_command,
            Commands.PURGE: self.handle_purge_command,
        }

    def start(self) -> None:
        logger.info(f"Interactive shell started (show_completed={self.state.show_completed})")
        try:
            while self.show_prompt():
                pass
        except (EOFError, KeyboardInterrupt):
            print()
            logger.info("Input closed, exiting.")

    def display_tasks(self) -> None:
        stats = self.task_service.get_stats()
        print(
            f"Todo Lists (total: {stats.total}, incomplete: {stats.incomplete}, "
            f"completed: {stats.completed}) "
        )
        task_filter = None if self.state.show_completed else TaskFilter(is_complete=False)
        for task in self.task_service.search(task_filter):
            print(task)

    def menu(self) -> List[Choice]:
        nothing_completed = all(not task.is_complete for task in self.task_service.search())
        return [
            Choice(
                "Show/Hide Completed", Commands.TOGGLE,
                "Show or hide completed todo items", disabled=nothing_completed,
            ),
            Choice("Add Task", Commands.ADD, "Add a new todo item"),
            Choice("Complete Task", Commands.COMPLETE, "Mark a todo item as completed"),
            Choice(
                "Remove Completed Task", Commands.PURGE,
                "Remove completed todo item", disabled=nothing_completed,
            ),
            Choice("Quit", Commands.QUIT, "Quit application"),
        ]

    def show_prompt(self) -> bool:
        """One round of the menu. Returns False once the user quits."""
        self.prompter.clear()
        self.display_tasks()

        option = self.prompter.select("Choose Option", self.menu())
        try:
            command = Commands(option)
        except ValueError:
            raise ValueError("invalid command") from None

        if command == Commands.QUIT:
            return False
        self._handlers[command]()
        return True

    # ========================================
    # COMMANDS
    # ========================================

    def handle_toggle_command(self) -> None:
        self.state.show_completed = not self.state.show_completed

    def handle_add_command(self) -> None:
        self.prompter.clear()
        title = self.prompter.text("Enter task: ")
        self.task_service.add(title)

    def handle_complete_command(self) -> None:
        self.prompter.clear()
        all_tasks = self.task_service.search()

        selected_ids = self.prompter.checkbox(
            "Mark Task Complete",
            [Choice(task.title, task.id, checked=task.is_complete) for task in all_tasks],
        )

        for task_id in selected_ids:
            self.task_service.mark_as_complete(task_id)

        # Tasks unticked in the checklist go back to incomplete
        for task in all_tasks:
            if task.id not in selected_ids:
                self.task_service.mark_as_incomplete(task.id)

    def handle_purge_command(self) -> None:
        self.task_service.remove_complete()
