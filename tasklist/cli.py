#!/usr/bin/env python3
"""
TASKLIST - CLI Interface
========================
Interactive menu by default, plus one-shot commands for scripting.

Usage:
    tasklist                         Interactive menu
    tasklist menu --hide-completed   Interactive menu, completed tasks hidden
    tasklist add "Buy milk"
    tasklist list --json
    tasklist complete 3f2a...
    tasklist purge
    tasklist stats
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .app import Application
from .config import AppOptions, AppState, default_storage_location
from .database import StorageError
from .schema import TaskFilter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasklist",
        description="Local task list manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tasklist                           Open the interactive menu
  tasklist add "Clean the room"      Add a task
  tasklist list --hide-completed     Show open tasks only
  tasklist complete <id>             Mark a task as completed
  tasklist purge                     Remove all completed tasks
        """
    )
    parser.add_argument(
        "--file", type=Path, default=None,
        help=f"Task file (default: $TASKLIST_FILE or {default_storage_location()})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # MENU command
    menu_parser = subparsers.add_parser("menu", help="Interactive menu (default)")
    menu_parser.add_argument("--hide-completed", action="store_true", help="Start with completed tasks hidden")

    # LIST command
    list_parser = subparsers.add_parser("list", help="Print tasks")
    list_parser.add_argument("--hide-completed", action="store_true", help="Only incomplete tasks")
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Add a task")
    add_parser.add_argument("title", help="Task title")

    # COMPLETE / UNCOMPLETE commands
    complete_parser = subparsers.add_parser("complete", help="Mark task as completed")
    complete_parser.add_argument("task_id", help="Task ID")
    uncomplete_parser = subparsers.add_parser("uncomplete", help="Mark task as incomplete")
    uncomplete_parser.add_argument("task_id", help="Task ID")

    # REMOVE command
    remove_parser = subparsers.add_parser("remove", help="Delete a task")
    remove_parser.add_argument("task_id", help="Task ID")

    # PURGE command
    subparsers.add_parser("purge", help="Remove completed tasks")

    # STATS command
    stats_parser = subparsers.add_parser("stats", help="Show task counts")
    stats_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    options = AppOptions(
        state=AppState(show_completed=not getattr(args, "hide_completed", False)),
        storage_location=args.file or default_storage_location(),
    )

    try:
        app = Application(options)
    except StorageError as e:
        logger.error(str(e))
        print(f"❌ {e}", file=sys.stderr)
        return 1

    service = app.task_service
    command = args.command or "menu"

    if command == "menu":
        app.start()

    elif command == "list":
        task_filter = TaskFilter(is_complete=False) if args.hide_completed else None
        tasks = service.search(task_filter)
        if args.json:
            print(json.dumps([t.model_dump(mode="json", by_alias=True) for t in tasks], indent=2, ensure_ascii=False))
        else:
            stats = service.get_stats()
            print(f"Todo Lists (total: {stats.total}, incomplete: {stats.incomplete}, completed: {stats.completed})")
            for task in tasks:
                print(f"  [{task.id}] {task}")

    elif command == "add":
        task = service.add(args.title)
        print(task.id)

    elif command in ("complete", "uncomplete"):
        task = service.get_by_id(args.task_id)
        if task is None:
            print(f"❌ Task not found: {args.task_id}")
            return 1
        if command == "complete":
            service.mark_as_complete(task.id)
            print(f"✅ Completed: {task.title}")
        else:
            service.mark_as_incomplete(task.id)
            print(f"↩️ Reopened: {task.title}")

    elif command == "remove":
        task = service.get_by_id(args.task_id)
        if task is None:
            print(f"❌ Task not found: {args.task_id}")
            return 1
        service.remove(task.id)
        print(f"🗑️ Removed: {task.title}")

    elif command == "purge":
        completed = service.get_stats().completed
        service.remove_complete()
        print(f"🗑️ Removed {completed} completed tasks")

    elif command == "stats":
        stats = service.get_stats()
        if args.json:
            print(json.dumps(stats.model_dump()))
        else:
            print(f"Total: {stats.total} | Incomplete: {stats.incomplete} | Completed: {stats.completed}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
