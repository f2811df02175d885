# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tasklist import cli


def _run(task_file: Path, *argv: str) -> int:
    return cli.main(["--file", str(task_file), *argv])


def _add(task_file: Path, title: str, capsys: pytest.CaptureFixture[str]) -> str:
    assert _run(task_file, "add", title) == 0
    return capsys.readouterr().out.strip()


def test_add_and_list_json(task_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    task_id = _add(task_file, "买菜", capsys)

    assert _run(task_file, "list", "--json") == 0
    assert json.loads(capsys.readouterr().out) == [{"id": task_id, "title": "买菜", "isComplete": False}]


def test_complete_uncomplete_and_list(task_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    open_id = _add(task_file, "打扫房间", capsys)
    done_id = _add(task_file, "买菜", capsys)

    assert _run(task_file, "complete", done_id) == 0
    assert "Completed: 买菜" in capsys.readouterr().out

    assert _run(task_file, "list", "--hide-completed") == 0
    out = capsys.readouterr().out
    assert "total: 2, incomplete: 1, completed: 1" in out
    assert open_id in out and done_id not in out

    assert _run(task_file, "uncomplete", done_id) == 0
    capsys.readouterr()
    assert _run(task_file, "stats", "--json") == 0
    assert json.loads(capsys.readouterr().out) == {"total": 2, "completed": 0, "incomplete": 2}


def test_unknown_id_exit_code(task_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(task_file, "complete", "missing") == 1
    assert _run(task_file, "remove", "missing") == 1
    assert "Task not found: missing" in capsys.readouterr().out
    assert not task_file.exists()


def test_remove_and_purge(task_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    first = _add(task_file, "a", capsys)
    second = _add(task_file, "b", capsys)
    third = _add(task_file, "c", capsys)
    _run(task_file, "complete", second)
    _run(task_file, "complete", third)
    _run(task_file, "remove", first)
    capsys.readouterr()

    assert _run(task_file, "purge") == 0
    assert "Removed 2 completed tasks" in capsys.readouterr().out
    assert json.loads(task_file.read_text(encoding="utf-8")) == {"tasks": []}


def test_corrupt_file_exit_code(task_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    task_file.write_text("{oops", encoding="utf-8")

    assert _run(task_file, "list") == 1
    assert str(task_file) in capsys.readouterr().err


def test_default_command_runs_menu(task_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    answers = iter(["2", "买菜", "5"])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))

    assert _run(task_file) == 0
    assert [t["title"] for t in json.loads(task_file.read_text(encoding="utf-8"))["tasks"]] == ["买菜"]


def test_env_file_is_used_without_flag(task_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("TASKLIST_FILE", str(task_file))

    assert cli.main(["add", "洗碗"]) == 0
    assert task_file.exists()


def test_invalid_utf8_file_exit_code(task_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    task_file.write_bytes(b'{"tasks": [{"id": "a", "title": "\xff\xfe", "isComplete": false}]}')

    assert _run(task_file, "list") == 1
    assert str(task_file) in capsys.readouterr().err
