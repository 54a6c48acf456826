# This test file validates the operation-replay CLI.
# It covers operation parsing, printed renderings, exit codes, and diagnostics for failed deletes.

from __future__ import annotations

import argparse
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from src.linked_list import cli, diagnostics

ROOT_DIR = Path(__file__).resolve().parents[2]


def test_parse_operation_accepts_known_forms() -> None:
    assert cli.parse_operation("insert_at:1:2") == cli.Operation(name="insert_at", args=(1, 2))
    assert cli.parse_operation("render") == cli.Operation(name="render", args=())


@pytest.mark.parametrize("token", ["pop", "push_back", "insert_at:1", "delete_at:x"])
def test_parse_operation_rejects_malformed(token: str) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_operation(token)


def test_main_prints_final_rendering(capsys: pytest.CaptureFixture[str]) -> None:
    status = cli.main(["push_back:10", "push_back:20", "push_front:5", "render", "delete_at:1"])

    out = capsys.readouterr().out.splitlines()
    assert status == 0
    assert out == ["[5 -> 10 -> 20] (size=3)", "[5 -> 20] (size=2)"]


def test_main_failed_deletes_keep_zero_status_and_report(
    capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="linked_list"):
        status = cli.main(["delete_at:0", "push_back:1", "delete_at:5", "delete_value:42"])

    assert status == 0
    assert capsys.readouterr().out == "[1] (size=1)\n"
    assert [record.reason_code for record in caplog.records] == [
        diagnostics.EMPTY_LIST,
        diagnostics.INDEX_OUT_OF_RANGE,
        diagnostics.VALUE_NOT_FOUND,
    ]


def test_module_run_writes_diagnostics_to_stderr_at_warning_level() -> None:
    env = {**os.environ, "LOG_LEVEL": "WARNING"}
    completed = subprocess.run(
        [sys.executable, "-m", "src.linked_list.cli", "delete_at:0", "push_back:1", "delete_at:5", "delete_value:42"],
        cwd=ROOT_DIR,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    assert completed.returncode == 0
    assert completed.stdout == "[1] (size=1)\n"
    assert "delete_at: delete on empty list (index=0)" in completed.stderr
    assert "delete_at: index out of range (index=5 size=1)" in completed.stderr
    assert "delete_value: value not found (value=42)" in completed.stderr


def test_main_out_of_range_returns_one(capsys: pytest.CaptureFixture[str]) -> None:
    status = cli.main(["insert_at:1:99"])

    captured = capsys.readouterr()
    assert status == 1
    assert captured.err.startswith("error: Index out of range")
    assert captured.out == "[] (size=0)\n"


def test_main_rejects_malformed_operation() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["bogus:1"])
    assert excinfo.value.code == 2
