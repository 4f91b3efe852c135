from __future__ import annotations

import io
import os
import shutil
import subprocess
import sys

import pytest

from sshhop import runner as runner_module
from sshhop.runner import COMMAND_NOT_EXECUTABLE, COMMAND_NOT_FOUND, run_command


def test_missing_executable_returns_127(capsys) -> None:
    assert run_command(["sshhop-test-no-such-binary", "-V"]) == COMMAND_NOT_FOUND
    assert "Command not found: sshhop-test-no-such-binary" in capsys.readouterr().err


def test_exit_status_is_returned(monkeypatch) -> None:
    seen = []

    def fake_call(argv):
        seen.append(argv)
        return 3

    monkeypatch.setattr(runner_module.subprocess, "call", fake_call)

    assert run_command(["ssh", "-l", "alice", "-p", "22", "10.0.0.5"]) == 3
    assert seen == [["ssh", "-l", "alice", "-p", "22", "10.0.0.5"]]


def test_unexecutable_program_returns_126(monkeypatch, capsys) -> None:
    def fake_call(argv):
        raise PermissionError(13, "Permission denied", argv[0])

    monkeypatch.setattr(runner_module.subprocess, "call", fake_call)

    assert run_command(["/opt/tools/ssh", "-V"]) == COMMAND_NOT_EXECUTABLE
    assert "Permission denied: /opt/tools/ssh" in capsys.readouterr().err


def test_stdout_is_flushed_before_the_child_starts(monkeypatch) -> None:
    events = []

    class TrackingStream(io.StringIO):
        def flush(self) -> None:
            events.append("flush")
            super().flush()

    def fake_call(argv):
        events.append("call")
        return 0

    monkeypatch.setattr(sys, "stdout", TrackingStream())
    monkeypatch.setattr(runner_module.subprocess, "call", fake_call)

    run_command(["fusermount", "-u", "/mnt/x"])

    assert events[0] == "flush"
    assert events[-1] == "call"


@pytest.mark.skipif(shutil.which("echo") is None, reason="needs an echo executable")
def test_status_line_precedes_child_output_on_a_pipe(tmp_path) -> None:
    env = {k: v for k, v in os.environ.items() if k != "PYTHONUNBUFFERED"}
    env["SSHHOP_FUSERMOUNT"] = shutil.which("echo")

    result = subprocess.run(
        [sys.executable, "-m", "sshhop", "umnt", "/mnt/x"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0
    assert result.stdout.splitlines() == ["Unmounting /mnt/x...", "-u /mnt/x"]
