from __future__ import annotations

from pathlib import Path
from typing import List

import pytest


class RecordingRunner:
    """Stands in for run_command: records each argv and returns a fixed status."""

    def __init__(self, status: int = 0) -> None:
        self.status = status
        self.calls: List[List[str]] = []

    def __call__(self, argv: List[str]) -> int:
        self.calls.append(list(argv))
        return self.status


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def servers_file(tmp_path: Path) -> Path:
    path = tmp_path / "servers"
    path.write_text(
        "# alias,host,port[,login]\n"
        "home,10.0.0.5,22,alice\n"
        "build,build.example.org,2222\n"
        "\n"
        "db,db.internal,2200,postgres\n",
        encoding="utf-8",
    )
    return path
