"""Process runner: the one place sshhop spawns a child process."""
from __future__ import annotations

import logging
import subprocess
import sys
from typing import Callable, List


logger = logging.getLogger(__name__)

#: Exit statuses used when the executable cannot be run (same as the shell's).
COMMAND_NOT_EXECUTABLE = 126
COMMAND_NOT_FOUND = 127

Runner = Callable[[List[str]], int]


def run_command(argv: List[str]) -> int:
    """Run ``argv`` with inherited stdio, wait for it, and return its exit status."""
    logger.debug("Running: %s", subprocess.list2cmdline(argv))
    # The child writes straight to the shared fds; our buffered status line goes first.
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        return subprocess.call(argv)
    except FileNotFoundError:
        print(f"Command not found: {argv[0]}", file=sys.stderr)
        return COMMAND_NOT_FOUND
    except PermissionError:
        print(f"Permission denied: {argv[0]}", file=sys.stderr)
        return COMMAND_NOT_EXECUTABLE


__all__ = ["Runner", "run_command", "COMMAND_NOT_EXECUTABLE", "COMMAND_NOT_FOUND"]
