"""Runtime settings for sshhop.

Values come from the environment (optionally populated from a ``.env`` file
via ``load_dotenv()`` in the entry point):

- SSHHOP_SERVERS_FILE: path to the servers file (default ~/.sshhop/servers)
- SSHHOP_LOG_LEVEL: diagnostics level (default WARNING)
- SSHHOP_SSH, SSHHOP_SCP, SSHHOP_SSHFS, SSHHOP_FUSERMOUNT: executables to run
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_SERVERS_FILE = "~/.sshhop/servers"


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    if not val:
        return default
    return val


@dataclass(frozen=True)
class Settings:
    servers_file: str = os.path.expanduser(DEFAULT_SERVERS_FILE)
    log_level: str = "WARNING"
    ssh: str = "ssh"
    scp: str = "scp"
    sshfs: str = "sshfs"
    fusermount: str = "fusermount"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from SSHHOP_* environment variables (all optional)."""
        servers_file = _get_env("SSHHOP_SERVERS_FILE", DEFAULT_SERVERS_FILE)
        return cls(
            servers_file=os.path.expanduser(servers_file),  # type: ignore[arg-type]
            log_level=_get_env("SSHHOP_LOG_LEVEL", "WARNING"),  # type: ignore[arg-type]
            ssh=_get_env("SSHHOP_SSH", "ssh"),  # type: ignore[arg-type]
            scp=_get_env("SSHHOP_SCP", "scp"),  # type: ignore[arg-type]
            sshfs=_get_env("SSHHOP_SSHFS", "sshfs"),  # type: ignore[arg-type]
            fusermount=_get_env("SSHHOP_FUSERMOUNT", "fusermount"),  # type: ignore[arg-type]
        )


__all__ = ["Settings", "DEFAULT_SERVERS_FILE"]
