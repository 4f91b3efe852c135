"""Argument-list builders for the external tools sshhop drives.

Each helper returns the argv list for one external command. Executable names
come from :class:`sshhop.config.Settings` so they can be swapped through the
environment (see ``.env.example``).

Templates:
- ssh -l <login> -p <port> <host>
- scp -P <port> <login>@<host>:<file> ./
- scp -P <port> <file> <login>@<host>:
- sshfs -p <port> -o "ssh_command=ssh -l <login>" <host>:/home/<login> <mnt>
- fusermount -u <mnt>
"""
from typing import List, Optional

from sshhop.config import Settings
from sshhop.directory import ResolvedTarget


def _settings(settings: Optional[Settings]) -> Settings:
    return settings if settings is not None else Settings()


def remote_home(target: ResolvedTarget) -> str:
    """Return the remote home directory path for the target's login."""
    return f"/home/{target.login}"


def ssh_argv(target: ResolvedTarget, settings: Optional[Settings] = None) -> List[str]:
    s = _settings(settings)
    return [s.ssh, "-l", target.login, "-p", str(target.port), target.host]


def download_argv(target: ResolvedTarget, remote_file: str, settings: Optional[Settings] = None) -> List[str]:
    """Return the scp argv copying ``remote_file`` into the current directory."""
    s = _settings(settings)
    return [s.scp, "-P", str(target.port), f"{target.login}@{target.host}:{remote_file}", "./"]


def upload_argv(target: ResolvedTarget, local_file: str, settings: Optional[Settings] = None) -> List[str]:
    """Return the scp argv copying ``local_file`` into the remote home directory."""
    s = _settings(settings)
    return [s.scp, "-P", str(target.port), local_file, f"{target.login}@{target.host}:"]


def mount_argv(target: ResolvedTarget, mount_path: str, settings: Optional[Settings] = None) -> List[str]:
    """Return the sshfs argv mounting the remote home directory at ``mount_path``.

    The ``ssh_command=...`` option is passed as a single argv element so the
    embedded spaces reach sshfs intact.
    """
    s = _settings(settings)
    return [
        s.sshfs,
        "-p", str(target.port),
        "-o", f"ssh_command={s.ssh} -l {target.login}",
        f"{target.host}:{remote_home(target)}",
        mount_path,
    ]


def unmount_argv(mount_path: str, settings: Optional[Settings] = None) -> List[str]:
    s = _settings(settings)
    return [s.fusermount, "-u", mount_path]


__all__ = [
    "remote_home",
    "ssh_argv",
    "download_argv",
    "upload_argv",
    "mount_argv",
    "unmount_argv",
]
