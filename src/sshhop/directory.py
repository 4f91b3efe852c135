"""Server directory: the alias -> connection mapping read from the servers file.

File format, one record per line::

    # alias,host,port[,login]
    home,10.0.0.5,22,alice
    build,build.example.org,2222

Blank lines, lines starting with ``#`` and lines starting with whitespace
are ignored. Records with fewer than three fields or a bad port are skipped
with a warning. When an alias appears twice the later line wins.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Union

from sshhop.errors import ConfigError, MissingLoginError, UnknownHostError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerEntry:
    alias: str
    host: str
    port: int
    login: Optional[str] = None


@dataclass(frozen=True)
class ResolvedTarget:
    host: str
    port: int
    login: str


def _parse_port(raw: str) -> Optional[int]:
    try:
        port = int(raw)
    except ValueError:
        return None
    if not 1 <= port <= 65535:
        return None
    return port


def parse_lines(lines: Iterable[str], source: str = "<servers>") -> Dict[str, ServerEntry]:
    """Build a directory from an iterable of raw lines.

    Args:
        lines: Lines of the servers file, with or without trailing newlines.
        source: Name used in warnings (usually the file path).

    Returns:
        Mapping of alias to ServerEntry.
    """
    directory: Dict[str, ServerEntry] = {}
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line or line.startswith("#") or line[0].isspace():
            continue

        fields = [f.strip() for f in line.split(",")]
        if len(fields) < 3:
            logger.warning("%s:%d: expected alias,host,port[,login]; skipping", source, lineno)
            continue

        alias, host, raw_port = fields[0], fields[1], fields[2]
        port = _parse_port(raw_port)
        if port is None:
            logger.warning("%s:%d: invalid port %r; skipping", source, lineno, raw_port)
            continue

        login = fields[3] if len(fields) > 3 and fields[3] else None

        if alias in directory:
            logger.warning("%s:%d: duplicate alias %r replaces earlier entry", source, lineno, alias)
        directory[alias] = ServerEntry(alias=alias, host=host, port=port, login=login)

    return directory


def load(path: Union[str, "os.PathLike[str]"]) -> Dict[str, ServerEntry]:
    """Read the servers file at ``path``.

    Raises:
        ConfigError: if the file cannot be opened or is not valid UTF-8.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except OSError as exc:
        raise ConfigError(f"Cannot read servers file {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(
            f"Cannot read servers file {path}: not valid UTF-8 at byte {exc.start}"
        ) from exc

    directory = parse_lines(lines, source=str(path))
    logger.debug("Loaded %d servers from %s", len(directory), path)
    return directory


def resolve(directory: Dict[str, ServerEntry], alias: str, cli_login: Optional[str] = None) -> ResolvedTarget:
    """Look up ``alias`` and merge in the command-line login override."""
    entry = directory.get(alias)
    if entry is None:
        raise UnknownHostError(alias)
    login = cli_login or entry.login
    if not login:
        raise MissingLoginError(alias)
    return ResolvedTarget(host=entry.host, port=entry.port, login=login)


__all__ = ["ServerEntry", "ResolvedTarget", "parse_lines", "load", "resolve"]
