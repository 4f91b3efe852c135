"""Error types raised by sshhop.

Every error is terminal for the invocation: the entry point prints the
message to stderr and exits with the error's ``exit_code``.
"""


class SshHopError(Exception):
    """Base class for all sshhop errors."""

    exit_code = 1


class ConfigError(SshHopError):
    """The servers file could not be read."""


class UnknownHostError(SshHopError):
    """The requested alias is not in the directory."""

    def __init__(self, alias: str):
        super().__init__(f"Unknown host: {alias}")
        self.alias = alias


class MissingLoginError(SshHopError):
    """Neither -l nor the servers file provides a login."""

    def __init__(self, alias: str):
        super().__init__(
            f"No login for {alias}; pass -l <login> or add it to the servers file"
        )
        self.alias = alias


class UsageError(SshHopError):
    """Bad action keyword or missing/surplus positional argument."""

    exit_code = 2


__all__ = [
    "SshHopError",
    "ConfigError",
    "UnknownHostError",
    "MissingLoginError",
    "UsageError",
]
