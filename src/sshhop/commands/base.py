"""Base command class, action keywords, and registry."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from sshhop.config import Settings
from sshhop.directory import ResolvedTarget, ServerEntry
from sshhop.errors import UsageError
from sshhop.runner import Runner, run_command


USAGE = "sshhop [-l login] <ssh|gt|sd|mnt|umnt|help|servers> [host] [file|path]"


class Action(str, Enum):
    SSH = "ssh"
    GET = "gt"
    SEND = "sd"
    MOUNT = "mnt"
    UNMOUNT = "umnt"
    HELP = "help"
    SERVERS = "servers"

    @classmethod
    def parse(cls, keyword: str) -> "Action":
        try:
            return cls(keyword.lower())
        except ValueError:
            raise UsageError(f"Unknown action: {keyword}") from None


@dataclass
class CommandContext:
    """Everything a command may need besides its own arguments."""

    directory: Dict[str, ServerEntry]
    registry: "CommandRegistry"
    settings: Settings = field(default_factory=Settings)
    runner: Runner = run_command


class BaseCommand(ABC):
    """Base class for all commands.

    ``resolves_host`` commands take a host alias as their first argument and
    receive a ResolvedTarget. Commands with ``uses_directory`` False run
    without the servers file being read. ``argument`` names the one required
    trailing argument, or is None when the command takes none.
    """

    resolves_host: bool = True
    uses_directory: bool = True
    argument: Optional[str] = None

    @property
    @abstractmethod
    def name(self) -> Action:
        """Action keyword handled by this command."""
        pass

    @property
    @abstractmethod
    def help_text(self) -> str:
        """Brief help text for the command."""
        pass

    @property
    def usage(self) -> str:
        parts = [self.name.value]
        if self.resolves_host:
            parts.append("<host>")
        if self.argument:
            parts.append(f"<{self.argument}>")
        return " ".join(parts)

    def check_args(self, args: List[str]) -> None:
        """Raise UsageError unless ``args`` holds exactly the trailing argument needed."""
        expected = 1 if self.argument else 0
        if len(args) < expected:
            raise UsageError(f"Missing {self.argument}. Usage: {self.usage}")
        if len(args) > expected:
            raise UsageError(f"Too many arguments. Usage: {self.usage}")

    @abstractmethod
    def execute(self, ctx: CommandContext, target: Optional[ResolvedTarget], args: List[str]) -> int:
        """Execute the command.

        Args:
            ctx: Directory, settings and process runner for this invocation
            target: Resolved host, or None when ``resolves_host`` is False
            args: Trailing arguments (host alias already removed)

        Returns:
            Exit status for the process.
        """
        pass


class HostCommand(BaseCommand):
    """A command that runs against a resolved host.

    Subclasses implement ``run`` and always receive a ResolvedTarget.
    """

    resolves_host = True

    def execute(self, ctx: CommandContext, target: Optional[ResolvedTarget], args: List[str]) -> int:
        if target is None:
            raise UsageError(f"Missing host. Usage: {self.usage}")
        return self.run(ctx, target, args)

    @abstractmethod
    def run(self, ctx: CommandContext, target: ResolvedTarget, args: List[str]) -> int:
        """Run the command against ``target`` and return the exit status."""
        pass


class CommandRegistry:
    """Registry for all available commands."""

    def __init__(self):
        self._commands: Dict[Action, BaseCommand] = {}

    def register(self, command: BaseCommand) -> None:
        """Register a command."""
        self._commands[command.name] = command

    def get(self, action: Action) -> Optional[BaseCommand]:
        """Get the command for an action."""
        return self._commands.get(action)

    def list_commands(self) -> List[Action]:
        """Get registered actions in declaration order."""
        return [a for a in Action if a in self._commands]

    def get_help(self) -> str:
        """Get help text for all commands."""
        lines = [f"Usage: {USAGE}", "", "Commands:"]
        width = max((len(self._commands[a].usage) for a in self.list_commands()), default=0)
        for action in self.list_commands():
            cmd = self._commands[action]
            lines.append(f"  {cmd.usage.ljust(width)}  {cmd.help_text}")
        lines.append("")
        lines.append("Options:")
        lines.append("  -l login  login name; overrides the one in the servers file")
        lines.append("  --        end of options; use before a file or path starting with '-'")
        return "\n".join(lines)
