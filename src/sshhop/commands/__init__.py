"""Command system for sshhop.

Each command is a class that inherits from BaseCommand and implements:
- name: the Action keyword it handles (e.g. Action.SSH)
- help_text: brief description
- execute(ctx, target, args): run the command and return an exit status

Class attributes ``resolves_host`` and ``argument`` describe the positional
arguments the command takes after the action keyword. Commands that act on
a server subclass HostCommand and implement run(ctx, target, args) instead.
"""

from .base import Action, BaseCommand, CommandContext, CommandRegistry, HostCommand, USAGE
from .mount import MountCommand, UnmountCommand
from .session import SshCommand
from .show_servers import HelpCommand, ShowServersCommand
from .transfer import GetFileCommand, SendFileCommand


def build_registry() -> CommandRegistry:
    """Return a registry holding one command per Action."""
    registry = CommandRegistry()
    registry.register(SshCommand())
    registry.register(GetFileCommand())
    registry.register(SendFileCommand())
    registry.register(MountCommand())
    registry.register(UnmountCommand())
    registry.register(HelpCommand())
    registry.register(ShowServersCommand())
    return registry


__all__ = [
    "Action",
    "BaseCommand",
    "CommandContext",
    "CommandRegistry",
    "HostCommand",
    "USAGE",
    "build_registry",
    "SshCommand",
    "GetFileCommand",
    "SendFileCommand",
    "MountCommand",
    "UnmountCommand",
    "HelpCommand",
    "ShowServersCommand",
]
