"""servers / help commands - Print the known aliases or the usage text."""

from typing import List, Optional

from sshhop.commands.base import Action, BaseCommand, CommandContext
from sshhop.directory import ResolvedTarget


class ShowServersCommand(BaseCommand):
    resolves_host = False

    @property
    def name(self) -> Action:
        return Action.SERVERS

    @property
    def help_text(self) -> str:
        return "List known server aliases"

    def execute(self, ctx: CommandContext, target: Optional[ResolvedTarget], args: List[str]) -> int:
        print(" ".join(sorted(ctx.directory)))
        return 0


class HelpCommand(BaseCommand):
    resolves_host = False
    uses_directory = False

    @property
    def name(self) -> Action:
        return Action.HELP

    @property
    def help_text(self) -> str:
        return "Show this help"

    def execute(self, ctx: CommandContext, target: Optional[ResolvedTarget], args: List[str]) -> int:
        print(ctx.registry.get_help())
        return 0
