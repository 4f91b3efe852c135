"""ssh command - Open an interactive session on a server."""

from typing import List

from sshhop.commands.base import Action, CommandContext, HostCommand
from sshhop.directory import ResolvedTarget
from sshhop.invocations import ssh_argv


class SshCommand(HostCommand):
    @property
    def name(self) -> Action:
        return Action.SSH

    @property
    def help_text(self) -> str:
        return "Open an interactive ssh session"

    def run(self, ctx: CommandContext, target: ResolvedTarget, args: List[str]) -> int:
        print(f"Connecting to {target.login}@{target.host}:{target.port}...")
        return ctx.runner(ssh_argv(target, ctx.settings))
