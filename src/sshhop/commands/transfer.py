"""gt / sd commands - Copy files to and from a server with scp."""

from typing import List

from sshhop.commands.base import Action, CommandContext, HostCommand
from sshhop.directory import ResolvedTarget
from sshhop.invocations import download_argv, upload_argv


class GetFileCommand(HostCommand):
    argument = "remote-file"

    @property
    def name(self) -> Action:
        return Action.GET

    @property
    def help_text(self) -> str:
        return "Copy a remote file into the current directory"

    def run(self, ctx: CommandContext, target: ResolvedTarget, args: List[str]) -> int:
        remote_file = args[0]
        print(f"Downloading {remote_file} from {target.host}...")
        return ctx.runner(download_argv(target, remote_file, ctx.settings))


class SendFileCommand(HostCommand):
    argument = "local-file"

    @property
    def name(self) -> Action:
        return Action.SEND

    @property
    def help_text(self) -> str:
        return "Copy a local file into the remote home directory"

    def run(self, ctx: CommandContext, target: ResolvedTarget, args: List[str]) -> int:
        local_file = args[0]
        print(f"Uploading {local_file} to {target.login}@{target.host}...")
        return ctx.runner(upload_argv(target, local_file, ctx.settings))
