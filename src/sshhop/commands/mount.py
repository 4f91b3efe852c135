"""mnt / umnt commands - Mount a remote home directory with sshfs."""

from typing import List, Optional

from sshhop.commands.base import Action, BaseCommand, CommandContext, HostCommand
from sshhop.directory import ResolvedTarget
from sshhop.invocations import mount_argv, remote_home, unmount_argv


class MountCommand(HostCommand):
    argument = "mount-path"

    @property
    def name(self) -> Action:
        return Action.MOUNT

    @property
    def help_text(self) -> str:
        return "Mount the remote home directory at a local path (sshfs)"

    def run(self, ctx: CommandContext, target: ResolvedTarget, args: List[str]) -> int:
        mount_path = args[0]
        print(f"Mounting {target.host}:{remote_home(target)} at {mount_path}...")
        return ctx.runner(mount_argv(target, mount_path, ctx.settings))


class UnmountCommand(BaseCommand):
    # Unmounting only needs the local path.
    resolves_host = False
    uses_directory = False
    argument = "mount-path"

    @property
    def name(self) -> Action:
        return Action.UNMOUNT

    @property
    def help_text(self) -> str:
        return "Unmount a path mounted with mnt"

    def execute(self, ctx: CommandContext, target: Optional[ResolvedTarget], args: List[str]) -> int:
        mount_path = args[0]
        print(f"Unmounting {mount_path}...")
        return ctx.runner(unmount_argv(mount_path, ctx.settings))
