#!/usr/bin/env python3
"""sshhop - Main entry point."""

import argparse
import dataclasses
import sys
from typing import Dict, List, Optional, Union

from dotenv import load_dotenv

from sshhop.commands import Action, CommandContext, CommandRegistry, USAGE, build_registry
from sshhop.config import Settings
from sshhop.directory import ServerEntry, load, resolve
from sshhop.errors import SshHopError, UsageError
from sshhop.log import setup_logging
from sshhop.runner import Runner, run_command


def dispatch(
    action: Union[Action, str],
    args: List[str],
    directory: Dict[str, ServerEntry],
    cli_login: Optional[str] = None,
    registry: Optional[CommandRegistry] = None,
    settings: Optional[Settings] = None,
    runner: Runner = run_command,
) -> int:
    """Resolve ``args`` against ``directory`` and run the command for ``action``.

    Args:
        action: Action keyword or enum member
        args: Positional arguments after the action (host alias first, if any)
        directory: Alias mapping returned by ``sshhop.directory.load``
        cli_login: Value of ``-l``; overrides the login from the directory
        registry: Commands to dispatch to (defaults to ``build_registry()``)
        settings: Executable names and paths (defaults to ``Settings()``)
        runner: Spawns the external command and returns its exit status

    Returns:
        The external command's exit status, or 0 for help/servers.

    Raises:
        UsageError, UnknownHostError, MissingLoginError
    """
    if not isinstance(action, Action):
        action = Action.parse(action)
    registry = registry or build_registry()

    command = registry.get(action)
    if command is None:
        raise UsageError(f"Unknown action: {action.value}")

    target = None
    if command.resolves_host:
        if not args:
            raise UsageError(f"Missing host. Usage: {command.usage}")
        host, args = args[0], args[1:]
        command.check_args(args)
        target = resolve(directory, host, cli_login)
    else:
        command.check_args(args)

    ctx = CommandContext(
        directory=directory,
        registry=registry,
        settings=settings or Settings(),
        runner=runner,
    )
    return command.execute(ctx, target, args)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sshhop",
        usage=USAGE,
        description="Look up server aliases and run ssh, scp, sshfs or fusermount against them.",
        epilog="Options may appear anywhere. Put '--' before a file or path that starts with '-'.",
    )
    p.add_argument("-l", "--login", default=None, help="Login name; overrides the servers file")
    p.add_argument("-f", "--servers-file", default=None, help="Path to the servers file")
    p.add_argument("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
    p.add_argument("action", nargs="?", help="ssh, gt, sd, mnt, umnt, help or servers")
    p.add_argument("args", nargs="*", help="Host alias and file or mount path")
    return p


def parse_argv(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command line, allowing options between positionals.

    Everything after the first ``--`` is taken as positional, so file names
    such as ``-notes.txt`` can be passed as ``sd home -- -notes.txt``.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    tail: List[str] = []
    if "--" in argv:
        split = argv.index("--")
        argv, tail = argv[:split], argv[split + 1:]

    args = build_arg_parser().parse_intermixed_args(argv)
    if args.action is None and tail:
        args.action, tail = tail[0], tail[1:]
    args.args = list(args.args) + tail
    return args


def main(argv: Optional[List[str]] = None, runner: Runner = run_command) -> int:
    """Main application entry point."""
    # Load env variables
    load_dotenv()

    args = parse_argv(argv)
    settings = Settings.from_env()
    if args.servers_file:
        settings = dataclasses.replace(settings, servers_file=args.servers_file)

    registry = build_registry()

    try:
        setup_logging(args.log_level or settings.log_level)

        if not args.action:
            print(registry.get_help(), file=sys.stderr)
            return UsageError.exit_code

        action = Action.parse(args.action)
        command = registry.get(action)
        directory: Dict[str, ServerEntry] = {}
        if command is not None and command.uses_directory:
            directory = load(settings.servers_file)
        return dispatch(
            action,
            args.args,
            directory,
            cli_login=args.login,
            registry=registry,
            settings=settings,
            runner=runner,
        )
    except UsageError as exc:
        print(exc, file=sys.stderr)
        print("Run 'sshhop help' for usage.", file=sys.stderr)
        return exc.exit_code
    except SshHopError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code


if __name__ == "__main__":
    sys.exit(main())
