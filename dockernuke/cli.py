"""The docker-nuke command line: subcommand routing, help and the nuke command."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .client import Docker, DockerClient, DockerError
from .containers import remove_all_containers
from .flags import FlagError, parse_nuke_flags
from .images import remove_all_images, remove_dangling_images
from .networks import remove_all_networks
from .resources import remove_all_resources
from .usage import print_usage, sub_command_message
from .volumes import remove_all_volumes

HELP_TEXT = "\n".join(
    [
        "Usage: docker-nuke [subcommand] [options]",
        "Subcommands:",
        "  nuke         Nukes Docker containers, images, volumes, and networks",
        "  help         Show this help message",
    ]
)

NO_FLAG_MESSAGE = (
    "Please specify at least one flag to nuke: "
    "--containers, --images, --volumes, --networks, or --all"
)


class CommandError(Exception):
    """Raised when a command is used wrongly or cannot be set up."""


def process_help() -> str:
    """Write the top-level help text to standard output and return it."""
    sys.stdout.write(HELP_TEXT + "\n")
    return HELP_TEXT


def process_nuke(
    sub_commands: Sequence[str], docker: Docker | None = None
) -> dict[str, list[str]]:
    """Run the nuke command with its flags and return what was removed, by resource kind.

    A client is built from the environment when ``docker`` is not given.
    Errors from the daemon propagate as :class:`DockerError`.
    """
    if docker is None:
        try:
            docker = DockerClient.from_env()
        except DockerError as error:
            raise CommandError(f"Error initializing Docker client: {error}") from None
    try:
        flags = parse_nuke_flags(sub_commands)
    except FlagError as error:
        print_usage()
        raise CommandError(f"Error parsing flags: {error}") from None

    if flags.all:
        print(sub_command_message("unused", "containers, images, volumes, and networks"))
        return remove_all_resources(docker)

    steps = (
        (flags.containers, "containers", "stopped", "containers", remove_all_containers),
        (flags.images, "images", "dangling", "images", remove_dangling_images),
        (flags.all_images, "all-images", "unused", "images", remove_all_images),
        (flags.volumes, "volumes", "unused", "volumes", remove_all_volumes),
        (flags.networks, "networks", "unused", "networks", remove_all_networks),
    )
    removed: dict[str, list[str]] = {}
    for selected, key, verb, obj, remove in steps:
        if selected:
            print(sub_command_message(verb, obj))
            removed[key] = remove(docker)

    if not flags.any_selected():
        print_usage()
        raise CommandError(NO_FLAG_MESSAGE)
    return removed


def process_subcommand_args(
    args: Sequence[str], docker: Docker | None = None
) -> dict[str, list[str]] | None:
    """Dispatch the arguments that follow the program name to a subcommand."""
    if not args:
        raise CommandError("Must specifiy a sub-command: nuke or help")
    command, rest = args[0], list(args[1:])
    if command == "nuke":
        return process_nuke(rest, docker)
    if command == "help":
        process_help()
        return None
    raise CommandError(
        f"Unknown subcommand: {command}\nUse 'docker-nuke help' for instructions"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        process_subcommand_args(args)
    except (CommandError, DockerError) as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())