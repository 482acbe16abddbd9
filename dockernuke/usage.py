"""Messages and usage text for the nuke command."""

import sys

_NUKE_OPTIONS = (
    ("all    ", "unused", "containers, images, volumes, and networks"),
    ("containers", "stopped", "containers"),
    ("images", "dangling", "images"),
    ("all-images", "unused", "images"),
    ("volumes", "unused", "volumes"),
    ("networks", "unused", "networks"),
)


def usage_text() -> str:
    """Return the usage text of the nuke command."""
    lines = ["Usage: docker-nuke nuke [options]", "Subcommands:"]
    lines.extend(sub_command_usage_message(*option) for option in _NUKE_OPTIONS)
    lines.append("Example: docker-nuke nuke --containers --images")
    return "\n".join(lines)


def print_usage() -> str:
    """Write the usage text of the nuke command to standard output and return it."""
    text = usage_text()
    sys.stdout.write(text + "\n")
    return text


def sub_command_message(verb: str, obj: str) -> str:
    """Return the progress message shown before a removal starts."""
    return f"Nuking all {verb} Docker {obj}..."


def sub_command_usage_message(command: str, verb: str, obj: str) -> str:
    """Return one option line of the usage text."""
    return f"  --{command}\t{usage_message(verb, obj)}"


def usage_message(verb: str, obj: str) -> str:
    """Return the description of an option."""
    return f"Nuke all {verb} Docker {obj}"