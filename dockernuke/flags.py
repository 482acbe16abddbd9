"""Command-line flags of the nuke command."""

from __future__ import annotations

import json
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from .usage import usage_message

_NUKE_FLAGS = (
    ("all", "unused", "containers, images, volumes, and networks"),
    ("containers", "stopped", "containers"),
    ("images", "dangling", "images"),
    ("all-images", "unused", "images"),
    ("volumes", "unused", "volumes"),
    ("networks", "unused", "networks"),
)

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class FlagError(ValueError):
    """Raised when the flags of a command cannot be parsed."""

    def __init__(self, message: str, *, help_requested: bool = False) -> None:
        super().__init__(message)
        self.help_requested = help_requested


@dataclass(frozen=True)
class NukeFlags:
    """The options chosen for the nuke command."""

    all: bool = False
    containers: bool = False
    images: bool = False
    all_images: bool = False
    volumes: bool = False
    networks: bool = False

    def any_selected(self) -> bool:
        """Whether one of the individual resource flags is set; ``all`` is not counted."""
        return (
            self.containers or self.images or self.all_images or self.volumes or self.networks
        )


def _parse_bool(value: str) -> bool:
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise ValueError(value)


class _BoolFlagSet:
    """A set of boolean flags written as -name, --name or -name=value."""

    def __init__(self, name: str, flags: dict[str, str]) -> None:
        self.name = name
        self.flags = dict(flags)

    def parse(self, args: Iterable[str]) -> tuple[dict[str, bool], list[str]]:
        """Return the flag values and the arguments left after the flags."""
        values = dict.fromkeys(self.flags, False)
        pending = deque(args)
        while pending:
            arg = pending[0]
            if len(arg) < 2 or not arg.startswith("-"):
                break
            if arg == "--":
                pending.popleft()
                break
            name = arg[2:] if arg.startswith("--") else arg[1:]
            if not name or name[0] in "-=":
                raise FlagError(f"bad flag syntax: {arg}")
            pending.popleft()
            name, has_value, value = name.partition("=")
            if name not in self.flags:
                if name in ("help", "h"):
                    raise FlagError("flag: help requested", help_requested=True)
                raise FlagError(f"flag provided but not defined: -{name}")
            if has_value:
                try:
                    values[name] = _parse_bool(value)
                except ValueError:
                    raise FlagError(
                        f"invalid boolean value {json.dumps(value)} for -{name}: parse error"
                    ) from None
            else:
                values[name] = True
        return values, list(pending)


def nuke_parser() -> _BoolFlagSet:
    """Return the flag set of the nuke command, each flag with its description."""
    return _BoolFlagSet(
        "nuke", {name: usage_message(verb, obj) for name, verb, obj in _NUKE_FLAGS}
    )


def parse_nuke_flags(args: Iterable[str]) -> NukeFlags:
    """Parse the arguments of the nuke command."""
    values, _ = nuke_parser().parse(args)
    return NukeFlags(**{name.replace("-", "_"): value for name, value in values.items()})