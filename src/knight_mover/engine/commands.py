"""Turns raw ``"<KEYWORD> <ARG>"`` entries into structured commands.

Parsing never raises for string input. Entries that cannot be understood
come back as ``Malformed`` so the interpreter can reject them when (and if)
execution reaches them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Union

from knight_mover.protocol.constants import Command, Direction


@dataclass(frozen=True)
class Start:
    x: int
    y: int
    direction: str


@dataclass(frozen=True)
class Move:
    steps: int


@dataclass(frozen=True)
class Rotate:
    direction: str


@dataclass(frozen=True)
class Unknown:
    keyword: str
    argument: str


@dataclass(frozen=True)
class Malformed:
    raw: str
    reason: str


ParsedCommand = Union[Start, Move, Rotate, Unknown, Malformed]


def parse_command(raw: str) -> ParsedCommand:
    if not isinstance(raw, str):
        return Malformed(raw=repr(raw), reason="Command entry is not a string")

    parts = raw.split(None, 1)
    if len(parts) < 2:
        return Malformed(raw=raw, reason="Missing command argument")

    # Only the first token after the keyword is the argument
    keyword, argument = parts[0], parts[1].split()[0]

    if keyword == Command.START:
        return _parse_start(raw, argument)

    if _is_text_payload(argument):
        if keyword == Command.ROTATE:
            return Rotate(direction=argument)
        if keyword == Command.MOVE:
            return Malformed(raw=raw, reason=f"MOVE expects a step count, got {argument!r}")
        return Unknown(keyword=keyword, argument=argument)

    try:
        value = int(argument)
    except ValueError:
        return Malformed(raw=raw, reason=f"Invalid integer argument {argument!r}")

    if keyword == Command.MOVE:
        return Move(steps=value)
    if keyword == Command.ROTATE:
        return Malformed(raw=raw, reason=f"ROTATE expects a direction, got {argument!r}")
    return Unknown(keyword=keyword, argument=argument)


def parse_commands(raw_entries: Iterable[str]) -> List[ParsedCommand]:
    return [parse_command(entry) for entry in raw_entries]


def command_to_str(command: ParsedCommand) -> str:
    """Render a parsed command back in its wire form."""
    if isinstance(command, Start):
        return f"{Command.START} {command.x},{command.y},{command.direction}"
    if isinstance(command, Move):
        return f"{Command.MOVE} {command.steps}"
    if isinstance(command, Rotate):
        return f"{Command.ROTATE} {command.direction}"
    if isinstance(command, Unknown):
        return f"{command.keyword} {command.argument}"
    if isinstance(command, Malformed):
        return command.raw
    return repr(command)


def _is_text_payload(argument: str) -> bool:
    return "," in argument or argument in Direction.ALL


def _parse_start(raw: str, argument: str) -> ParsedCommand:
    fields = argument.split(",")
    if len(fields) != 3:
        return Malformed(raw=raw, reason="START expects <x>,<y>,<direction>")
    try:
        x = int(fields[0])
        y = int(fields[1])
    except ValueError:
        return Malformed(raw=raw, reason=f"Invalid START coordinates in {argument!r}")
    direction = fields[2]
    if not Direction.is_valid(direction):
        return Malformed(raw=raw, reason=f"Invalid START direction {direction!r}")
    return Start(x=x, y=y, direction=direction)
