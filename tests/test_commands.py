"""Tests for knight_mover.engine.commands module."""

from __future__ import annotations

import pytest

from knight_mover.engine.commands import (
    Malformed,
    Move,
    Rotate,
    Start,
    Unknown,
    command_to_str,
    parse_command,
    parse_commands,
)


class TestParseCommand:
    def test_start(self) -> None:
        assert parse_command("START 0,4,NORTH") == Start(x=0, y=4, direction="NORTH")

    def test_start_allows_negative_coordinates(self) -> None:
        # Bounds are checked when the command runs, not while parsing
        assert parse_command("START -1,2,WEST") == Start(x=-1, y=2, direction="WEST")

    def test_move(self) -> None:
        assert parse_command("MOVE 3") == Move(steps=3)

    def test_move_zero(self) -> None:
        assert parse_command("MOVE 0") == Move(steps=0)

    @pytest.mark.parametrize("direction", ["NORTH", "SOUTH", "EAST", "WEST"])
    def test_rotate(self, direction: str) -> None:
        assert parse_command(f"ROTATE {direction}") == Rotate(direction=direction)

    def test_rotate_with_compound_payload_is_passed_through(self) -> None:
        assert parse_command("ROTATE NORTH,EAST") == Rotate(direction="NORTH,EAST")

    def test_unknown_keyword_is_not_rejected(self) -> None:
        assert parse_command("JUMP 2") == Unknown(keyword="JUMP", argument="2")
        assert parse_command("TURN EAST") == Unknown(keyword="TURN", argument="EAST")

    def test_only_first_argument_token_is_used(self) -> None:
        assert parse_command("MOVE 2 7") == Move(steps=2)

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "MOVE",
            "MOVE two",
            "MOVE NORTH",
            "ROTATE 3",
            "ROTATE UP",
            "START 1,2",
            "START 1,2,NORTH,EAST",
            "START a,2,NORTH",
            "START 1,2,UP",
            "START 3",
            "JUMP high",
        ],
    )
    def test_malformed_entries_are_values(self, raw: str) -> None:
        parsed = parse_command(raw)
        assert isinstance(parsed, Malformed)
        assert parsed.raw == raw
        assert parsed.reason

    def test_non_string_entry(self) -> None:
        assert isinstance(parse_command(42), Malformed)  # type: ignore[arg-type]


def test_parse_commands_keeps_order() -> None:
    parsed = parse_commands(["START 0,0,NORTH", "MOVE 1", "ROTATE EAST"])
    assert parsed == [Start(0, 0, "NORTH"), Move(1), Rotate("EAST")]


@pytest.mark.parametrize(
    "raw",
    ["START 1,2,SOUTH", "MOVE 5", "ROTATE WEST", "JUMP 2"],
)
def test_command_to_str_renders_wire_form(raw: str) -> None:
    assert command_to_str(parse_command(raw)) == raw


def test_command_to_str_falls_back_to_repr() -> None:
    assert command_to_str("MOVE 1") == "'MOVE 1'"  # type: ignore[arg-type]
