"""Tests for the replay viewer's timeline stepping (no page attached)."""

from __future__ import annotations

import pytest

pytest.importorskip("flet")

from knight_mover.cli.runner import replay  # noqa: E402
from knight_mover.engine.board import Board  # noqa: E402
from knight_mover.ui.components.replay import TimelineReplay  # noqa: E402


def build(raw_commands: list[str]) -> tuple[TimelineReplay, list[int]]:
    report = replay(Board(3, 3), raw_commands)
    shown: list[int] = []
    controller = TimelineReplay(get_timeline=lambda: report.timeline, on_step=shown.append)
    return controller, shown


class TestStepping:
    def test_forward_and_back(self) -> None:
        controller, shown = build(["START 0,0,NORTH", "MOVE 1", "ROTATE EAST"])
        controller.go_to(1)
        controller.go_to(2)
        controller.go_to(controller.index - 1)
        assert shown == [1, 2, 1]
        assert controller.index == 1

    def test_steps_are_clamped(self) -> None:
        controller, shown = build(["START 0,0,NORTH", "MOVE 1"])
        controller.go_to(-3)
        controller.go_to(99)
        assert shown == [0, 2]

    def test_empty_timeline_ignores_steps(self) -> None:
        shown: list[int] = []
        controller = TimelineReplay(get_timeline=lambda: [], on_step=shown.append)
        controller.go_to(1)
        controller.toggle_play()
        assert shown == []
        assert controller.playing is False
        assert controller.describe(0) == "No steps"


class TestFailureEntry:
    def test_failure_index_points_at_failing_command(self) -> None:
        controller, _ = build(["START 0,0,NORTH", "MOVE 1", "MOVE 5"])
        assert controller.failure_index == 3

    def test_successful_run_has_no_failure(self) -> None:
        controller, _ = build(["START 0,0,NORTH", "MOVE 1"])
        assert controller.failure_index is None

    def test_go_to_failure(self) -> None:
        controller, shown = build(["START 0,0,NORTH", "MOVE 9"])
        controller.go_to_failure()
        assert shown == [2]

    def test_playback_halts_on_failure(self) -> None:
        controller, _ = build(["START 0,0,EAST", "MOVE 9"])
        assert controller._play_limit() == 2


class TestLabels:
    def test_describe_uses_command_text(self) -> None:
        controller, _ = build(["START 0,0,NORTH", "MOVE 5"])
        assert controller.describe(0) == "Step 0 / 2: initial state"
        assert controller.describe(1) == "Step 1 / 2: START 0,0,NORTH -> SUCCESS"
        assert controller.describe(2) == "Step 2 / 2: MOVE 5 -> OUT_OF_THE_BOARD"

    def test_toolbar_follows_index(self) -> None:
        controller, _ = build(["START 0,0,NORTH", "MOVE 5"])
        controller.create_toolbar()
        assert controller.buttons["back"].disabled is True
        assert controller.buttons["forward"].disabled is False
        assert controller.buttons["failure"].disabled is False
        controller.go_to_failure()
        assert controller.buttons["forward"].disabled is True
        assert controller.buttons["failure"].disabled is True
        assert controller.label.value == "Step 2 / 2: MOVE 5 -> OUT_OF_THE_BOARD"
        assert controller.slider.value == 2
