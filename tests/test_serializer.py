"""Tests for knight_mover.io.serializer module."""

from __future__ import annotations

import json

from knight_mover.engine.board import Board
from knight_mover.engine.interpreter import Position, Result
from knight_mover.io.serializer import dump_result, result_to_dict, timeline_to_dict
from knight_mover.protocol.constants import Status


def test_success_includes_position() -> None:
    result = Result(Status.SUCCESS, Position(0, 4, "NORTH"))
    assert result_to_dict(result) == {
        "status": "SUCCESS",
        "position": {"x": 0, "y": 4, "direction": "NORTH"},
    }


def test_failure_omits_position() -> None:
    assert result_to_dict(Result(Status.OUT_OF_THE_BOARD)) == {"status": "OUT_OF_THE_BOARD"}


def test_failure_never_leaks_position() -> None:
    result = Result(Status.GENERIC_ERROR, Position(1, 1, "EAST"))
    assert "position" not in result_to_dict(result)


def test_dump_result_is_json() -> None:
    text = dump_result(Result(Status.SUCCESS, Position(2, 1, "EAST")))
    assert json.loads(text) == {"status": "SUCCESS", "position": {"x": 2, "y": 1, "direction": "EAST"}}


def test_dump_result_with_trace() -> None:
    timeline = [{"index": 0, "command": None, "status": None, "position": None}]
    payload = json.loads(dump_result(Result(Status.GENERIC_ERROR), board=Board(2, 2), timeline=timeline))
    assert payload["status"] == "GENERIC_ERROR"
    assert payload["trace"]["board"] == {"width": 2, "height": 2, "obstacles": []}
    assert payload["trace"]["timeline"] == timeline


def test_timeline_to_dict_copies_entries() -> None:
    timeline = [{"index": 0, "command": None, "status": None, "position": None}]
    dumped = timeline_to_dict(None, timeline)
    dumped["timeline"][0]["index"] = 9
    assert timeline[0]["index"] == 0
    assert dumped["board"] is None
