"""Tests for the knight-mover command line."""

from __future__ import annotations

import json

import pytest

from knight_mover.config import DEFAULT_BOARD_URL, DEFAULT_COMMANDS_URL
from knight_mover.main import build_parser, main


@pytest.fixture
def mission_files(write_json):
    board = write_json("board.json", {"width": 5, "height": 5, "obstacles": []})
    commands = write_json("commands.json", {"commands": ["START 0,0,NORTH", "MOVE 4"]})
    return board, commands


def test_run_prints_result(mission_files, capsys) -> None:
    board, commands = mission_files
    exit_code = main(["run", "--board", board, "--commands", commands])
    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"status": "SUCCESS", "position": {"x": 0, "y": 4, "direction": "NORTH"}}


def test_run_with_trace(mission_files, capsys) -> None:
    board, commands = mission_files
    main(["run", "--board", board, "--commands", commands, "--trace"])
    payload = json.loads(capsys.readouterr().out)
    assert [entry["command"] for entry in payload["trace"]["timeline"]] == [None, "START 0,0,NORTH", "MOVE 4"]


def test_run_failure_exit_code(write_json, capsys) -> None:
    board = write_json("board.json", {"width": 3, "height": 3, "obstacles": []})
    commands = write_json("commands.json", {"commands": ["START 5,5,NORTH"]})
    assert main(["run", "--board", board, "--commands", commands]) == 1
    assert json.loads(capsys.readouterr().out) == {"status": "INVALID_START_POSITION"}


def test_run_missing_source_is_generic_error(tmp_path, capsys) -> None:
    missing = str(tmp_path / "missing.json")
    assert main(["run", "--board", missing, "--commands", missing]) == 1
    assert json.loads(capsys.readouterr().out) == {"status": "GENERIC_ERROR"}


def test_defaults_point_at_sample_documents() -> None:
    args = build_parser().parse_args(["run"])
    assert args.board == DEFAULT_BOARD_URL
    assert args.commands == DEFAULT_COMMANDS_URL
    assert args.trace is False


def test_no_subcommand_prints_help(capsys) -> None:
    assert main([]) == 2
    assert "usage" in capsys.readouterr().out
