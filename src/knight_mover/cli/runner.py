from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import httpx

from knight_mover.config import DEFAULT_TIMEOUT
from knight_mover.engine.board import Board
from knight_mover.engine.commands import parse_commands
from knight_mover.engine.interpreter import KnightInterpreter, Result, TimelineEntry
from knight_mover.io.loader import LoaderError, load_board, load_commands
from knight_mover.protocol.constants import Status

logger = logging.getLogger(__name__)


@dataclass
class MissionReport:
    result: Result
    board: Optional[Board] = None
    raw_commands: List[str] = field(default_factory=list)
    timeline: List[TimelineEntry] = field(default_factory=list)


def run_mission(
    board_source: str,
    commands_source: str,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> MissionReport:
    """Load both documents and replay the commands.

    Retrieval or decoding failures never propagate: they are logged and
    reported as ``GENERIC_ERROR`` without a board or timeline.
    """
    try:
        board = load_board(board_source, client=client, timeout=timeout)
        raw_commands = load_commands(commands_source, client=client, timeout=timeout)
    except LoaderError:
        logger.exception("Could not load mission data")
        return MissionReport(result=Result(status=Status.GENERIC_ERROR))

    return replay(board, raw_commands)


def replay(board: Board, raw_commands: List[str]) -> MissionReport:
    interpreter = KnightInterpreter()
    result = interpreter.run(board, parse_commands(raw_commands))
    return MissionReport(
        result=result,
        board=board,
        raw_commands=list(raw_commands),
        timeline=interpreter.timeline,
    )
