from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from knight_mover.engine.board import Board
from knight_mover.engine.commands import (
    Malformed,
    Move,
    ParsedCommand,
    Rotate,
    Start,
    Unknown,
    command_to_str,
)
from knight_mover.protocol.constants import Direction, Status

logger = logging.getLogger(__name__)

TimelineEntry = Dict[str, Any]


@dataclass
class Position:
    x: int
    y: int
    direction: str


@dataclass
class Result:
    status: str
    position: Optional[Position] = None

    @property
    def succeeded(self) -> bool:
        return self.status == Status.SUCCESS


class _Failure(Exception):
    """Internal short-circuit; never escapes ``KnightInterpreter.run``."""

    def __init__(self, status: str, reason: str):
        super().__init__(reason)
        self.status = status
        self.reason = reason


class KnightInterpreter:
    """Replays commands against a board and reports the knight's final state.

    The interpreter keeps the timeline of the last run so a viewer can step
    through it afterwards. Every call to ``run`` starts from scratch.
    """

    def __init__(self):
        self.timeline: List[TimelineEntry] = []
        self._position: Optional[Position] = None

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    def run(self, board: Board, commands: Iterable[ParsedCommand]) -> Result:
        self._position = None
        self.timeline = []
        self._record(None, None)

        for command in commands:
            try:
                self._apply(board, command)
            except _Failure as failure:
                logger.info("Run failed at %r: %s", command_to_str(command), failure.reason)
                self._record(command, failure.status)
                return Result(status=failure.status)
            self._record(command, Status.SUCCESS)

        if self._position is None:
            logger.info("Run finished without a START command")
            return Result(status=Status.GENERIC_ERROR)

        final = Position(self._position.x, self._position.y, self._position.direction)
        logger.debug("Run succeeded at (%d,%d) facing %s", final.x, final.y, final.direction)
        return Result(status=Status.SUCCESS, position=final)

    def _apply(self, board: Board, command: ParsedCommand):
        logger.debug("Applying %s", command_to_str(command))
        if isinstance(command, Start):
            self._handle_start(board, command)
        elif isinstance(command, Move):
            self._handle_move(board, command)
        elif isinstance(command, Rotate):
            self._handle_rotate(command)
        elif isinstance(command, Malformed):
            raise _Failure(Status.GENERIC_ERROR, command.reason)
        elif isinstance(command, Unknown):
            raise _Failure(Status.GENERIC_ERROR, f"Unknown command {command.keyword!r}")
        else:
            raise _Failure(Status.GENERIC_ERROR, f"Unsupported command object {command!r}")

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def _handle_start(self, board: Board, command: Start):
        if self._position is not None:
            raise _Failure(Status.GENERIC_ERROR, "Knight already started")
        if not board.is_on_board(command.x, command.y):
            raise _Failure(
                Status.INVALID_START_POSITION,
                f"Start {board.cell_to_str(command.x, command.y)} is outside the board",
            )
        # Starting on an obstacle is allowed; only movement checks obstacles.
        self._position = Position(command.x, command.y, command.direction)

    def _handle_move(self, board: Board, command: Move):
        position = self._require_started()
        dx, dy = Direction.vector(position.direction)
        if (dx, dy) == (0, 0):
            return
        x, y = position.x, position.y

        for _ in range(command.steps):
            next_x, next_y = x + dx, y + dy
            if not board.is_on_board(next_x, next_y):
                raise _Failure(
                    Status.OUT_OF_THE_BOARD,
                    f"Move to {board.cell_to_str(next_x, next_y)} leaves the board",
                )
            if board.is_obstacle(next_x, next_y):
                logger.debug("Blocked by obstacle at %s", board.cell_to_str(next_x, next_y))
                break
            x, y = next_x, next_y

        position.x, position.y = x, y

    def _handle_rotate(self, command: Rotate):
        position = self._require_started()
        # Stored as given: a non-canonical direction makes later moves stand still.
        position.direction = command.direction

    def _require_started(self) -> Position:
        if self._position is None:
            raise _Failure(Status.GENERIC_ERROR, "Knight has not started")
        return self._position

    # ------------------------------------------------------------------
    # Timeline
    # ------------------------------------------------------------------
    def _record(self, command: Optional[ParsedCommand], status: Optional[str]):
        position = self._position
        self.timeline.append(
            {
                "index": len(self.timeline),
                "command": command_to_str(command) if command is not None else None,
                "status": status,
                "position": _position_dict(position),
            }
        )


def _position_dict(position: Optional[Position]) -> Optional[Dict[str, Any]]:
    if position is None:
        return None
    return {"x": position.x, "y": position.y, "direction": position.direction}


def execute_commands(board: Board, commands: Iterable[ParsedCommand]) -> Result:
    return KnightInterpreter().run(board, commands)
