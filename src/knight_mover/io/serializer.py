from __future__ import annotations

import copy
import json
from typing import Any, Dict, List, Optional

from knight_mover.engine.board import Board
from knight_mover.engine.interpreter import Position, Result, TimelineEntry
from knight_mover.protocol.constants import Status

JSONDict = Dict[str, Any]


def position_to_dict(position: Position) -> JSONDict:
    return {"x": position.x, "y": position.y, "direction": position.direction}


def result_to_dict(result: Result) -> JSONDict:
    """Output contract: ``position`` is present only for a successful run."""
    payload: JSONDict = {"status": result.status}
    if result.status == Status.SUCCESS and result.position is not None:
        payload["position"] = position_to_dict(result.position)
    return payload


def timeline_to_dict(board: Optional[Board], timeline: List[TimelineEntry]) -> JSONDict:
    return {
        "board": board.to_dict() if board is not None else None,
        "timeline": copy.deepcopy(timeline),
    }


def dump_result(
    result: Result,
    indent: int | None = None,
    board: Optional[Board] = None,
    timeline: Optional[List[TimelineEntry]] = None,
) -> str:
    payload = result_to_dict(result)
    if timeline is not None:
        payload["trace"] = timeline_to_dict(board, timeline)
    return json.dumps(payload, indent=indent)
