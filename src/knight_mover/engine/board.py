from typing import Any, Dict, FrozenSet, Iterable, List, Tuple

Cell = Tuple[int, int]


class Board:
    """Bounded grid with blocking obstacle cells. Coordinates are zero-based."""

    def __init__(self, width: int, height: int, obstacles: Iterable[Cell] = ()):
        if width < 1 or height < 1:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._obstacles: FrozenSet[Cell] = frozenset((int(x), int(y)) for x, y in obstacles)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def obstacles(self) -> FrozenSet[Cell]:
        return self._obstacles

    def is_on_board(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def is_obstacle(self, x: int, y: int) -> bool:
        return (x, y) in self._obstacles

    def cell_to_str(self, x: int, y: int) -> str:
        return f"({x},{y})"

    @classmethod
    def from_dict(cls, data: Any) -> "Board":
        """Build a board from ``{"width": w, "height": h, "obstacles": [{"x": .., "y": ..}]}``."""
        if not isinstance(data, dict):
            raise ValueError("Board descriptor must be a JSON object")
        width = _require_int(data, "width")
        height = _require_int(data, "height")

        raw_obstacles = data.get("obstacles") or []
        if not isinstance(raw_obstacles, list):
            raise ValueError("Board obstacles must be a list")
        obstacles: List[Cell] = []
        for idx, entry in enumerate(raw_obstacles):
            if not isinstance(entry, dict):
                raise ValueError(f"Obstacle #{idx} must be an object with x and y")
            obstacles.append((_require_int(entry, "x"), _require_int(entry, "y")))

        return cls(width, height, obstacles)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self._width,
            "height": self._height,
            "obstacles": [{"x": x, "y": y} for x, y in sorted(self._obstacles)],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self._width, self._height, self._obstacles) == (other._width, other._height, other._obstacles)

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._obstacles))

    def __repr__(self) -> str:
        return f"Board(width={self._width}, height={self._height}, obstacles={len(self._obstacles)})"


def _require_int(data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass; a JSON true/false is not a coordinate
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Field '{key}' must be an integer, got {value!r}")
    return value
