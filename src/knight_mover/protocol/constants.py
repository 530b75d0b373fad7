class Command:
    START = "START"     # START <x>,<y>,<direction>
    MOVE = "MOVE"       # MOVE <steps>
    ROTATE = "ROTATE"   # ROTATE <direction>

class Status:
    SUCCESS = "SUCCESS"
    INVALID_START_POSITION = "INVALID_START_POSITION"
    OUT_OF_THE_BOARD = "OUT_OF_THE_BOARD"
    GENERIC_ERROR = "GENERIC_ERROR"

class Direction:
    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"

    ALL = (NORTH, SOUTH, EAST, WEST)

    VECTORS = {
        NORTH: (0, 1),
        SOUTH: (0, -1),
        EAST: (1, 0),
        WEST: (-1, 0),
    }

    @classmethod
    def is_valid(cls, name: str | None) -> bool:
        return name in cls.VECTORS

    @classmethod
    def vector(cls, name: str | None) -> tuple[int, int]:
        """Unit displacement for a direction; unknown names do not move."""
        return cls.VECTORS.get(name, (0, 0))  # type: ignore[arg-type]
