import flet as ft

from knight_mover.engine.board import Board
from knight_mover.protocol.constants import Direction

# Arrow glyph drawn on the knight for each facing direction
DIRECTION_GLYPHS = {
    Direction.NORTH: "▲",
    Direction.SOUTH: "▼",
    Direction.EAST: "▶",
    Direction.WEST: "◀",
}

OBSTACLE_COLOR = "#5d4037"
TRAIL_COLOR = "#a5d6a7"


class BoardComponent:
    def __init__(self, board: Board, cell_size: float = 48):
        self.board = board
        self.cell_size = cell_size

        # State
        self.knight_markers = {}  # Map (x, y) -> knight Container
        self.cell_containers = {}  # Map (x, y) -> cell Container
        self.cell_base_colors = {}
        self.board_grid = None
        self._knight_cell = None

    def create_board(self) -> ft.Column:
        rows = []
        # North is up: the top row is the highest y
        for y in reversed(range(self.board.height)):
            row_controls = []
            for x in range(self.board.width):
                cell_key = (x, y)
                marker_size = int(self.cell_size * 0.72)
                if self.board.is_obstacle(x, y):
                    base_color = OBSTACLE_COLOR
                else:
                    base_color = "#eeeeee" if (x + y) % 2 == 0 else "#dcdcdc"

                knight = ft.Container(
                    content=ft.Text("", size=max(10, int(marker_size * 0.45)), color="white"),
                    width=marker_size,
                    height=marker_size,
                    border_radius=marker_size / 2,
                    bgcolor=None,
                    alignment=ft.alignment.center,
                )

                cell = ft.Container(
                    content=knight,
                    width=self.cell_size,
                    height=self.cell_size,
                    bgcolor=base_color,
                    border=ft.border.all(1, "#9e9e9e"),
                    alignment=ft.alignment.center,
                    tooltip=f"({x},{y})",
                    data=cell_key,
                )

                self.knight_markers[cell_key] = knight
                self.cell_containers[cell_key] = cell
                self.cell_base_colors[cell_key] = base_color
                row_controls.append(cell)
            rows.append(ft.Row(row_controls, spacing=0, tight=True))

        self.board_grid = ft.Column(rows, spacing=0)
        return self.board_grid

    def show_knight(self, position: dict | None, failed: bool = False):
        """Move the knight marker to ``position`` ({"x", "y", "direction"}) or hide it."""
        if self._knight_cell is not None:
            self._paint_knight(self._knight_cell, None, failed=False)
            self._knight_cell = None

        if position is None:
            return
        cell_key = (position["x"], position["y"])
        if cell_key not in self.knight_markers:
            return
        self._paint_knight(cell_key, position.get("direction"), failed=failed)
        self._knight_cell = cell_key

    def show_trail(self, cells: set):
        for cell_key, cell in self.cell_containers.items():
            base_color = self.cell_base_colors[cell_key]
            if cell_key in cells and base_color != OBSTACLE_COLOR:
                cell.bgcolor = TRAIL_COLOR
            else:
                cell.bgcolor = base_color
        if self.board_grid and self.board_grid.page:
            self.board_grid.update()

    def _paint_knight(self, cell_key, direction: str | None, failed: bool):
        knight = self.knight_markers[cell_key]
        glyph = knight.content
        if direction is None:
            knight.bgcolor = None
            knight.shadow = None
            glyph.value = ""
        else:
            knight.bgcolor = "#c62828" if failed else "#1a237e"
            knight.shadow = ft.BoxShadow(
                blur_radius=10,
                spread_radius=1,
                color="rgba(0,0,0,0.35)",
                offset=ft.Offset(0, 3)
            )
            # A direction outside the four canonical ones is shown as a dot
            glyph.value = DIRECTION_GLYPHS.get(direction, "•")
        if knight.page:
            knight.update()

    def resize_cells(self, new_cell_size: float):
        self.cell_size = new_cell_size
        if not self.cell_containers:
            return

        marker_size = max(12, int(self.cell_size * 0.72))
        for cell_key, cell in self.cell_containers.items():
            cell.width = self.cell_size
            cell.height = self.cell_size
            knight = self.knight_markers[cell_key]
            knight.width = marker_size
            knight.height = marker_size
            knight.border_radius = marker_size / 2
            knight.content.size = max(10, int(marker_size * 0.45))

        if self.board_grid and self.board_grid.page:
            self.board_grid.update()
