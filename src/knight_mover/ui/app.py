import asyncio
import flet as ft

from knight_mover.cli.runner import MissionReport
from knight_mover.protocol.constants import Status
from knight_mover.ui.components.board import BoardComponent
from knight_mover.ui.components.replay import TimelineReplay
from knight_mover.ui.components.status_panel import STATUS_COLORS, StatusPanelComponent


class KnightViewerApp:
    def __init__(self, report: MissionReport):
        self.report = report
        self.timeline = report.timeline

        # Components
        self.board_component = BoardComponent(report.board) if report.board is not None else None

        self.replay = TimelineReplay(
            get_timeline=lambda: self.timeline,
            on_step=self._apply_snapshot,
            page_getter=lambda: getattr(self, "page", None),
        )

        self.status_component = StatusPanelComponent(report.result.status)

        # UI State
        self.log_view = ft.ListView(expand=True, spacing=4, padding=0, auto_scroll=False)
        self.log_entries: list[ft.Container] = []
        self.board_wrapper = None

        # Layout Constants
        self.board_padding = 24
        self.sidebar_width = 280
        self._last_viewport = (None, None)
        self._board_area_padding_h = 16.0
        self._board_area_padding_v = 16.0
        self._board_column_spacing = 16.0

    def main(self, page: ft.Page):
        self.page = page
        page.title = "Knight Mover"
        page.theme_mode = ft.ThemeMode.LIGHT
        page.window.width = 1100
        page.window.height = 860
        page.padding = 20

        sidebar = self._create_sidebar()
        status_panel = self.status_component.create()
        replay_toolbar = self.replay.create_toolbar()

        if self.board_component is not None:
            board_grid = self.board_component.create_board()
            board = self.report.board
            self.board_wrapper = ft.Container(
                content=board_grid,
                width=board.width * self.board_component.cell_size + self.board_padding * 2,
                height=board.height * self.board_component.cell_size + self.board_padding * 2,
                padding=self.board_padding,
                alignment=ft.alignment.center,
                border_radius=24,
                bgcolor="#fafafa",
                shadow=ft.BoxShadow(
                    blur_radius=25,
                    spread_radius=2,
                    color="rgba(0,0,0,0.25)",
                    offset=ft.Offset(0, 12)
                )
            )
            stage_content = self.board_wrapper
        else:
            stage_content = ft.Text(
                "Mission data could not be loaded.",
                size=16,
                color=STATUS_COLORS[Status.GENERIC_ERROR],
            )

        board_stage = ft.Container(
            content=stage_content,
            alignment=ft.alignment.center,
            expand=True,
        )

        board_area = ft.Container(
            content=ft.Column(
                [status_panel, board_stage, replay_toolbar],
                spacing=self._board_column_spacing,
                horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                expand=True,
            ),
            alignment=ft.alignment.center,
            expand=True,
            padding=ft.padding.symmetric(
                horizontal=self._board_area_padding_h,
                vertical=self._board_area_padding_v,
            ),
            bgcolor="grey200"
        )

        page.add(
            ft.Row(
                [
                    sidebar,
                    ft.VerticalDivider(width=1),
                    board_area
                ],
                expand=True,
                vertical_alignment=ft.CrossAxisAlignment.STRETCH
            )
        )

        page.update()
        self.adjust_board_size()

        if self.timeline:
            self.replay.go_to(0)
        else:
            self.status_component.set_status("No timeline", STATUS_COLORS[Status.GENERIC_ERROR])

        page.run_task(self._monitor_viewport)

    def _create_sidebar(self) -> ft.Container:
        for entry in self.timeline:
            label = entry["command"] or "(initial state)"
            text = ft.Text(f"{entry['index']:>3}  {label}", font_family="monospace", size=11, selectable=True)
            row = ft.Container(
                content=text,
                padding=ft.padding.symmetric(vertical=2, horizontal=6),
                border_radius=4,
                on_click=lambda e, index=entry["index"]: self.replay.go_to(index),
            )
            self.log_entries.append(row)
            self.log_view.controls.append(row)

        log_container = ft.Container(
            content=self.log_view,
            border=ft.border.all(1, "grey400"),
            border_radius=5,
            padding=5,
            expand=True,
            bgcolor="grey100"
        )
        board = self.report.board
        board_label = f"Board {board.width}x{board.height}, {len(board.obstacles)} obstacles" if board else "No board"
        return ft.Container(
            content=ft.Column(
                [
                    ft.Text("Knight Mover", size=22, weight=ft.FontWeight.BOLD),
                    ft.Text(board_label, size=12, color="#555555"),
                    ft.Text("Commands", weight=ft.FontWeight.BOLD),
                    log_container,
                ],
                spacing=10,
                expand=True,
            ),
            width=self.sidebar_width,
        )

    def adjust_board_size(self, width: float | None = None, height: float | None = None):
        if not getattr(self, "page", None) or not self.board_wrapper or self.board_component is None:
            return

        if width is None:
            width = getattr(self.page, "window_width", None) or self.page.width
        if height is None:
            height = getattr(self.page, "window_height", None) or self.page.height
        if width is None or height is None:
            return

        prev_w, prev_h = self._last_viewport
        if prev_w == width and prev_h == height:
            return
        self._last_viewport = (width, height)

        page_padding = float(getattr(self.page, "padding", 0) or 0)
        divider_width = 1.0
        safety_margin = 36.0
        available_width = max(
            200.0,
            float(width)
            - page_padding * 2
            - self.sidebar_width
            - divider_width
            - self._board_area_padding_h * 2
            - safety_margin,
        )

        column_gap_total = self._board_column_spacing * 2
        vertical_chrome = (
            page_padding * 2
            + self._board_area_padding_v * 2
            + column_gap_total
            + float(self.status_component.height)
            + float(self.replay.toolbar_height)
        )
        available_height = max(200.0, float(height) - vertical_chrome)

        board = self.report.board
        usable_w = max(100.0, available_width - 2 * self.board_padding)
        usable_h = max(100.0, available_height - 2 * self.board_padding)
        new_cell_size = max(16.0, min(usable_w / board.width, usable_h / board.height, 72.0))

        if abs(new_cell_size - self.board_component.cell_size) < 0.5:
            return

        self.board_wrapper.width = board.width * new_cell_size + 2 * self.board_padding
        self.board_wrapper.height = board.height * new_cell_size + 2 * self.board_padding
        self.board_wrapper.update()
        self.board_component.resize_cells(new_cell_size)

    async def _monitor_viewport(self):
        await asyncio.sleep(0.2)
        prev_w, prev_h = self._last_viewport
        while True:
            current_w = getattr(self.page, "window_width", None) or self.page.width
            current_h = getattr(self.page, "window_height", None) or self.page.height
            if current_w and current_h:
                if current_w != prev_w or current_h != prev_h:
                    self.adjust_board_size(current_w, current_h)
                    prev_w, prev_h = current_w, current_h
            await asyncio.sleep(0.25)

    def _apply_snapshot(self, index: int):
        if not self.timeline:
            return
        index = max(0, min(index, len(self.timeline) - 1))
        snapshot = self.timeline[index]
        status = snapshot["status"]
        failed = status is not None and status != Status.SUCCESS

        if self.board_component is not None:
            trail = {
                (entry["position"]["x"], entry["position"]["y"])
                for entry in self.timeline[: index + 1]
                if entry["position"] is not None
            }
            self.board_component.show_trail(trail)
            self.board_component.show_knight(snapshot["position"], failed=failed)

        self.status_component.set_position(snapshot["position"])
        if snapshot["command"] is None:
            self.status_component.set_status("Initial state")
        else:
            self.status_component.set_status(
                f"{snapshot['command']} -> {status}",
                STATUS_COLORS.get(status, "#333333"),
            )
        self._highlight_log_entry(index)

    def _highlight_log_entry(self, index: int):
        for idx, row in enumerate(self.log_entries):
            row.bgcolor = "#c5cae9" if idx == index else None
            if row.page:
                row.update()
