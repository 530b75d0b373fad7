import flet as ft

from knight_mover.protocol.constants import Status

STATUS_COLORS = {
    Status.SUCCESS: "#2e7d32",
    Status.INVALID_START_POSITION: "#c62828",
    Status.OUT_OF_THE_BOARD: "#c62828",
    Status.GENERIC_ERROR: "#c62828",
}


class StatusPanelComponent:
    def __init__(self, final_status: str, height: float = 82):
        self.height = height
        self.final_status = final_status
        self.result_text = ft.Text(
            final_status,
            size=20,
            weight=ft.FontWeight.BOLD,
            color=STATUS_COLORS.get(final_status, "#111111"),
        )
        self.position_text = ft.Text("Not started", size=20, weight=ft.FontWeight.BOLD, color="#111111", text_align=ft.TextAlign.RIGHT)
        self.status_text = ft.Text("Ready", size=13, color="#333333", weight=ft.FontWeight.BOLD)
        self.container = None

    def create(self) -> ft.Container:
        header_row = ft.Row(
            [
                ft.Text("RESULT", size=11, color="#666666"),
                self.status_text,
                ft.Text("KNIGHT", size=11, color="#666666")
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER
        )

        value_row = ft.Row(
            [
                ft.Container(content=self.result_text, alignment=ft.alignment.center_left, expand=1),
                ft.Container(content=self.position_text, alignment=ft.alignment.center_right, expand=1),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

        self.container = ft.Container(
            content=ft.Column(
                [header_row, value_row],
                spacing=4,
                alignment=ft.MainAxisAlignment.START,
                horizontal_alignment=ft.CrossAxisAlignment.STRETCH
            ),
            padding=ft.padding.symmetric(vertical=6, horizontal=14),
            bgcolor="#f9f9f9",
            border_radius=14,
            border=ft.border.all(1, "#e0e0e0"),
            shadow=ft.BoxShadow(
                blur_radius=6,
                color="rgba(0,0,0,0.08)",
                offset=ft.Offset(0, 3)
            ),
            height=self.height,
            alignment=ft.alignment.center
        )
        return self.container

    def set_position(self, position: dict | None):
        if position is None:
            self.position_text.value = "Not started"
        else:
            self.position_text.value = f"({position['x']},{position['y']}) {position['direction']}"
        if self.position_text.page:
            self.position_text.update()

    def set_status(self, message: str, color: str = "#333333"):
        self.status_text.value = message
        self.status_text.color = color
        if self.status_text.page:
            self.status_text.update()
