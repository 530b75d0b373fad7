import asyncio
from typing import Callable, cast

import flet as ft

from knight_mover.engine.interpreter import TimelineEntry
from knight_mover.protocol.constants import Status


class TimelineReplay:
    """Steps through an interpreter timeline and drives the viewer.

    The controller owns the current step. ``on_step`` is called with the new
    index after every move so the app can repaint the board.
    """

    def __init__(self,
                 get_timeline: Callable[[], list[TimelineEntry]],
                 on_step: Callable[[int], None],
                 page_getter: Callable[[], ft.Page | None] = lambda: None,
                 step_delay: float = 0.6):
        self.get_timeline = get_timeline
        self.on_step = on_step
        self.get_page = page_getter
        self.step_delay = step_delay

        self.index = 0
        self.playing = False
        self._task: asyncio.Task | None = None

        self.label: ft.Text | None = None
        self.slider: ft.Slider | None = None
        self.buttons: dict[str, ft.IconButton] = {}
        self.toolbar_height = 58

    @property
    def last_index(self) -> int:
        return max(len(self.get_timeline()) - 1, 0)

    @property
    def failure_index(self) -> int | None:
        """Index of the entry that ended the run, if it failed."""
        for entry in self.get_timeline():
            if entry["status"] not in (None, Status.SUCCESS):
                return entry["index"]
        return None

    def describe(self, index: int) -> str:
        timeline = self.get_timeline()
        if not timeline:
            return "No steps"
        entry = timeline[index]
        if entry["command"] is None:
            return f"Step 0 / {self.last_index}: initial state"
        return f"Step {index} / {self.last_index}: {entry['command']} -> {entry['status']}"

    def create_toolbar(self) -> ft.Container:
        self.label = ft.Text(self.describe(self.index), size=12, color="#333333", width=260)
        self.slider = ft.Slider(
            min=0,
            max=max(self.last_index, 1),
            divisions=max(self.last_index, 1),
            value=self.index,
            disabled=self.last_index == 0,
            on_change=lambda e: self.go_to(int(e.control.value)),
            expand=True,
        )
        self.buttons = {
            "first": ft.IconButton(icon="first_page", on_click=lambda e: self.go_to(0), tooltip="Initial state"),
            "back": ft.IconButton(icon="chevron_left", on_click=lambda e: self.go_to(self.index - 1), tooltip="Previous command"),
            "play": ft.IconButton(icon="play_arrow", on_click=lambda e: self.toggle_play(), tooltip="Play/Pause"),
            "forward": ft.IconButton(icon="chevron_right", on_click=lambda e: self.go_to(self.index + 1), tooltip="Next command"),
            "failure": ft.IconButton(icon="error_outline", on_click=lambda e: self.go_to_failure(), tooltip="Jump to the failing command"),
        }
        container = ft.Container(
            content=ft.Row(
                [*self.buttons.values(), self.slider, self.label],
                alignment=ft.MainAxisAlignment.CENTER,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=6,
            ),
            padding=ft.padding.symmetric(vertical=6, horizontal=16),
            bgcolor="#f1f1f1",
            border_radius=12,
            border=ft.border.all(1, "#dcdcdc"),
            height=self.toolbar_height,
            alignment=ft.alignment.center
        )
        self._refresh()
        return container

    def go_to(self, index: int, keep_playing: bool = False):
        if not self.get_timeline():
            return
        if not keep_playing:
            self.stop()
        self.index = max(0, min(index, self.last_index))
        self.on_step(self.index)
        self._refresh()

    def go_to_failure(self):
        failure = self.failure_index
        if failure is not None:
            self.go_to(failure)

    def toggle_play(self):
        if self.playing:
            self.stop()
        else:
            self.play()

    def play(self):
        if self.playing or not self.get_timeline():
            return
        if self.index >= self._play_limit():
            self.go_to(0)
        self.playing = True
        self._refresh()
        page = self.get_page()
        if page:
            self._task = cast(asyncio.Task, page.run_task(self._play_loop))
        else:
            self._task = asyncio.create_task(self._play_loop())

    def stop(self):
        if self._task and not self._task.done():
            self._task.cancel()
        self._task = None
        if self.playing:
            self.playing = False
            self._refresh()

    def _play_limit(self) -> int:
        # Playback halts on the failing entry; nothing after it was executed
        failure = self.failure_index
        return self.last_index if failure is None else failure

    async def _play_loop(self):
        try:
            while self.playing and self.index < self._play_limit():
                await asyncio.sleep(self.step_delay)
                self.go_to(self.index + 1, keep_playing=True)
        except asyncio.CancelledError:
            return
        self.playing = False
        self._refresh()

    def _refresh(self):
        empty = not self.get_timeline()
        at_start = self.index <= 0
        at_end = self.index >= self.last_index
        failure = self.failure_index

        if self.label:
            self.label.value = self.describe(self.index)
            self.label.color = "#c62828" if failure is not None and self.index == failure else "#333333"
        if self.slider:
            self.slider.value = self.index
        if self.buttons:
            self.buttons["first"].disabled = empty or at_start
            self.buttons["back"].disabled = empty or at_start
            self.buttons["forward"].disabled = empty or at_end
            self.buttons["play"].disabled = empty
            self.buttons["play"].icon = "pause" if self.playing else "play_arrow"
            self.buttons["failure"].disabled = failure is None or self.index == failure

        for control in [self.label, self.slider, *self.buttons.values()]:
            if control is not None and getattr(control, "page", None):
                control.update()
