from __future__ import annotations

from dataclasses import dataclass

import pyray as rl

from .events import SlotClick
from .hit_test import cell_rect, slot_at
from .layout import ROW_WIDTH, plain_title
from .menu import Menu
from .preview import EMPTY_MARK
from .registry import MenuRegistry
from .surface import EMPTY_CELL

VIEW_MARGIN = 16.0
VIEW_TITLE_H = 28.0
VIEW_TITLE_SIZE = 20
VIEW_CELL_TEXT_SIZE = 12
VIEW_CELL_GAP = 4.0

VIEW_BG_COLOR = rl.Color(24, 24, 28, 255)
VIEW_CELL_COLOR = rl.Color(139, 139, 139, 255)
VIEW_CELL_EMPTY_COLOR = rl.Color(90, 90, 96, 255)
VIEW_CELL_HOVER_COLOR = rl.Color(200, 200, 210, 255)
VIEW_CELL_BORDER_COLOR = rl.Color(40, 40, 44, 255)
VIEW_TEXT_COLOR = rl.Color(240, 240, 240, 255)


@dataclass(slots=True)
class RaylibGridView:
    """Draws a menu's surface as a grid and feeds mouse clicks back through the registry."""

    menu: Menu
    registry: MenuRegistry
    cell_size: float = 64.0
    viewer: str = "local"
    hover_slot: int | None = None

    @property
    def grid_origin(self) -> tuple[float, float]:
        return VIEW_MARGIN, VIEW_MARGIN + VIEW_TITLE_H

    def window_size(self) -> tuple[int, int]:
        pitch = self.cell_size + VIEW_CELL_GAP
        width = VIEW_MARGIN * 2.0 + ROW_WIDTH * pitch - VIEW_CELL_GAP
        height = VIEW_MARGIN * 2.0 + VIEW_TITLE_H + self.menu.shape.rows * pitch - VIEW_CELL_GAP
        return int(width), int(height)

    def _slot_under_mouse(self) -> int | None:
        origin_x, origin_y = self.grid_origin
        return slot_at(
            rl.get_mouse_position(),
            origin_x=origin_x,
            origin_y=origin_y,
            cell_size=self.cell_size,
            rows=self.menu.shape.rows,
            gap=VIEW_CELL_GAP,
        )

    def open(self) -> None:
        self.menu.open_to(self.viewer)

    def update(self, dt: float) -> None:
        self.hover_slot = self._slot_under_mouse()
        if self.hover_slot is None:
            return
        for button, name in (
            (rl.MouseButton.MOUSE_BUTTON_LEFT, "left"),
            (rl.MouseButton.MOUSE_BUTTON_RIGHT, "right"),
        ):
            if rl.is_mouse_button_pressed(button):
                event = SlotClick(slot=self.hover_slot, viewer=self.viewer, button=name)
                self.registry.handle_click(self.menu.surface, self.hover_slot, event)

    def draw(self) -> None:
        rl.clear_background(VIEW_BG_COLOR)
        rl.draw_text(plain_title(self.menu.title), int(VIEW_MARGIN), int(VIEW_MARGIN), VIEW_TITLE_SIZE, VIEW_TEXT_COLOR)
        origin_x, origin_y = self.grid_origin
        surface = self.menu.surface
        for slot in range(int(surface.size)):
            x, y, w, h = cell_rect(slot, origin_x=origin_x, origin_y=origin_y, cell_size=self.cell_size, gap=VIEW_CELL_GAP)
            rect = rl.Rectangle(x, y, w, h)
            content = surface.get_cell(slot)
            if slot == self.hover_slot:
                color = VIEW_CELL_HOVER_COLOR
            elif content is EMPTY_CELL:
                color = VIEW_CELL_EMPTY_COLOR
            else:
                color = VIEW_CELL_COLOR
            rl.draw_rectangle_rec(rect, color)
            rl.draw_rectangle_lines_ex(rect, 2.0, VIEW_CELL_BORDER_COLOR)
            text = EMPTY_MARK if content is EMPTY_CELL else str(content)
            rl.draw_text(text[:8], int(x + 4.0), int(y + h * 0.5 - VIEW_CELL_TEXT_SIZE * 0.5), VIEW_CELL_TEXT_SIZE, VIEW_TEXT_COLOR)


def run_viewer(view: RaylibGridView, *, fps: int = 60) -> None:
    width, height = view.window_size()
    rl.init_window(width, height, plain_title(view.menu.title) or "slotmenu")
    rl.set_target_fps(fps)
    view.open()
    while not rl.window_should_close():
        view.update(rl.get_frame_time())
        rl.begin_drawing()
        view.draw()
        rl.end_drawing()
    rl.close_window()
