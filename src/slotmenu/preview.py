from __future__ import annotations

from typing import Any

from .layout import ROW_WIDTH, plain_title
from .menu import Menu
from .surface import EMPTY_CELL, Surface

EMPTY_MARK = "."


def format_cell(content: Any, width: int) -> str:
    text = EMPTY_MARK if content is EMPTY_CELL else str(content)
    return text[:width].ljust(width)


def format_grid(surface: Surface, *, width: int = 8) -> str:
    width = max(1, int(width))
    lines: list[str] = []
    for row_start in range(0, int(surface.size), ROW_WIDTH):
        cells = [format_cell(surface.get_cell(slot), width) for slot in range(row_start, row_start + ROW_WIDTH)]
        lines.append(" ".join(cells).rstrip())
    return "\n".join(lines)


def format_menu(menu: Menu, *, width: int = 8) -> str:
    header = f"{plain_title(menu.title)} [{menu.shape.rows}x{ROW_WIDTH}]"
    if menu.window is not None:
        header += f" offset={menu.window.offset}/{len(menu.window.content)}"
    return header + "\n" + format_grid(menu.surface, width=width)
