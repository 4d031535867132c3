from __future__ import annotations

from typing import Protocol

from .layout import ROW_WIDTH


class SupportsXY(Protocol):
    x: float
    y: float


def cell_rect(
    slot: int,
    *,
    origin_x: float,
    origin_y: float,
    cell_size: float,
    gap: float = 0.0,
) -> tuple[float, float, float, float]:
    pitch = float(cell_size) + float(gap)
    row, col = divmod(int(slot), ROW_WIDTH)
    return (
        float(origin_x) + col * pitch,
        float(origin_y) + row * pitch,
        float(cell_size),
        float(cell_size),
    )


def slot_at(
    mouse: SupportsXY,
    *,
    origin_x: float,
    origin_y: float,
    cell_size: float,
    rows: int,
    gap: float = 0.0,
) -> int | None:
    """Slot under `mouse`, or None for points outside the grid or inside a gap."""

    pitch = float(cell_size) + float(gap)
    if float(cell_size) <= 0.0:
        return None
    dx = float(mouse.x) - float(origin_x)
    dy = float(mouse.y) - float(origin_y)
    if dx < 0.0 or dy < 0.0:
        return None
    col = int(dx // pitch)
    row = int(dy // pitch)
    if col >= ROW_WIDTH or row >= int(rows):
        return None
    # Cell edges are inclusive, matching the menu panel hit tests.
    if dx - col * pitch > float(cell_size) or dy - row * pitch > float(cell_size):
        return None
    return row * ROW_WIDTH + col
