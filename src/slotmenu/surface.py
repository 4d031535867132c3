from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

EMPTY_CELL: Any = None


class Surface(Protocol):
    @property
    def size(self) -> int: ...

    def get_cell(self, slot: int) -> Any: ...

    def set_cell(self, slot: int, content: Any) -> None: ...


@dataclass(slots=True, eq=False)
class GridSurface:
    """In-memory cell array; doubles as the container identity in a registry."""

    slot_count: int
    title: str = "GUI"
    cells: list[Any] = field(init=False)
    writes: int = 0
    viewers: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.cells = [EMPTY_CELL] * int(self.slot_count)

    @property
    def size(self) -> int:
        return len(self.cells)

    def get_cell(self, slot: int) -> Any:
        return self.cells[slot]

    def set_cell(self, slot: int, content: Any) -> None:
        self.cells[slot] = content
        self.writes += 1

    def open_to(self, viewer: Any) -> None:
        if viewer not in self.viewers:
            self.viewers.append(viewer)
