from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .debug_log import menu_debug_log
from .elements import Element
from .layout import Indicator
from .surface import EMPTY_CELL
from .table import SlotTable


@dataclass(slots=True)
class ScrollWindow:
    """
    Viewport over `content` projected onto the content-region slots.

    `offset` is the content index shown in the first region slot. The content
    list may shrink or grow between fills; an offset past the end simply
    renders every region slot empty.
    """

    table: SlotTable
    content: list[Element | None] = field(default_factory=list)
    offset: int = 0
    indicator: Indicator = Indicator.CONTENT

    @property
    def slots(self) -> list[int]:
        return self.table.region_slots(self.indicator)

    @property
    def window_size(self) -> int:
        return len(self.slots)

    def fill(self) -> None:
        content = self.content
        for pos, slot in enumerate(self.slots):
            index = self.offset + pos
            element = content[index] if index < len(content) else None
            if element is None:
                self.table.put(slot, None, EMPTY_CELL)
            else:
                self.table.put(slot, element, element.display)

    def scroll(self, delta: int) -> bool:
        delta = int(delta)
        if self.window_size == 0:
            # The layout no longer shows the content character; keep the offset for when it returns.
            menu_debug_log("scroll_rejected", reason="no_region", offset=self.offset, delta=delta)
            return False
        proposed = self.offset + delta
        if proposed < 0:
            menu_debug_log("scroll_rejected", reason="below_start", offset=self.offset, delta=delta)
            return False
        remaining = len(self.content) - proposed
        if remaining <= 0:
            menu_debug_log("scroll_rejected", reason="past_end", offset=self.offset, delta=delta)
            return False
        # Moving forward is only allowed while the current page is full.
        if proposed > self.offset and self.window_size - remaining > delta:
            menu_debug_log("scroll_rejected", reason="last_page", offset=self.offset, delta=delta)
            return False
        self.offset = proposed
        menu_debug_log("scroll", offset=proposed, delta=delta, size=len(self.content))
        self.fill()
        return True

    def set_content(self, items: Iterable[Element | None]) -> None:
        self.content = list(items)
        self.fill()

    def refresh_element(self, element: Element) -> None:
        content = self.content
        for pos, slot in enumerate(self.slots):
            index = self.offset + pos
            if index < len(content) and content[index] is element:
                self.table.put(slot, element, element.display)
