from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from .debug_log import menu_debug_log
from .elements import Element
from .errors import InvalidLayoutError, UnboundCharacterError
from .layout import Indicator, normalize_layout, parse_layout
from .surface import EMPTY_CELL, Surface


def _unbound_chars(
    slot_map: Mapping[str, list[int]],
    bindings: Mapping[str, Element],
    indicators: Mapping[Indicator, str],
) -> str:
    indicator_chars = set(indicators.values())
    return "".join(ch for ch in slot_map if ch not in bindings and ch not in indicator_chars)


@dataclass(slots=True)
class SlotTable:
    """
    Live slot assignment for one menu.

    `cache[slot]` is the element a click on `slot` dispatches to. Every
    render path goes through `put`, which keeps the cache in step with the
    surface and skips writes of unchanged content.
    """

    surface: Surface
    layout: str
    bindings: dict[str, Element]
    indicators: dict[Indicator, str]
    slot_map: dict[str, list[int]]
    cache: list[Element | None]
    refill: Callable[[], None] | None = None

    @classmethod
    def compile(
        cls,
        layout: str,
        bindings: Mapping[str, Element],
        indicators: Mapping[Indicator, str],
        surface: Surface,
    ) -> SlotTable:
        layout = normalize_layout(layout)
        slot_map = parse_layout(layout)
        missing = _unbound_chars(slot_map, bindings, indicators)
        if missing:
            raise UnboundCharacterError(missing)
        if int(surface.size) != len(layout):
            raise InvalidLayoutError(f"layout has {len(layout)} slots but the surface has {surface.size}")
        table = cls(
            surface=surface,
            layout=layout,
            bindings=dict(bindings),
            indicators=dict(indicators),
            slot_map=slot_map,
            cache=[None] * len(layout),
        )
        table.render_all()
        return table

    @property
    def size(self) -> int:
        return len(self.cache)

    def indicator_chars(self) -> set[str]:
        return set(self.indicators.values())

    def region_slots(self, indicator: Indicator = Indicator.CONTENT) -> list[int]:
        ch = self.indicators.get(indicator)
        if ch is None:
            return []
        return self.slot_map.get(ch, [])

    def put(self, slot: int, element: Element | None, content: Any) -> None:
        self.cache[slot] = element
        if self.surface.get_cell(slot) == content:
            return
        self.surface.set_cell(slot, content)

    def render_char(self, ch: str) -> None:
        slots = self.slot_map.get(ch)
        if slots is None or ch in self.indicator_chars():
            return
        element = self.bindings[ch]
        for slot in slots:
            self.put(slot, element, element.display)

    def render_all(self) -> None:
        for ch in self.slot_map:
            self.render_char(ch)

    def set_element(self, ch: str, element: Element) -> None:
        self.bindings[ch] = element
        self.render_char(ch)

    def set_layout(self, layout: str) -> None:
        layout = normalize_layout(layout)
        slot_map = parse_layout(layout)
        if len(layout) != self.size:
            raise InvalidLayoutError(f"layout has {len(layout)} slots but the menu has {self.size}")
        missing = _unbound_chars(slot_map, self.bindings, self.indicators)
        if missing:
            raise UnboundCharacterError(missing)

        self.layout = layout
        self.slot_map = slot_map
        region = [slot for ch in self.indicator_chars() for slot in slot_map.get(ch, [])]
        for slot in region:
            self.cache[slot] = None
        self.render_all()
        menu_debug_log("layout_set", layout=layout, region_slots=len(region))
        if self.refill is not None:
            self.refill()
            return
        for slot in region:
            self.put(slot, None, EMPTY_CELL)

    def notify_changed(self, element: Element) -> None:
        for ch, bound in self.bindings.items():
            if bound is element:
                self.render_char(ch)

    def dispatch(self, slot: int, event: Any) -> None:
        if not 0 <= int(slot) < self.size:
            # Hosts forward clicks outside the menu grid (e.g. the viewer's own inventory).
            menu_debug_log("click_out_of_range", slot=slot, size=self.size)
            return
        element = self.cache[int(slot)]
        if element is None:
            return
        element.on_click(event)
