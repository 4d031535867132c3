from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Callable

from .debug_log import menu_debug_log
from .elements import Element, ScrollControl
from .errors import (
    AlreadyBoundError,
    DuplicateIndicatorError,
    InvalidArgumentError,
    MenuBuildError,
    NotScrollableError,
)
from .layout import GridShape, Indicator, normalize_layout, validate_layout
from .surface import GridSurface, Surface
from .table import SlotTable
from .window import ScrollWindow

if TYPE_CHECKING:
    from .registry import MenuRegistry

DEFAULT_TITLE = "GUI"

SurfaceFactory = Callable[[int, str], Surface]


def grid_surface_factory(slot_count: int, title: str) -> Surface:
    return GridSurface(slot_count=slot_count, title=title)


def _require_scrollable(elements: Iterable[Element | None], *, scrollable: bool) -> None:
    if scrollable:
        return
    for element in elements:
        if isinstance(element, ScrollControl):
            raise NotScrollableError(f"{element!r} needs a menu with a content region")


class Menu:
    """
    One grid menu rendered into one surface.

    A menu whose layout carries the content indicator owns a `ScrollWindow`;
    `scroll`, `set_content` and scroll controls need one.
    """

    def __init__(
        self,
        *,
        layout: str,
        items: Mapping[str, Element],
        indicators: Mapping[Indicator, str],
        surface: Surface,
        title: str = DEFAULT_TITLE,
        content: Iterable[Element | None] | None = None,
    ) -> None:
        self.title = title
        self.surface = surface
        self.shape = GridShape.for_layout(layout)
        self.window: ScrollWindow | None = None
        scrollable = Indicator.CONTENT in indicators
        content = list(content) if content is not None else None
        if not scrollable:
            if content is not None:
                raise MenuBuildError("scroll content needs a character bound to the content indicator")
            _require_scrollable(items.values(), scrollable=False)
        # Nothing is bound until every check has passed, so a failed build leaves the elements reusable.
        self._check_bindable(items.values())
        self._check_bindable(content or [])

        self.table = SlotTable.compile(layout, items, indicators, surface)
        for element in items.values():
            element.bind(self)
        if scrollable:
            self.window = ScrollWindow(self.table)
            self.table.refill = self.window.fill
            self.set_content(content or [])

    def __repr__(self) -> str:
        return f"Menu(title={self.title!r}, shape={self.shape.name}, scrollable={self.scrollable})"

    @property
    def scrollable(self) -> bool:
        return self.window is not None

    @property
    def layout(self) -> str:
        return self.table.layout

    @property
    def offset(self) -> int:
        return self._require_window().offset

    @property
    def content(self) -> list[Element | None]:
        return self._require_window().content

    def element_at(self, slot: int) -> Element | None:
        return self.table.cache[slot]

    def _require_window(self) -> ScrollWindow:
        if self.window is None:
            raise NotScrollableError("menu has no content region")
        return self.window

    def _check_bindable(self, elements: Iterable[Element | None]) -> None:
        for element in elements:
            if element is None or not element.bound:
                continue
            if element.owner is not self:
                raise AlreadyBoundError(f"{element!r} is already bound to another menu")

    def set_element(self, ch: str, element: Element) -> None:
        if len(ch) != 1:
            raise InvalidArgumentError(f"layout keys are single characters, got {ch!r}")
        _require_scrollable([element], scrollable=self.scrollable)
        self._check_bindable([element])
        element.bind(self)
        self.table.set_element(ch, element)

    def set_layout(self, layout: str) -> None:
        self.table.set_layout(layout)

    def set_content(self, items: Iterable[Element | None]) -> None:
        window = self._require_window()
        items = list(items)
        self._check_bindable(items)
        for element in items:
            if element is not None:
                element.bind(self)
        window.set_content(items)

    def notify_changed(self, element: Element) -> None:
        self.table.notify_changed(element)
        if self.window is not None:
            self.window.refresh_element(element)

    def refresh(self) -> None:
        self.table.render_all()
        if self.window is not None:
            self.window.fill()

    def scroll(self, delta: int) -> bool:
        return self._require_window().scroll(delta)

    def dispatch(self, slot: int, event: Any) -> None:
        self.table.dispatch(slot, event)

    def open_to(self, *viewers: Any) -> None:
        open_fn = getattr(self.surface, "open_to", None)
        if not callable(open_fn):
            return
        for viewer in viewers:
            open_fn(viewer)


class MenuBuilder:
    def __init__(self) -> None:
        self._layout: str | None = None
        self._title = DEFAULT_TITLE
        self._items: dict[str, Element] = {}
        self._indicators: dict[Indicator, str] = {}
        self._registry: MenuRegistry | None = None
        self._content: list[Element | None] | None = None
        self._surface_factory: SurfaceFactory = grid_surface_factory

    def with_layout(self, layout: str) -> MenuBuilder:
        layout = normalize_layout(layout)
        validate_layout(layout)
        self._layout = layout
        return self

    def with_title(self, markup: str) -> MenuBuilder:
        self._title = str(markup)
        return self

    def bind(self, ch: str, element: Element) -> MenuBuilder:
        if len(ch) != 1:
            raise InvalidArgumentError(f"layout keys are single characters, got {ch!r}")
        self._items[ch] = element
        return self

    def bind_indicator(self, ch: str, indicator: Indicator) -> MenuBuilder:
        if len(ch) != 1:
            raise InvalidArgumentError(f"layout keys are single characters, got {ch!r}")
        if indicator in self._indicators:
            raise DuplicateIndicatorError(
                f"the {indicator.name} indicator is already bound to {self._indicators[indicator]!r}"
            )
        self._indicators[indicator] = ch
        return self

    def with_registry(self, registry: MenuRegistry) -> MenuBuilder:
        self._registry = registry
        return self

    def with_content(self, items: Iterable[Element | None]) -> MenuBuilder:
        self._content = list(items)
        return self

    def with_surface_factory(self, factory: SurfaceFactory) -> MenuBuilder:
        self._surface_factory = factory
        return self

    def build(self) -> Menu:
        if self._layout is None:
            raise MenuBuildError("menu layout is not set")
        if self._registry is None:
            raise MenuBuildError("menu registry is not set")
        surface = self._surface_factory(len(self._layout), self._title)
        menu = Menu(
            layout=self._layout,
            items=self._items,
            indicators=self._indicators,
            surface=surface,
            title=self._title,
            content=self._content,
        )
        self._registry.register(surface, menu)
        menu_debug_log(
            "menu_build",
            title=self._title,
            rows=menu.shape.rows,
            scrollable=menu.scrollable,
            items=len(self._items),
        )
        return menu
