from __future__ import annotations

import pytest

from slotmenu.elements import Element, FixedElement, MutableElement, ScrollControl
from slotmenu.errors import (
    AlreadyBoundError,
    DuplicateIndicatorError,
    InvalidArgumentError,
    InvalidLayoutError,
    MenuBuildError,
    UnboundCharacterError,
)
from slotmenu.events import SlotClick
from slotmenu.layout import GridShape, Indicator
from slotmenu.menu import MenuBuilder
from slotmenu.registry import MenuRegistry
from slotmenu.surface import GridSurface


def test_build_registers_menu_under_its_surface() -> None:
    registry = MenuRegistry()

    menu = MenuBuilder().with_layout("#########").bind("#", FixedElement("A")).with_registry(registry).build()

    assert len(registry) == 1
    assert menu.surface in registry
    assert registry.get(menu.surface) is menu
    assert menu.surface.cells == ["A"] * 9
    assert menu.shape is GridShape.ROWS_1
    assert menu.title == "GUI"


def test_build_requires_layout_and_registry() -> None:
    with pytest.raises(MenuBuildError):
        MenuBuilder().bind("#", FixedElement("A")).with_registry(MenuRegistry()).build()
    with pytest.raises(MenuBuildError):
        MenuBuilder().with_layout("#########").bind("#", FixedElement("A")).build()


def test_with_layout_validates_immediately() -> None:
    with pytest.raises(InvalidLayoutError):
        MenuBuilder().with_layout("#####")


def test_build_rejects_unbound_character() -> None:
    builder = MenuBuilder().with_layout("#A#######").bind("#", FixedElement("x")).with_registry(MenuRegistry())

    with pytest.raises(UnboundCharacterError):
        builder.build()


def test_duplicate_indicator_keeps_first_binding() -> None:
    builder = MenuBuilder().bind_indicator("c", Indicator.CONTENT)

    with pytest.raises(DuplicateIndicatorError):
        builder.bind_indicator("d", Indicator.CONTENT)

    menu = builder.with_layout("cccccccc#").bind("#", FixedElement("x")).with_registry(MenuRegistry()).build()
    assert menu.window is not None
    assert menu.window.slots == list(range(8))


def test_bind_rejects_multi_character_keys() -> None:
    with pytest.raises(InvalidArgumentError):
        MenuBuilder().bind("ab", FixedElement("x"))


def test_content_without_region_is_a_build_error() -> None:
    builder = (
        MenuBuilder()
        .with_layout("#########")
        .bind("#", FixedElement("x"))
        .with_content([FixedElement("a")])
        .with_registry(MenuRegistry())
    )

    with pytest.raises(MenuBuildError):
        builder.build()


def test_multiline_layout_with_title_and_custom_surface() -> None:
    made: list[GridSurface] = []

    def _factory(slot_count: int, title: str) -> GridSurface:
        surface = GridSurface(slot_count=slot_count, title=title)
        made.append(surface)
        return surface

    menu = (
        MenuBuilder()
        .with_layout("#########\n#   X   #\n#########")
        .with_title("<gold>Shop")
        .bind("#", FixedElement("pane"))
        .bind(" ", FixedElement("air"))
        .bind("X", FixedElement("buy"))
        .with_surface_factory(_factory)
        .with_registry(MenuRegistry())
        .build()
    )

    assert made == [menu.surface]
    assert menu.surface.title == "<gold>Shop"
    assert menu.shape is GridShape.ROWS_3
    assert menu.surface.get_cell(13) == "buy"
    assert menu.surface.get_cell(10) == "air"


def test_menu_set_element_binds_and_renders() -> None:
    menu = MenuBuilder().with_layout("#X#######").bind("#", FixedElement("x")).bind(
        "X", FixedElement("old")
    ).with_registry(MenuRegistry()).build()
    button = MutableElement("new")

    menu.set_element("X", button)

    assert button.owner is menu
    assert menu.surface.get_cell(1) == "new"
    assert menu.element_at(1) is button


def test_refresh_restores_tampered_cells_only() -> None:
    menu = MenuBuilder().with_layout("#########").bind("#", FixedElement("x")).with_registry(MenuRegistry()).build()
    menu.surface.cells[3] = "junk"
    writes = menu.surface.writes

    menu.refresh()

    assert menu.surface.writes - writes == 1
    assert menu.surface.cells == ["x"] * 9


def test_handler_reentering_mutations() -> None:
    clicks = {"count": 0}
    counter = MutableElement("0")

    def _increment(event: SlotClick) -> None:
        event.cancelled = True
        clicks["count"] += 1
        counter.set_display(str(clicks["count"]))

    counter.set_handler(_increment)
    menu = MenuBuilder().with_layout("####C####").bind("#", FixedElement("x")).bind("C", counter).with_registry(
        MenuRegistry()
    ).build()

    menu.dispatch(4, SlotClick(slot=4))
    menu.dispatch(4, SlotClick(slot=4))

    assert menu.surface.get_cell(4) == "2"


def test_open_to_records_viewers() -> None:
    menu = MenuBuilder().with_layout("#########").bind("#", FixedElement("x")).with_registry(MenuRegistry()).build()

    menu.open_to("alex", "sam", "alex")

    assert menu.surface.viewers == ["alex", "sam"]


def _scroll_builder(pane: FixedElement, forward: ScrollControl, content: list[Element | None]) -> MenuBuilder:
    return (
        MenuBuilder()
        .with_layout("ccccccc>#")
        .bind_indicator("c", Indicator.CONTENT)
        .bind(">", forward)
        .bind("#", pane)
        .with_content(content)
        .with_registry(MenuRegistry())
    )


def test_failed_build_leaves_elements_reusable() -> None:
    owned = FixedElement("owned")
    other = _scroll_builder(FixedElement("x"), ScrollControl(1, ">"), [owned]).build()
    pane = FixedElement("pane")
    forward = ScrollControl(1, "next")

    with pytest.raises(AlreadyBoundError):
        _scroll_builder(pane, forward, [owned]).build()

    assert not pane.bound
    assert not forward.bound
    assert owned.owner is other

    menu = _scroll_builder(pane, forward, [FixedElement("ok")]).build()

    assert pane.owner is menu
    assert forward.owner is menu
    assert menu.surface.get_cell(0) == "ok"


def test_unbound_character_failure_binds_nothing() -> None:
    pane = FixedElement("pane")

    with pytest.raises(UnboundCharacterError):
        MenuBuilder().with_layout("#Q#######").bind("#", pane).with_registry(MenuRegistry()).build()

    assert not pane.bound
    menu = MenuBuilder().with_layout("#########").bind("#", pane).with_registry(MenuRegistry()).build()
    assert pane.owner is menu


def test_menu_repr_names_shape() -> None:
    menu = MenuBuilder().with_layout("#" * 18).bind("#", FixedElement("x")).with_registry(MenuRegistry()).build()

    assert repr(menu) == "Menu(title='GUI', shape=ROWS_2, scrollable=False)"
