from __future__ import annotations

from pathlib import Path
from typing import TypeAlias

import msgspec
import msgspec.json
import msgspec.toml

from .elements import Element, FixedElement, MutableElement, ScrollControl
from .errors import MenuDefinitionError
from .events import cancel_event
from .layout import Indicator
from .menu import DEFAULT_TITLE, Menu, MenuBuilder, SurfaceFactory
from .registry import MenuRegistry


class FixedItem(msgspec.Struct, tag_field="kind", tag="fixed", forbid_unknown_fields=True):
    display: str = ""


class ToggleItem(msgspec.Struct, tag_field="kind", tag="toggle", forbid_unknown_fields=True):
    display: str = ""
    alt_display: str = ""


class ScrollItem(msgspec.Struct, tag_field="kind", tag="scroll", forbid_unknown_fields=True):
    display: str = ""
    step: int = 1


ItemDefinition: TypeAlias = FixedItem | ToggleItem | ScrollItem


class MenuDefinition(msgspec.Struct, forbid_unknown_fields=True):
    layout: str
    title: str = DEFAULT_TITLE
    items: dict[str, ItemDefinition] = msgspec.field(default_factory=dict)
    content_char: str | None = None
    # "" and null both mean an empty entry (TOML has no null).
    content: list[str | None] | None = None


def decode_definition(data: bytes | str, *, fmt: str) -> MenuDefinition:
    try:
        if fmt == "toml":
            return msgspec.toml.decode(data, type=MenuDefinition)
        if fmt == "json":
            return msgspec.json.decode(data, type=MenuDefinition)
    except (msgspec.DecodeError, msgspec.ValidationError) as exc:
        raise MenuDefinitionError(f"invalid menu definition: {exc}") from exc
    raise MenuDefinitionError(f"unknown menu definition format: {fmt!r}")


def load_definition(path: Path) -> MenuDefinition:
    suffix = path.suffix.lower().lstrip(".")
    if suffix not in ("toml", "json"):
        raise MenuDefinitionError(f"{path}: expected a .toml or .json file")
    try:
        return decode_definition(path.read_bytes(), fmt=suffix)
    except MenuDefinitionError as exc:
        raise MenuDefinitionError(f"{path}: {exc}") from exc


def _toggle_element(item: ToggleItem) -> MutableElement:
    element = MutableElement(item.display)

    def _toggle(event: object) -> None:
        cancel_event(event)
        showing_primary = element.display == item.display
        element.set_display(item.alt_display if showing_primary else item.display)

    element.set_handler(_toggle)
    return element


def element_from_item(item: ItemDefinition) -> Element:
    if isinstance(item, ScrollItem):
        return ScrollControl(item.step, item.display)
    if isinstance(item, ToggleItem):
        return _toggle_element(item)
    return FixedElement(item.display)


def content_from_definition(definition: MenuDefinition) -> list[Element | None]:
    return [FixedElement(entry) if entry else None for entry in definition.content or ()]


def build_from_definition(
    definition: MenuDefinition,
    registry: MenuRegistry,
    *,
    surface_factory: SurfaceFactory | None = None,
) -> Menu:
    builder = MenuBuilder().with_layout(definition.layout).with_title(definition.title).with_registry(registry)
    for ch, item in definition.items.items():
        builder.bind(ch, element_from_item(item))
    if definition.content_char is not None:
        builder.bind_indicator(definition.content_char, Indicator.CONTENT)
    if definition.content is not None:
        builder.with_content(content_from_definition(definition))
    if surface_factory is not None:
        builder.with_surface_factory(surface_factory)
    return builder.build()
