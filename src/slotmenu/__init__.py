from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("slotmenu")
except PackageNotFoundError:  # pragma: no cover
    # Allow running from source (e.g. `PYTHONPATH=src`) without installed package metadata.
    __version__ = "0.0.0+dev"

from .elements import Element, FixedElement, MutableElement, ScrollControl
from .errors import (
    AlreadyBoundError,
    DuplicateIndicatorError,
    InvalidArgumentError,
    InvalidLayoutError,
    MenuBuildError,
    MenuDefinitionError,
    MenuError,
    NotBoundError,
    NotScrollableError,
    UnboundCharacterError,
)
from .events import SlotClick
from .layout import GridShape, Indicator, parse_layout
from .menu import Menu, MenuBuilder
from .registry import MenuRegistry
from .surface import EMPTY_CELL, GridSurface, Surface

__all__ = [
    "EMPTY_CELL",
    "AlreadyBoundError",
    "DuplicateIndicatorError",
    "Element",
    "FixedElement",
    "GridShape",
    "GridSurface",
    "Indicator",
    "InvalidArgumentError",
    "InvalidLayoutError",
    "Menu",
    "MenuBuildError",
    "MenuBuilder",
    "MenuDefinitionError",
    "MenuError",
    "MenuRegistry",
    "MutableElement",
    "NotBoundError",
    "NotScrollableError",
    "ScrollControl",
    "SlotClick",
    "Surface",
    "UnboundCharacterError",
    "parse_layout",
]
