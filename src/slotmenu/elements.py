from __future__ import annotations

import weakref
from typing import Any, Protocol, final

from .errors import AlreadyBoundError, InvalidArgumentError, NotBoundError
from .events import ClickHandler, cancel_event


class ElementOwner(Protocol):
    @property
    def scrollable(self) -> bool: ...

    def notify_changed(self, element: Element) -> None: ...

    def scroll(self, delta: int) -> bool: ...


class Element:
    """
    Display value + click behaviour bound to one or more slots of a menu.

    The variant set is closed: `FixedElement`, `MutableElement` and
    `ScrollControl`. Identity is object identity; two elements with equal
    displays are still distinct.
    """

    __slots__ = ("_owner", "__weakref__")

    def __init__(self) -> None:
        self._owner: weakref.ReferenceType[Any] | None = None

    @property
    def display(self) -> Any:
        raise NotImplementedError

    def on_click(self, event: Any) -> None:
        raise NotImplementedError

    @property
    def owner(self) -> ElementOwner | None:
        if self._owner is None:
            return None
        return self._owner()

    @property
    def bound(self) -> bool:
        return self.owner is not None

    def bind(self, owner: ElementOwner) -> None:
        # Set once per live menu. The same menu may bind a shared element any number of times.
        current = self.owner
        if current is not None:
            if current is owner:
                return
            raise AlreadyBoundError(f"{self!r} is already bound to another menu")
        self._owner = weakref.ref(owner)

    def require_owner(self) -> ElementOwner:
        owner = self.owner
        if owner is None:
            raise NotBoundError(f"{self!r} is not bound to a menu")
        return owner


@final
class FixedElement(Element):
    __slots__ = ("_display",)

    def __init__(self, display: Any) -> None:
        super().__init__()
        self._display = display

    @property
    def display(self) -> Any:
        return self._display

    def on_click(self, event: Any) -> None:
        cancel_event(event)

    def __repr__(self) -> str:
        return f"FixedElement({self._display!r})"


@final
class MutableElement(Element):
    __slots__ = ("_display", "handler")

    def __init__(self, display: Any, handler: ClickHandler | None = None) -> None:
        super().__init__()
        self._display = display
        self.handler: ClickHandler = handler if handler is not None else cancel_event

    @property
    def display(self) -> Any:
        return self._display

    def set_display(self, display: Any) -> None:
        owner = self.require_owner()
        self._display = display
        owner.notify_changed(self)

    def set_handler(self, handler: ClickHandler) -> None:
        self.handler = handler

    def on_click(self, event: Any) -> None:
        self.handler(event)

    def __repr__(self) -> str:
        return f"MutableElement({self._display!r})"


@final
class ScrollControl(Element):
    """Scrolls the owning menu's content window by `step` when clicked."""

    __slots__ = ("_display", "step")

    def __init__(self, step: int, display: Any) -> None:
        super().__init__()
        if int(step) == 0:
            raise InvalidArgumentError("scroll step cannot be zero")
        self.step = int(step)
        self._display = display

    @property
    def display(self) -> Any:
        return self._display

    def on_click(self, event: Any) -> None:
        cancel_event(event)
        # Scrollability is checked when the control is bound.
        self.require_owner().scroll(self.step)

    def __repr__(self) -> str:
        return f"ScrollControl({self.step}, {self._display!r})"
