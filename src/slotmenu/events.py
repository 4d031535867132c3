from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol


class Cancellable(Protocol):
    cancelled: bool


@dataclass(slots=True)
class SlotClick:
    """Click on one slot of a menu container, as delivered by the host."""

    slot: int
    viewer: str = ""
    button: str = "left"
    cancelled: bool = False


ClickHandler = Callable[[Any], None]


def cancel_event(event: Any) -> None:
    event.cancelled = True
