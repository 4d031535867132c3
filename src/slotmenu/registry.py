from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .debug_log import menu_debug_log

if TYPE_CHECKING:
    from .menu import Menu


@dataclass(slots=True)
class MenuRegistry:
    """Routes host click events to the menu rendered into the clicked container."""

    menus: dict[Any, Menu] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.menus)

    def __contains__(self, container: object) -> bool:
        return container in self.menus

    def register(self, container: Any, menu: Menu) -> None:
        self.menus[container] = menu

    def unregister(self, menu: Menu) -> bool:
        container = menu.surface
        if self.menus.get(container) is not menu:
            return False
        del self.menus[container]
        menu_debug_log("menu_unregister", title=menu.title)
        return True

    def get(self, container: Any) -> Menu | None:
        return self.menus.get(container)

    def handle_click(self, container: Any, slot: int, event: Any) -> None:
        menu = self.menus.get(container)
        if menu is None:
            # Containers we do not own (player inventories, closed menus) are not an error.
            menu_debug_log("click_unknown_container", slot=slot)
            return
        menu.dispatch(slot, event)
