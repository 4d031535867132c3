from __future__ import annotations


class MenuError(Exception):
    pass


class InvalidLayoutError(MenuError, ValueError):
    pass


class UnboundCharacterError(MenuError, ValueError):
    def __init__(self, chars: str) -> None:
        self.chars = chars
        listing = ", ".join(repr(ch) for ch in chars)
        super().__init__(f"layout characters without an item or indicator: {listing}")


class DuplicateIndicatorError(MenuError, ValueError):
    pass


class NotBoundError(MenuError, RuntimeError):
    pass


class AlreadyBoundError(MenuError, RuntimeError):
    pass


class InvalidArgumentError(MenuError, ValueError):
    pass


class NotScrollableError(MenuError, TypeError):
    pass


class MenuBuildError(MenuError, ValueError):
    pass


class MenuDefinitionError(MenuError, ValueError):
    pass
