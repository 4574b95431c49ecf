"""Exception hierarchy for objtasks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objtasks.types import SelectorCategory

DUPLICATE_FRAGMENT_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class ObjTasksError(Exception):
    """Base exception for all objtasks errors."""


class SelectorError(ObjTasksError):
    """Raised when a selector fragment is rejected by the builder."""

    def __init__(self, message: str, category: SelectorCategory) -> None:
        super().__init__(message)
        self.category = category


class DuplicateFragmentError(SelectorError):
    """Raised when element, id or pseudo-element is added a second time."""

    def __init__(self, category: SelectorCategory) -> None:
        super().__init__(DUPLICATE_FRAGMENT_MESSAGE, category)


class OrderError(SelectorError):
    """Raised when a fragment is added after a later category is already set."""

    def __init__(self, category: SelectorCategory, conflicting: SelectorCategory) -> None:
        super().__init__(ORDER_MESSAGE, category)
        self.conflicting = conflicting


class SerializationError(ObjTasksError):
    """Raised when a JSON payload cannot be turned into the requested shape."""


class ConfigError(ObjTasksError):
    """Raised when configuration is invalid."""
