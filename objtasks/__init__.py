"""Object utilities: a rectangle, JSON helpers and a CSS selector builder."""

from objtasks.exceptions import (
    DuplicateFragmentError,
    ObjTasksError,
    OrderError,
    SelectorError,
    SerializationError,
)
from objtasks.models.domain import Rectangle
from objtasks.selector.builder import Selector, css_selector_builder
from objtasks.serialization import from_json, get_json
from objtasks.types import Combinator, SelectorCategory

__version__ = "0.1.0"

__all__ = [
    "Combinator",
    "DuplicateFragmentError",
    "ObjTasksError",
    "OrderError",
    "Rectangle",
    "Selector",
    "SelectorCategory",
    "SelectorError",
    "SerializationError",
    "css_selector_builder",
    "from_json",
    "get_json",
]
