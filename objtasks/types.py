"""Enums and type aliases for objtasks."""

from enum import StrEnum


class SelectorCategory(StrEnum):
    """Selector part kinds, in the order they must appear in a selector."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"


class Combinator(StrEnum):
    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"
