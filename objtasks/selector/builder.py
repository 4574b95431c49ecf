r"""Immutable CSS selector builder.

A selector is made of up to six parts that must appear in a fixed order::

    element#id.class[attr]:pseudoClass::pseudoElement
              \----/\----/\----------/
              can occur several times

Every builder call returns a new :class:`Selector`; the receiver is never
altered, so a partial selector can be extended in several directions.
"""

from __future__ import annotations

import structlog
from pydantic import BaseModel, ConfigDict

from objtasks.exceptions import DuplicateFragmentError, OrderError
from objtasks.types import SelectorCategory

logger = structlog.get_logger(__name__)

_FIELDS: dict[SelectorCategory, str] = {
    SelectorCategory.ELEMENT: "element_value",
    SelectorCategory.ID: "id_value",
    SelectorCategory.CLASS: "class_value",
    SelectorCategory.ATTRIBUTE: "attribute_value",
    SelectorCategory.PSEUDO_CLASS: "pseudo_class_value",
    SelectorCategory.PSEUDO_ELEMENT: "pseudo_element_value",
}

# (prefix, suffix) wrapped around each fragment
_AFFIXES: dict[SelectorCategory, tuple[str, str]] = {
    SelectorCategory.ELEMENT: ("", ""),
    SelectorCategory.ID: ("#", ""),
    SelectorCategory.CLASS: (".", ""),
    SelectorCategory.ATTRIBUTE: ("[", "]"),
    SelectorCategory.PSEUDO_CLASS: (":", ""),
    SelectorCategory.PSEUDO_ELEMENT: ("::", ""),
}

SINGLE_USE: frozenset[SelectorCategory] = frozenset(
    {SelectorCategory.ELEMENT, SelectorCategory.ID, SelectorCategory.PSEUDO_ELEMENT}
)

# Categories that must not be set yet when the key category is added
MUST_PRECEDE: dict[SelectorCategory, tuple[SelectorCategory, ...]] = {
    SelectorCategory.ELEMENT: (SelectorCategory.ID,),
    SelectorCategory.ID: (SelectorCategory.CLASS, SelectorCategory.PSEUDO_ELEMENT),
    SelectorCategory.CLASS: (SelectorCategory.ATTRIBUTE,),
    SelectorCategory.ATTRIBUTE: (SelectorCategory.PSEUDO_CLASS,),
    SelectorCategory.PSEUDO_CLASS: (SelectorCategory.PSEUDO_ELEMENT,),
    SelectorCategory.PSEUDO_ELEMENT: (),
}


class Selector(BaseModel):
    """A CSS selector under construction.

    Category fields hold the accumulated, already prefixed fragments. Once
    ``precomputed_value`` is set by :meth:`combine` it is the only thing
    :meth:`stringify` returns.
    """

    model_config = ConfigDict(frozen=True)

    element_value: str | None = None
    id_value: str | None = None
    class_value: str | None = None
    attribute_value: str | None = None
    pseudo_class_value: str | None = None
    pseudo_element_value: str | None = None
    precomputed_value: str | None = None

    def element(self, value: str) -> Selector:
        return self._extend(SelectorCategory.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self._extend(SelectorCategory.ID, value)

    def class_(self, value: str) -> Selector:
        return self._extend(SelectorCategory.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self._extend(SelectorCategory.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self._extend(SelectorCategory.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self._extend(SelectorCategory.PSEUDO_ELEMENT, value)

    def apply(self, category: SelectorCategory, value: str) -> Selector:
        """Add a fragment of the given category."""
        return self._extend(SelectorCategory(category), value)

    def combine(self, selector1: Selector, combinator: str, selector2: Selector) -> Selector:
        """Join two selectors with a combinator (``" "``, ``"+"``, ``"~"``, ``">"``)."""
        value = f"{selector1.stringify()} {combinator} {selector2.stringify()}"
        logger.debug("selectors_combined", combinator=str(combinator), value=value)
        return self.model_copy(update={"precomputed_value": (self.precomputed_value or "") + value})

    def category_value(self, category: SelectorCategory) -> str | None:
        """Return the accumulated text for one category, or None when unset."""
        return getattr(self, _FIELDS[category]) or None

    def stringify(self) -> str:
        if self.precomputed_value:
            return self.precomputed_value
        return "".join(self.category_value(category) or "" for category in SelectorCategory)

    def __str__(self) -> str:
        return self.stringify()

    def _extend(self, category: SelectorCategory, value: str) -> Selector:
        """Check cardinality and ordering, then return a copy with the fragment appended."""
        if category in SINGLE_USE and self.category_value(category):
            logger.debug("selector_fragment_rejected", category=str(category), reason="duplicate")
            raise DuplicateFragmentError(category)

        for later in MUST_PRECEDE[category]:
            if self.category_value(later):
                logger.debug(
                    "selector_fragment_rejected",
                    category=str(category),
                    reason="order",
                    conflicting=str(later),
                )
                raise OrderError(category, later)

        prefix, suffix = _AFFIXES[category]
        field = _FIELDS[category]
        current = getattr(self, field) or ""
        return self.model_copy(update={field: f"{current}{prefix}{value}{suffix}"})


# Shared, empty entry point for building selectors
css_selector_builder = Selector()
