"""Typed dataclasses describing a component generation request."""

from __future__ import annotations

import dataclasses as dc
import enum

from .._constants import (
    DEFAULT_ATTR_EDITABLE,
    DEFAULT_CATEGORY,
    DEFAULT_COMPONENT_NAME,
)


class RequestError(ValueError):
    """Raised when a generation request is missing or cannot be decoded."""


class ClassesMode(enum.StrEnum):
    """How ``class`` attributes are exposed as editable fields."""

    SINGLE = "single"
    MULTIPLE = "multiple"
    FIXED = "fixed"


@dc.dataclass(frozen=True, slots=True)
class GenerationOptions:
    """Switches controlling which parts of the markup become placeholders.

    Attributes
    ----------
    classes_mode : ClassesMode
        ``FIXED`` keeps every class list literal; the other modes template
        them.
    text_editable : bool
        Whether non-blank text content becomes placeholders.
    attr_editable : frozenset[str]
        Attribute names (other than ``class``) eligible for templating.
    """

    classes_mode: ClassesMode = ClassesMode.SINGLE
    text_editable: bool = True
    attr_editable: frozenset[str] = frozenset(DEFAULT_ATTR_EDITABLE)


@dc.dataclass(frozen=True, slots=True)
class GenerationRequest:
    """One source fragment plus the metadata describing the component.

    ``component_name`` and ``category`` stay ``None`` when the request omits
    them so the metadata document can leave them out; the library layout falls
    back to ``component`` and ``components`` respectively.
    """

    component_name: str | None
    source_html: str
    category: str | None = None
    tags: list[str] = dc.field(default_factory=list)
    options: GenerationOptions = dc.field(default_factory=GenerationOptions)
    description: str | None = None

    @property
    def category_segments(self) -> list[str]:
        """Return the non-empty path segments of ``category``."""
        category = self.category or DEFAULT_CATEGORY
        return [segment for segment in category.split("/") if segment]

    @property
    def slug_source(self) -> str:
        """Return the text the component slug is derived from."""
        return self.component_name or DEFAULT_COMPONENT_NAME


__all__ = [
    "ClassesMode",
    "GenerationOptions",
    "GenerationRequest",
    "RequestError",
]
