"""Utility helpers shared by the generation request loader."""

from __future__ import annotations

import re
import typing as typ
import unicodedata

from .._constants import DEFAULT_ATTR_EDITABLE
from .models import ClassesMode

NON_ALPHANUMERIC_RUN = re.compile(r"[^a-zA-Z0-9]+")


def slugify(text: object) -> str:
    """Return a lower-case, hyphen-separated slug for ``text``.

    Accents are decomposed and dropped and ``&`` becomes ``and``.

    Examples
    --------
    >>> slugify("Hero Basic!")
    'hero-basic'
    >>> slugify("Café & Co")
    'cafe-and-co'
    """
    decomposed = unicodedata.normalize("NFKD", str(text or ""))
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    spelled = stripped.replace("&", " and ")
    return NON_ALPHANUMERIC_RUN.sub("-", spelled).strip("-").lower()


def _optional_str(value: object | None) -> str | None:
    """Return ``value`` as a string, or None when it is missing or empty."""
    if value is None or value == "":
        return None
    return str(value)


def _normalize_tags(value: object) -> list[str]:
    """Return the tag list, or an empty list when ``value`` is not a list."""
    if not isinstance(value, list):
        return []
    return [str(tag) for tag in value]


def _normalize_classes_mode(value: object) -> ClassesMode:
    """Map a ``classesMode`` option onto :class:`ClassesMode`.

    Unknown values behave like ``single``; only ``fixed`` changes behaviour.
    """
    try:
        return ClassesMode(str(value))
    except ValueError:
        return ClassesMode.SINGLE


def _normalize_attr_editable(value: object) -> frozenset[str]:
    """Return the editable attribute names, falling back to the defaults.

    An explicit empty list disables attribute templating altogether.
    """
    if not isinstance(value, list | tuple):
        return frozenset(DEFAULT_ATTR_EDITABLE)
    return frozenset(str(name) for name in typ.cast("list[object]", value))


__all__ = [
    "_normalize_attr_editable",
    "_normalize_classes_mode",
    "_normalize_tags",
    "_optional_str",
    "slugify",
]
