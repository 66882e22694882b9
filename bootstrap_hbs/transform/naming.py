"""Placeholder naming rules for Bootstrap component markup.

The rules favour stable, human-meaningful keys (``title``, ``btn_label``,
``section_classes``) over positional ones. Several rules claim a key only for
the first matching element of a document, so results depend on traversal
order and every run must own a fresh :class:`TransformState`.

Example
-------
>>> from bootstrap_hbs.html_parser import Element
>>> from bootstrap_hbs.request import GenerationOptions
>>> naming = NamingHeuristics(GenerationOptions())
>>> naming.text_key(Element("h1"))
'title'
>>> naming.text_key(Element("h2"))
'heading_h2'
>>> naming.text_key(Element("p"))
'subtitle'
"""

from __future__ import annotations

import re
import typing as typ

from .._constants import URL_ATTRIBUTES
from ..request.models import ClassesMode
from .models import TransformState

if typ.TYPE_CHECKING:
    from ..html_parser import Element
    from ..request.models import GenerationOptions
    from .models import FieldType

HEADING_PATTERN = re.compile(r"^h[1-6]$")
IMAGE_ATTRIBUTE_KEYS: dict[str, str] = {
    "src": "img_src",
    "alt": "img_alt",
    "title": "img_title",
}


def _numbered(base: str, index: int) -> str:
    """Return ``base`` for the first occurrence and ``base_<n>`` afterwards."""
    return base if index == 1 else f"{base}_{index}"


def is_button(element: Element) -> bool:
    """Return ``True`` for anchors styled as Bootstrap buttons."""
    if element.name != "a":
        return False
    return any(
        token == "btn" or token.startswith("btn-") for token in element.class_list
    )


def attribute_field_type(attr: str) -> FieldType:
    """Return ``url`` for link-like attributes and ``text`` otherwise."""
    return "url" if attr in URL_ATTRIBUTES else "text"


class NamingHeuristics:
    """Derive placeholder keys for text, class lists, and attributes."""

    def __init__(
        self, options: GenerationOptions, state: TransformState | None = None
    ) -> None:
        """Bind the rules to run options and a run-scoped state.

        Parameters
        ----------
        options : GenerationOptions
            Options of the current generation run; only ``classes_mode`` is
            consulted here.
        state : TransformState, optional
            Counters and claim flags for this run. A new state is created when
            omitted; never pass a state that has served another document.
        """
        self.options = options
        self.state = state if state is not None else TransformState()

    def class_key(self, element: Element) -> str | None:
        """Return the placeholder key for ``element``'s class list.

        Returns ``None`` when classes are fixed and must stay literal.
        """
        if self.options.classes_mode is ClassesMode.FIXED:
            return None
        state = self.state
        if not state.section_handled and element.name == "section":
            state.section_handled = True
            return "section_classes"
        if (
            not state.container_handled
            and element.name == "div"
            and "container" in element.class_list
        ):
            state.container_handled = True
            return "container_classes"
        if is_button(element):
            # Numbered from the label counter, which this branch never
            # advances.
            if state.btn_count:
                return f"btn_classes_{state.btn_count + 1}"
            return "btn_classes"
        state.class_slots += 1
        return _numbered(f"{element.name}_classes", state.class_slots)

    def text_key(self, element: Element) -> str:
        """Return the placeholder key for text content directly inside ``element``."""
        state = self.state
        if is_button(element):
            state.btn_count += 1
            return _numbered("btn_label", state.btn_count)
        if HEADING_PATTERN.match(element.name):
            if not state.title_done:
                state.title_done = True
                return "title"
            return f"heading_{element.name}"
        if element.name == "p" and state.title_done and not state.subtitle_done:
            state.subtitle_done = True
            return "subtitle"
        state.text_count += 1
        return _numbered("text", state.text_count)

    def attr_key(self, element: Element, attr: str) -> str:
        """Return the placeholder key for an editable attribute of ``element``."""
        if element.name == "a" and attr == "href":
            self.state.link_count += 1
            prefix = "btn_url" if is_button(element) else "link_url"
            return _numbered(prefix, self.state.link_count)
        if element.name == "img" and attr in IMAGE_ATTRIBUTE_KEYS:
            return IMAGE_ATTRIBUTE_KEYS[attr]
        return f"{element.name}_{attr}"


__all__ = [
    "HEADING_PATTERN",
    "NamingHeuristics",
    "attribute_field_type",
    "is_button",
]
