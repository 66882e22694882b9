r"""Parse Bootstrap component markup into a lightweight node tree.

This module powers the template generator by turning an HTML fragment into an
ordered tree of :class:`Root`, :class:`Element`, and :class:`Text` nodes. The
parser is deliberately permissive: it never raises on odd markup and instead
applies a best-effort recovery rule for each malformed case.

Recovery rules
--------------
- A closing tag with no matching open element is ignored.
- A closing tag that matches an outer element closes every element opened
  after it.
- An unterminated tag (``<`` without a later ``>``) truncates parsing.
- An unterminated comment is skipped up to the first ``>``.

Example
-------
>>> from bootstrap_hbs.html_parser import parse_html
>>> root = parse_html('<p class="lead">Hello<br>world</p>')
>>> paragraph = root.children[0]
>>> paragraph.name, paragraph.attrs
('p', {'class': 'lead'})
>>> [type(child).__name__ for child in paragraph.children]
['Text', 'Element', 'Text']
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from ._constants import VOID_ELEMENTS

ATTRIBUTE_PATTERN = re.compile(
    r"""([:@A-Za-z0-9_-]+)(?:\s*=\s*("([^"]*)"|'([^']*)'|([^\s"'`=<>]+)))?"""
)
WHITESPACE_PATTERN = re.compile(r"\s+")

AttributeValue = str | bool


@dc.dataclass(slots=True)
class Text:
    """Literal character data, kept exactly as it appeared in the source."""

    content: str


@dc.dataclass(slots=True)
class Element:
    """An HTML element with its attributes and child nodes.

    Attributes
    ----------
    name : str
        Lower-cased tag name.
    attrs : dict[str, str | bool]
        Attribute values keyed by name; valueless attributes map to ``True``.
    children : list[Element | Text]
        Child nodes in document order. Always empty for void elements.
    """

    name: str
    attrs: dict[str, AttributeValue] = dc.field(default_factory=dict)
    children: list[Element | Text] = dc.field(default_factory=list)

    @property
    def is_void(self) -> bool:
        """Return ``True`` when the element can never hold children."""
        return self.name in VOID_ELEMENTS

    @property
    def class_list(self) -> list[str]:
        """Return the non-empty tokens of the ``class`` attribute."""
        value = self.attrs.get("class")
        if not isinstance(value, str):
            return []
        return [token for token in WHITESPACE_PATTERN.split(value) if token]


@dc.dataclass(slots=True)
class Root:
    """Top-level container returned by :func:`parse_html`."""

    children: list[Element | Text] = dc.field(default_factory=list)


Node = Root | Element | Text


def parse_attributes(source: str) -> dict[str, AttributeValue]:
    """Parse the attribute portion of a start tag.

    Parameters
    ----------
    source : str
        Raw text following the tag name, for example
        ``'class="btn btn-primary" href=/start disabled'``.

    Returns
    -------
    dict[str, str | bool]
        Attribute values keyed by name. Double-quoted, single-quoted, and
        unquoted values are supported; a name without ``=`` maps to ``True``.
        When a name repeats, the last occurrence wins.

    Examples
    --------
    >>> parse_attributes("href='/docs' hidden data-x=1")
    {'href': '/docs', 'hidden': True, 'data-x': '1'}
    """
    attrs: dict[str, AttributeValue] = {}
    for match in ATTRIBUTE_PATTERN.finditer(source):
        name, _, double_quoted, single_quoted, unquoted = match.groups()
        value = next(
            (
                candidate
                for candidate in (double_quoted, single_quoted, unquoted)
                if candidate is not None
            ),
            None,
        )
        attrs[name] = True if value is None else value
    return attrs


class _TreeBuilder:
    """Stack-based state machine that assembles nodes while scanning markup."""

    def __init__(self, markup: str) -> None:
        self.markup = markup
        self.root = Root()
        self._stack: list[Element] = []
        self._pos = 0

    @property
    def _current_children(self) -> list[Element | Text]:
        if self._stack:
            return self._stack[-1].children
        return self.root.children

    def build(self) -> Root:
        markup = self.markup
        while self._pos < len(markup):
            lt = markup.find("<", self._pos)
            if lt == -1:
                self._append_text(markup[self._pos :])
                break
            if lt > self._pos:
                self._append_text(markup[self._pos : lt])
                self._pos = lt
            gt = markup.find(">", lt + 1)
            if gt == -1:
                # Unterminated tag: drop the remainder.
                break
            tag_source = markup[lt + 1 : gt].strip()
            if tag_source.startswith("!--"):
                self._skip_comment(lt, gt)
            elif tag_source.startswith("/"):
                self._close(tag_source[1:].strip().lower())
                self._pos = gt + 1
            else:
                self._open(tag_source)
                self._pos = gt + 1
        return self.root

    def _append_text(self, text: str) -> None:
        if text:
            self._current_children.append(Text(text))

    def _skip_comment(self, lt: int, gt: int) -> None:
        end = self.markup.find("-->", lt + 4)
        self._pos = gt + 1 if end == -1 else end + 3

    def _close(self, name: str) -> None:
        for depth in range(len(self._stack) - 1, -1, -1):
            if self._stack[depth].name == name:
                del self._stack[depth:]
                return

    def _open(self, tag_source: str) -> None:
        first_token = tag_source.split(maxsplit=1)[0] if tag_source else ""
        name = first_token.removesuffix("/").lower()
        self_closing = tag_source.endswith("/")
        attr_source = tag_source[len(name) :].strip().removesuffix("/")
        element = Element(name=name, attrs=parse_attributes(attr_source))
        self._current_children.append(element)
        if not self_closing and not element.is_void:
            self._stack.append(element)


def parse_html(markup: str) -> Root:
    """Build a node tree from an HTML fragment.

    Parameters
    ----------
    markup : str
        HTML source; need not be well formed.

    Returns
    -------
    Root
        Tree of elements and text nodes in document order. Comments are
        discarded. Parsing never raises; malformed input yields a partial
        tree according to the module-level recovery rules.
    """
    return _TreeBuilder(markup).build()


def iter_elements(node: Node) -> typ.Iterator[Element]:
    """Yield every element below ``node`` in depth-first document order."""
    match node:
        case Root(children=children) | Element(children=children):
            for child in children:
                if isinstance(child, Element):
                    yield child
                yield from iter_elements(child)
        case Text():
            return


__all__ = [
    "Element",
    "Node",
    "Root",
    "Text",
    "iter_elements",
    "parse_attributes",
    "parse_html",
]
