"""Rewrite a parsed component tree into a Handlebars template.

The engine walks the tree produced by :func:`bootstrap_hbs.html_parser.parse_html`
depth-first, asks :class:`~bootstrap_hbs.transform.naming.NamingHeuristics`
for a key wherever content is editable, and replaces that content with a
``{{key}}`` placeholder. Every placeholder is recorded once as a
:class:`~bootstrap_hbs.transform.models.FieldDescriptor`; when two regions
resolve to the same key the first one keeps the field and later ones reuse the
placeholder without registering a second descriptor.

Example
-------
>>> from bootstrap_hbs.html_parser import parse_html
>>> result = transform_to_hbs(parse_html("<section><h1>A</h1><p>B</p></section>"))
>>> result.template
'<section><h1>{{title}}</h1><p>{{subtitle}}</p></section>'
>>> [(field.key, field.default) for field in result.fields]
[('title', 'A'), ('subtitle', 'B')]
"""

from __future__ import annotations

import logging
import re
import typing as typ

from .._constants import CLASSES_LABEL_TEMPLATE, TEXT_LABEL
from ..html_parser import Element, Root, Text
from ..request.models import GenerationOptions
from .models import FieldDescriptor, FieldRegistry, TransformResult, TransformState
from .naming import NamingHeuristics, attribute_field_type

if typ.TYPE_CHECKING:
    from ..html_parser import AttributeValue, Node
    from .models import FieldType

logger = logging.getLogger(__name__)

WHITESPACE_RUN = re.compile(r"\s+")


def escape_attribute(value: str) -> str:
    """Escape ``&`` and ``"`` for use inside a double-quoted attribute."""
    return value.replace("&", "&amp;").replace('"', "&quot;")


def _placeholder(key: str) -> str:
    return f"{{{{{key}}}}}"


class HbsTransformer:
    """Render a node tree as a template while collecting field descriptors."""

    def __init__(self, options: GenerationOptions | None = None) -> None:
        self.options = options or GenerationOptions()

    def transform(self, root: Root) -> TransformResult:
        """Return the template and fields for ``root``.

        Each call starts from a fresh :class:`TransformState`, so one
        transformer can safely serve several documents in sequence.
        """
        run = _TransformRun(self.options)
        template = run.render(root)
        fields = run.registry.to_list()
        logger.debug("Transformed fragment into %d fields", len(fields))
        return TransformResult(template=template, fields=fields)


class _TransformRun:
    """Traversal context for a single document."""

    def __init__(self, options: GenerationOptions) -> None:
        self.options = options
        self.naming = NamingHeuristics(options, TransformState())
        self.registry = FieldRegistry()

    def render(self, node: Node, parent: Element | None = None) -> str:
        match node:
            case Root(children=children):
                return "".join(self.render(child) for child in children)
            case Element():
                return self._render_element(node)
            case Text(content=content):
                return self._render_text(content, parent)
            case _:
                typ.assert_never(node)

    def _register(
        self, key: str, field_type: FieldType, label: str, default: str
    ) -> None:
        descriptor = FieldDescriptor(
            key=key, type=field_type, label=label, default=default
        )
        if not self.registry.add(descriptor):
            logger.debug("Field key %r already registered; keeping the first", key)

    def _render_element(self, element: Element) -> str:
        parts = [f"<{element.name}"]
        if "class" in element.attrs:
            parts.append(self._render_class(element, element.attrs["class"]))
        for name, value in element.attrs.items():
            if name == "class":
                continue
            parts.append(self._render_attribute(element, name, value))
        if element.is_void:
            parts.append(" />")
            return "".join(parts)
        parts.append(">")
        parts.extend(self.render(child, element) for child in element.children)
        parts.append(f"</{element.name}>")
        return "".join(parts)

    def _render_class(self, element: Element, value: AttributeValue) -> str:
        if isinstance(value, str) and value:
            key = self.naming.class_key(element)
            if key is not None:
                label = CLASSES_LABEL_TEMPLATE.format(tag=element.name)
                self._register(key, "classes", label, value)
                return f' class="{_placeholder(key)}"'
        return _literal_attribute("class", value)

    def _render_attribute(
        self, element: Element, name: str, value: AttributeValue
    ) -> str:
        if name in self.options.attr_editable:
            key = self.naming.attr_key(element, name)
            default = value if isinstance(value, str) else ""
            self._register(key, attribute_field_type(name), name.upper(), default)
            return f' {name}="{_placeholder(key)}"'
        return _literal_attribute(name, value)

    def _render_text(self, content: str, parent: Element | None) -> str:
        collapsed = WHITESPACE_RUN.sub(" ", content)
        if not self.options.text_editable or not collapsed.strip():
            return collapsed
        if parent is None:
            return collapsed
        key = self.naming.text_key(parent)
        self._register(key, "text", TEXT_LABEL, collapsed.strip())
        return _placeholder(key)


def _literal_attribute(name: str, value: AttributeValue) -> str:
    if value is True:
        return f" {name}"
    return f' {name}="{escape_attribute(str(value))}"'


def transform_to_hbs(
    root: Root, options: GenerationOptions | None = None
) -> TransformResult:
    """Transform a parsed fragment into a template and its field descriptors.

    Parameters
    ----------
    root : Root
        Tree returned by :func:`~bootstrap_hbs.html_parser.parse_html`.
    options : GenerationOptions, optional
        Run options; defaults to templating text, classes, and the ``href``,
        ``src``, ``alt``, and ``title`` attributes.

    Returns
    -------
    TransformResult
        Template text plus fields in first-occurrence order with unique keys.
    """
    return HbsTransformer(options).transform(root)


__all__ = ["HbsTransformer", "escape_attribute", "transform_to_hbs"]
