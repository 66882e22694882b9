"""Build the ``fields.json`` and ``meta.json`` documents for a component.

Both documents carry a version marker so consumers of the component library
can detect format changes. Serialization is deterministic: keys keep their
insertion order and fields keep first-occurrence order, so the same input
always yields byte-identical output.

Examples
--------
>>> from bootstrap_hbs.transform import FieldDescriptor
>>> document = build_fields_document([FieldDescriptor("title", "text", "Text", "Hi")])
>>> document["fields"]
[{'key': 'title', 'type': 'text', 'label': 'Text', 'default': 'Hi'}]
"""

from __future__ import annotations

import json
import typing as typ

from ._constants import (
    BOOTSTRAP_VERSION,
    DEFAULT_DESCRIPTION,
    FIELDS_SCHEMA_URL,
    SCHEMA_VERSION,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .request import GenerationRequest
    from .transform import FieldDescriptor


def build_fields_document(
    fields: cabc.Iterable[FieldDescriptor],
) -> dict[str, typ.Any]:
    """Return the versioned field-schema document."""
    return {
        "$schema": FIELDS_SCHEMA_URL,
        "version": SCHEMA_VERSION,
        "fields": [field.as_dict() for field in fields],
    }


def build_meta_document(request: GenerationRequest, slug: str) -> dict[str, typ.Any]:
    """Return the versioned component metadata document.

    Parameters
    ----------
    request : GenerationRequest
        Request the component was generated from. ``name`` and ``category``
        are omitted when the request did not provide them.
    slug : str
        Slug derived from the component name.

    Returns
    -------
    dict[str, Any]
        Metadata mapping ready for :func:`dumps_document`.
    """
    document: dict[str, typ.Any] = {}
    if request.component_name is not None:
        document["name"] = request.component_name
    document["slug"] = slug
    if request.category is not None:
        document["category"] = request.category
    document["tags"] = list(request.tags)
    document["description"] = request.description or DEFAULT_DESCRIPTION
    document["bootstrap"] = BOOTSTRAP_VERSION
    document["accessibility"] = {"ariaReady": True}
    document["version"] = SCHEMA_VERSION
    return document


def dumps_document(document: cabc.Mapping[str, typ.Any]) -> str:
    """Serialize a document as two-space indented JSON, keeping non-ASCII text."""
    return json.dumps(document, indent=2, ensure_ascii=False)


__all__ = ["build_fields_document", "build_meta_document", "dumps_document"]
