"""Tests for the field-schema and metadata documents."""

from __future__ import annotations

import msgspec.json as msgspec_json

from bootstrap_hbs._constants import DEFAULT_DESCRIPTION, FIELDS_SCHEMA_URL
from bootstrap_hbs.request import build_request
from bootstrap_hbs.serializer import (
    build_fields_document,
    build_meta_document,
    dumps_document,
)
from bootstrap_hbs.transform import FieldDescriptor

FIELDS = [
    FieldDescriptor("title", "text", "Text", "Привет"),
    FieldDescriptor("btn_url", "url", "HREF", "/start"),
    FieldDescriptor("section_classes", "classes", "Classes section", "py-5"),
]


def test_fields_document_keeps_first_occurrence_order() -> None:
    payload = msgspec_json.decode(dumps_document(build_fields_document(FIELDS)))
    assert payload["$schema"] == FIELDS_SCHEMA_URL
    assert payload["version"] == "1.0.0"
    assert [field["key"] for field in payload["fields"]] == [
        "title",
        "btn_url",
        "section_classes",
    ]
    assert payload["fields"][1] == {
        "key": "btn_url",
        "type": "url",
        "label": "HREF",
        "default": "/start",
    }


def test_serialization_is_byte_identical_across_calls() -> None:
    first = dumps_document(build_fields_document(FIELDS))
    second = dumps_document(build_fields_document(list(FIELDS)))
    assert first == second
    assert "Привет" in first
    assert first.splitlines()[1] == '  "$schema": "https://justsite.dev/schemas/fields.schema.json",'


def test_meta_document_shape() -> None:
    request = build_request(
        {
            "componentName": "Hero Basic",
            "category": "marketing/hero",
            "tags": ["hero"],
            "description": "Centered hero",
        }
    )
    document = build_meta_document(request, "hero-basic")
    assert list(document) == [
        "name",
        "slug",
        "category",
        "tags",
        "description",
        "bootstrap",
        "accessibility",
        "version",
    ]
    assert document["accessibility"] == {"ariaReady": True}
    assert document["bootstrap"] == "5"
    assert document["version"] == "1.0.0"


def test_meta_document_defaults() -> None:
    document = build_meta_document(build_request({}), "component")
    assert "name" not in document
    assert "category" not in document
    assert document["tags"] == []
    assert document["description"] == DEFAULT_DESCRIPTION
