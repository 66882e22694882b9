"""Load generation requests from JSON text or request files."""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .helpers import (
    _normalize_attr_editable,
    _normalize_classes_mode,
    _normalize_tags,
    _optional_str,
)
from .models import GenerationOptions, GenerationRequest, RequestError

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _decode_utf8(data: bytes, source: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        msg = f"Invalid UTF-8 in {source}: {exc}"
        raise RequestError(msg) from exc


def parse_request(text: str | bytes) -> GenerationRequest:
    """Decode a JSON request document.

    Parameters
    ----------
    text : str or bytes
        JSON object using the camelCase request keys (``componentName``,
        ``category``, ``tags``, ``sourceHtml``, ``options``, ``description``).
        Raw bytes, such as piped standard input, must be UTF-8 encoded.

    Returns
    -------
    GenerationRequest
        Normalized request with option defaults applied.

    Raises
    ------
    RequestError
        If ``text`` is not valid UTF-8, not valid JSON, or does not hold an
        object.

    Examples
    --------
    >>> request = parse_request('{"componentName": "Hero", "sourceHtml": "<p>x</p>"}')
    >>> request.component_name, request.options.text_editable
    ('Hero', True)
    """
    if isinstance(text, bytes):
        text = _decode_utf8(text, "input")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON input: {exc}"
        raise RequestError(msg) from exc
    return build_request(payload)


def load_request(path: Path) -> GenerationRequest:
    """Read a request file, accepting JSON or (by suffix) YAML.

    Raises
    ------
    RequestError
        If the file is missing, unreadable, or cannot be decoded.
    """
    if not path.exists():
        msg = f"Request file '{path}' not found."
        raise RequestError(msg)
    try:
        data = path.read_bytes()
    except OSError as exc:
        msg = f"Unable to read request file '{path}': {exc}"
        raise RequestError(msg) from exc
    text = _decode_utf8(data, f"request file '{path}'")
    if path.suffix.lower() not in YAML_SUFFIXES:
        return parse_request(text)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        payload = loader.load(text)
    except YAMLError as exc:
        msg = f"Invalid YAML input: {exc}"
        raise RequestError(msg) from exc
    return build_request(payload)


def build_request(payload: object) -> GenerationRequest:
    """Build a :class:`GenerationRequest` from a decoded request mapping.

    Missing or malformed optional entries fall back to their defaults rather
    than failing; only a non-mapping payload is rejected.
    """
    match payload:
        case dict():
            raw = typ.cast("dict[str, typ.Any]", payload)
        case _:
            msg = "Request must be a JSON object."
            raise RequestError(msg)

    options_raw = raw.get("options")
    if not isinstance(options_raw, dict):
        options_raw = {}
    options = GenerationOptions(
        classes_mode=_normalize_classes_mode(options_raw.get("classesMode")),
        text_editable=options_raw.get("textEditable") is not False,
        attr_editable=_normalize_attr_editable(options_raw.get("attrEditable")),
    )
    return GenerationRequest(
        component_name=_optional_str(raw.get("componentName")),
        source_html=str(raw.get("sourceHtml") or ""),
        category=_optional_str(raw.get("category")),
        tags=_normalize_tags(raw.get("tags")),
        options=options,
        description=_optional_str(raw.get("description")),
    )


__all__ = ["build_request", "load_request", "parse_request"]
