"""Shared dataclasses used by the template transform pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

FieldType = typ.Literal["text", "url", "classes"]


@dc.dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Describe one editable placeholder emitted into the template.

    Attributes
    ----------
    key : str
        Placeholder name, rendered as ``{{key}}`` in the template.
    type : str
        Editor input type: ``"text"``, ``"url"``, or ``"classes"``.
    label : str
        Human-readable caption shown next to the input.
    default : str
        Literal content the placeholder replaced.
    """

    key: str
    type: FieldType
    label: str
    default: str

    def as_dict(self) -> dict[str, str]:
        """Return the descriptor in the shape stored in ``fields.json``."""
        return {
            "key": self.key,
            "type": self.type,
            "label": self.label,
            "default": self.default,
        }


@dc.dataclass(slots=True)
class TransformState:
    """Run-scoped counters and claim flags consulted by the naming rules.

    A fresh instance must back every generation run: the "first heading" and
    "first section" claims depend on traversal order within one document.
    """

    title_done: bool = False
    subtitle_done: bool = False
    btn_count: int = 0
    link_count: int = 0
    text_count: int = 0
    class_slots: int = 0
    section_handled: bool = False
    container_handled: bool = False


@dc.dataclass(slots=True)
class FieldRegistry:
    """Ordered collection of field descriptors where the first key wins."""

    _fields: dict[str, FieldDescriptor] = dc.field(default_factory=dict)

    def add(self, descriptor: FieldDescriptor) -> bool:
        """Register ``descriptor`` unless its key is taken; report success."""
        if descriptor.key in self._fields:
            return False
        self._fields[descriptor.key] = descriptor
        return True

    def to_list(self) -> list[FieldDescriptor]:
        """Return descriptors in first-occurrence order."""
        return list(self._fields.values())


@dc.dataclass(frozen=True, slots=True)
class TransformResult:
    """Template text and the fields it references."""

    template: str
    fields: list[FieldDescriptor]

    def defaults(self) -> dict[str, str]:
        """Map every field key to its default value."""
        return {field.key: field.default for field in self.fields}


__all__ = [
    "FieldDescriptor",
    "FieldRegistry",
    "FieldType",
    "TransformResult",
    "TransformState",
]
