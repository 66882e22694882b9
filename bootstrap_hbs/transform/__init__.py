"""Naming rules and the template transform engine for parsed components."""

from .engine import HbsTransformer, transform_to_hbs
from .models import FieldDescriptor, TransformResult, TransformState
from .naming import NamingHeuristics

__all__ = [
    "FieldDescriptor",
    "HbsTransformer",
    "NamingHeuristics",
    "TransformResult",
    "TransformState",
    "transform_to_hbs",
]
