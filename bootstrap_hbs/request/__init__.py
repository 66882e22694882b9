"""Load and normalize component generation requests.

This subpackage decodes the JSON (or YAML) request object that drives one
generation run, applies option defaults, and produces the frozen
:class:`GenerationRequest` consumed by the transform engine and library
writer. It also owns :func:`slugify`, which derives the component's library
directory name.

Examples
--------
>>> from bootstrap_hbs.request import parse_request, slugify
>>> request = parse_request('{"componentName": "Hero Basic", "sourceHtml": ""}')
>>> slugify(request.slug_source)
'hero-basic'
"""

from .helpers import slugify
from .loader import build_request, load_request, parse_request
from .models import ClassesMode, GenerationOptions, GenerationRequest, RequestError

__all__ = [
    "ClassesMode",
    "GenerationOptions",
    "GenerationRequest",
    "RequestError",
    "build_request",
    "load_request",
    "parse_request",
    "slugify",
]
