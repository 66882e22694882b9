"""Turn Bootstrap 5 HTML fragments into Handlebars library components.

This package exposes the CLI entry points used by ``bootstrap-hbs`` to parse a
component's markup, replace its editable text, attributes, and class lists
with ``{{key}}`` placeholders, and write the template alongside its field and
metadata documents.

Exports
-------
- ``app``: Cyclopts application entry for the command and its subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from bootstrap_hbs import main
>>> main()  # doctest: +SKIP
>>> from bootstrap_hbs import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
