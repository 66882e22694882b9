"""Cyclopts CLI entrypoint for turning Bootstrap fragments into library components.

The ``bootstrap-hbs`` console script defined here reads one generation request
(from ``--input`` or piped standard input), converts its ``sourceHtml`` into a
Handlebars template with editable fields, and writes ``index.hbs``,
``fields.json``, and ``meta.json`` into the component library. The ``batch``
subcommand does the same for several request files in one invocation.

Examples
--------
Generate a component from a request file:

>>> from bootstrap_hbs.cli import main
>>> main()  # doctest: +SKIP

Pipe a request through standard input into a custom library root:

>>> from bootstrap_hbs.cli import app
>>> app(["--library-dir", "dist/library"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import ARTIFACT_NAMES
from .library import DEFAULT_LIBRARY_DIR, ComponentLibraryWriter
from .request import RequestError, load_request, parse_request

if typ.TYPE_CHECKING:
    from .library import GenerationReport
    from .request import GenerationRequest

USAGE = (
    "Usage: bootstrap-hbs --input ./path/to/input.json "
    "OR pipe JSON to stdin"
)

app = App(
    name="bootstrap-hbs",
    help="Convert Bootstrap 5 HTML fragments into Handlebars library components.",
    config=cyclopts.config.Env("INPUT_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _fail(message: str) -> typ.NoReturn:
    """Report ``message`` on stderr and exit with a non-zero status."""
    print(message, file=sys.stderr)
    raise SystemExit(1)


def _read_stdin() -> bytes:
    """Return piped standard input as raw bytes, or ``b""`` for an interactive TTY.

    The bytes are decoded by the request layer so invalid UTF-8 is reported
    as an input error instead of leaking through as escaped surrogates.
    """
    stream = sys.stdin
    if stream is None or stream.isatty():
        return b""
    return stream.buffer.read()


def _write(request: GenerationRequest, library_dir: Path) -> GenerationReport:
    writer = ComponentLibraryWriter(request, library_dir=library_dir)
    try:
        return writer.run()
    except OSError as exc:
        target = _format_path(writer.target_dir)
        _fail(f"Unable to write component to '{target}': {exc}")


def _report(report: GenerationReport) -> None:
    print(f"Generated component at: {_format_path(report.target_dir)}")
    print(f"Files: {', '.join(ARTIFACT_NAMES)}")
    print(f"Editable fields: {report.field_count}")


@app.default
def generate(
    *,
    input_path: typ.Annotated[
        Path | None,
        Parameter(name="--input", help="Path to the request JSON (or YAML) file"),
    ] = None,
    library_dir: typ.Annotated[
        Path,
        Parameter(help="Component library root", env_var="INPUT_LIBRARY_DIR"),
    ] = DEFAULT_LIBRARY_DIR,
    verbose: typ.Annotated[
        bool, Parameter(help="Log transform details to stderr")
    ] = False,
) -> None:
    """Generate one library component from a request.

    Parameters
    ----------
    input_path : Path or None, optional
        Request file to read. When ``None`` (default) the request is read from
        standard input.
    library_dir : Path, optional
        Root directory of the component library; overridable via
        ``INPUT_LIBRARY_DIR``.
    verbose : bool, optional
        Enable debug logging of parser and naming decisions.

    Returns
    -------
    None
        Writes the component artefacts and prints their location.

    Raises
    ------
    SystemExit
        With status 1 when no request is supplied or it cannot be decoded
        (nothing is written in that case), or when the component directory
        cannot be written.
    """
    _configure_logging(verbose)
    try:
        if input_path is not None:
            request = load_request(input_path)
        else:
            piped = _read_stdin()
            if not piped.strip():
                _fail(USAGE)
            request = parse_request(piped)
    except RequestError as exc:
        _fail(str(exc))
    _report(_write(request, library_dir))


@app.command(help="Generate a component for every request file, in order.")
def batch(
    paths: typ.Annotated[
        list[Path], Parameter(help="Request files (JSON or YAML)")
    ],
    *,
    library_dir: typ.Annotated[
        Path,
        Parameter(help="Component library root", env_var="INPUT_LIBRARY_DIR"),
    ] = DEFAULT_LIBRARY_DIR,
    verbose: typ.Annotated[
        bool, Parameter(help="Log transform details to stderr")
    ] = False,
) -> None:
    """Generate several components, each with its own naming state.

    Every request is decoded before the first component is written, so a bad
    request file aborts the run without producing partial output.

    Raises
    ------
    SystemExit
        With status 1 when any request file is missing or invalid, or when a
        component directory cannot be written.
    """
    _configure_logging(verbose)
    requests: list[GenerationRequest] = []
    for path in paths:
        try:
            requests.append(load_request(path))
        except RequestError as exc:
            _fail(str(exc))
    for request in requests:
        _report(_write(request, library_dir))


def main() -> None:
    """Invoke the Cyclopts application behind the ``bootstrap-hbs`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
