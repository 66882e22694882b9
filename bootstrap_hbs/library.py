"""Component library generation pipeline.

This module turns one :class:`~bootstrap_hbs.request.GenerationRequest` into
the three artefacts stored per component: the Handlebars template
(``index.hbs``), the editable field schema (``fields.json``), and the
component metadata (``meta.json``). The entry point is
:class:`ComponentLibraryWriter`, which parses the source markup, runs the
transform engine with a fresh naming state, and writes the artefacts under
``<library_dir>/<category...>/<slug>``.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from bootstrap_hbs.request import load_request
>>> request = load_request(Path("examples/hero-basic.json"))  # doctest: +SKIP
>>> report = ComponentLibraryWriter(request, library_dir=Path("library")).run()  # doctest: +SKIP
>>> report.target_dir  # doctest: +SKIP
PosixPath('library/marketing/hero/hero-basic')

All three documents are rendered and UTF-8 encoded in memory before the
target directory is created, so a failure while building them leaves no
partial component behind.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from ._constants import FIELDS_FILENAME, META_FILENAME, TEMPLATE_FILENAME
from .html_parser import iter_elements, parse_html
from .request import slugify
from .serializer import build_fields_document, build_meta_document, dumps_document
from .transform import HbsTransformer

if typ.TYPE_CHECKING:
    from .request import GenerationRequest

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY_DIR = Path("library")


@dc.dataclass(frozen=True, slots=True)
class GenerationReport:
    """Outcome of one generation run.

    Attributes
    ----------
    slug : str
        Directory name derived from the component name.
    target_dir : Path
        Directory holding the generated artefacts.
    written : list[Path]
        Artefact paths in write order.
    field_count : int
        Number of editable fields recorded in ``fields.json``.
    """

    slug: str
    target_dir: Path
    written: list[Path]
    field_count: int

    @property
    def filenames(self) -> list[str]:
        """Return the bare file names of the written artefacts."""
        return [path.name for path in self.written]


class ComponentLibraryWriter:
    """Generate and persist one component into the library tree."""

    def __init__(
        self, request: GenerationRequest, *, library_dir: Path | None = None
    ) -> None:
        """Bind the writer to a request and a library root.

        Parameters
        ----------
        request : GenerationRequest
            Decoded request describing the component and its source markup.
        library_dir : Path, optional
            Root of the component library. Defaults to ``library`` relative
            to the working directory.
        """
        self.request = request
        self.library_dir = library_dir or DEFAULT_LIBRARY_DIR
        self.slug = slugify(request.slug_source)

    @property
    def target_dir(self) -> Path:
        """Return ``<library_dir>/<category segments...>/<slug>``."""
        return self.library_dir.joinpath(*self.request.category_segments, self.slug)

    def run(self) -> GenerationReport:
        """Render the component and write its artefacts.

        Returns
        -------
        GenerationReport
            Target directory, written paths, and field count.

        Notes
        -----
        Parent directories are created as needed and existing artefacts are
        overwritten. Filesystem errors propagate to the caller.

        Raises
        ------
        UnicodeEncodeError
            If the markup holds text that cannot be stored as UTF-8. Nothing is
            written in that case.
        """
        tree = parse_html(self.request.source_html)
        logger.debug(
            "Parsed %d elements for component %r",
            sum(1 for _ in iter_elements(tree)),
            self.slug,
        )
        result = HbsTransformer(self.request.options).transform(tree)
        documents = {
            TEMPLATE_FILENAME: result.template,
            FIELDS_FILENAME: dumps_document(build_fields_document(result.fields)),
            META_FILENAME: dumps_document(
                build_meta_document(self.request, self.slug)
            ),
        }
        encoded = {
            filename: content.encode("utf-8")
            for filename, content in documents.items()
        }

        target_dir = self.target_dir
        target_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for filename, payload in encoded.items():
            path = target_dir / filename
            path.write_bytes(payload)
            written.append(path)
        logger.info(
            "Generated component %r with %d fields in %s",
            self.slug,
            len(result.fields),
            target_dir,
        )
        return GenerationReport(
            slug=self.slug,
            target_dir=target_dir,
            written=written,
            field_count=len(result.fields),
        )


__all__ = ["DEFAULT_LIBRARY_DIR", "ComponentLibraryWriter", "GenerationReport"]
