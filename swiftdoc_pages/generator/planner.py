"""Compute where each page of a run is written.

Anchored pages mirror the directory layout of the source file that declared
their anchor symbol, relative to the scanned input directory containing it.
Synthesized pages, and anchors outside every scanned directory, land at the
output root. The planner only does path arithmetic: it never reads files and
never creates directories.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from swiftdoc_pages._constants import (
    COMMONMARK_HOME_FILENAME,
    HOME_ROUTE,
    HTML_INDEX_FILENAME,
    STYLESHEET_FILENAME,
)
from swiftdoc_pages.config.models import OutputFormat
from swiftdoc_pages.routing import stem_for

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from swiftdoc_pages.interface import Symbol
    from swiftdoc_pages.pages import Page, PageIndex

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class PlannedPage:
    """A page paired with its absolute output path."""

    route: str
    page: Page
    path: Path


class OutputPlanner:
    """Map routes and anchor symbols to output paths for one run."""

    def __init__(
        self,
        output_root: Path,
        scan_roots: cabc.Sequence[Path],
        output_format: OutputFormat,
        *,
        single_page: bool = False,
    ) -> None:
        self.output_root = output_root
        self.scan_roots = [root.resolve() for root in scan_roots]
        self.output_format = output_format
        self.single_page = single_page

    def plan(self, stem: str, page: Page, anchor: Symbol | None) -> Path:
        """Return the output path for ``page`` written under filename ``stem``.

        ``stem`` is passed through :func:`stem_for`, so no path segment is ever
        empty, ``.`` or ``..``.
        """
        if self.single_page:
            return self.output_root / self._single_page_filename()

        filename = self._filename(stem_for(stem))
        if anchor is None:
            return self.output_root / filename

        relative_dir = self._source_directory(anchor)
        if relative_dir is None:
            logger.debug(
                "Anchor of %s is outside the scanned inputs; using flat layout.",
                page.title,
            )
            return self.output_root / filename
        return self.output_root / relative_dir / filename

    def plan_index(self, index: PageIndex) -> list[PlannedPage]:
        """Plan every entry of ``index`` in index order."""
        planned = [
            PlannedPage(
                route, entry.page, self.plan(entry.stem, entry.page, entry.anchor)
            )
            for route, entry in index.items()
        ]
        for item in planned:
            logger.debug("Planned %s -> %s", item.route, item.path)
        return planned

    def stylesheet_path(self) -> Path | None:
        """Return the stylesheet destination, or None when the format has none."""
        if self.output_format is OutputFormat.HTML:
            return self.output_root / STYLESHEET_FILENAME
        return None

    def _single_page_filename(self) -> str:
        match self.output_format:
            case OutputFormat.COMMONMARK:
                return COMMONMARK_HOME_FILENAME
            case OutputFormat.HTML:
                return HTML_INDEX_FILENAME
            case _:  # pragma: no cover - exhaustive over OutputFormat
                typ.assert_never(self.output_format)

    def _filename(self, stem: str) -> Path:
        match self.output_format:
            case OutputFormat.COMMONMARK:
                return Path(f"{stem}.md")
            case OutputFormat.HTML if stem == HOME_ROUTE:
                return Path(HTML_INDEX_FILENAME)
            case OutputFormat.HTML:
                return Path(stem) / HTML_INDEX_FILENAME
            case _:  # pragma: no cover - exhaustive over OutputFormat
                typ.assert_never(self.output_format)

    def _source_directory(self, anchor: Symbol) -> Path | None:
        """Return the anchor's source directory relative to its scan root."""
        if not anchor.local_path:
            return None
        source_dir = Path(anchor.local_path).resolve().parent
        for root in self.scan_roots:
            if source_dir.is_relative_to(root):
                return source_dir.relative_to(root)
        return None


__all__ = ["OutputPlanner", "PlannedPage"]
