"""Assemble the final route index, synthesizing navigation pages."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from swiftdoc_pages._constants import (
    FOOTER_ROUTE,
    GENERATOR_NAME,
    GENERATOR_URL,
    GENERATOR_VERSION,
    HOME_ROUTE,
    SIDEBAR_ROUTE,
)
from swiftdoc_pages.config.models import OutputFormat
from swiftdoc_pages.interface import SymbolKind

from .models import (
    ExternalTypePage,
    FooterPage,
    GlobalPage,
    HomePage,
    IndexEntry,
    IndexSection,
    OperatorPage,
    PageEntry,
    SidebarPage,
    TypealiasPage,
    TypePage,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from swiftdoc_pages.classifier import Classification
    from swiftdoc_pages.interface import ModuleInterface, Symbol

logger = logging.getLogger(__name__)

_TYPE_SECTIONS = (
    (SymbolKind.CLASS, "Classes"),
    (SymbolKind.STRUCTURE, "Structures"),
    (SymbolKind.ENUMERATION, "Enumerations"),
    (SymbolKind.PROTOCOL, "Protocols"),
)


@dc.dataclass(slots=True)
class PageIndex:
    """Route to page mapping for a single generation run.

    Attributes
    ----------
    entries : dict[str, PageEntry]
        Every page to write, keyed by route.
    single_page : bool
        Whether classification produced exactly one page, in which case it is
        written alone without navigation pages.
    """

    entries: dict[str, PageEntry]
    single_page: bool

    def __len__(self) -> int:
        return len(self.entries)

    def items(self) -> cabc.ItemsView[str, PageEntry]:
        return self.entries.items()


def build_page_index(
    classification: Classification,
    module: ModuleInterface,
    output_format: OutputFormat,
) -> PageIndex:
    """Return the index for ``classification``, adding navigation when needed.

    With two or more pages a ``Home`` page is synthesized; CommonMark output
    also gets ``_Sidebar`` and ``_Footer``. Synthesized pages replace any
    classified page whose route or filename stem is the same reserved name.
    """
    entries = dict(classification.pages)
    if len(entries) == 1:
        return PageIndex(entries=entries, single_page=True)

    sections = build_sections(classification)
    external_types = sorted(classification.external_types)
    synthesized: dict[str, PageEntry] = {
        HOME_ROUTE: PageEntry(
            HomePage(module, sections, external_types), None, HOME_ROUTE
        )
    }
    if output_format is OutputFormat.COMMONMARK:
        synthesized[SIDEBAR_ROUTE] = PageEntry(
            SidebarPage(module, sections, external_types), None, SIDEBAR_ROUTE
        )
        synthesized[FOOTER_ROUTE] = PageEntry(
            FooterPage(GENERATOR_NAME, GENERATOR_URL, GENERATOR_VERSION),
            None,
            FOOTER_ROUTE,
        )

    for route, entry in synthesized.items():
        for key in _colliding_keys(entries, route):
            logger.debug(
                "Route %s of %s is replaced by the generated %s page.",
                key,
                entries.pop(key).page.title,
                route,
            )
        entries[route] = entry
    return PageIndex(entries=entries, single_page=False)


def build_sections(classification: Classification) -> list[IndexSection]:
    """Group classified pages into titled, name-sorted navigation sections."""
    buckets: dict[str, list[IndexEntry]] = {}
    for route, entry in classification.pages.items():
        title = _section_title(entry.page)
        summary = _summary(entry.anchor)
        buckets.setdefault(title, []).append(
            IndexEntry(entry.page.title, route, summary)
        )

    order = [
        *(label for _, label in _TYPE_SECTIONS),
        "Typealiases",
        "Operators",
        "Global Functions",
        "Global Variables",
        "Extensions",
    ]
    return [
        IndexSection(title, sorted(buckets[title], key=lambda entry: entry.name))
        for title in order
        if title in buckets
    ]


def _colliding_keys(entries: dict[str, PageEntry], route: str) -> list[str]:
    """Return keys whose page would be published under the reserved ``route``."""
    return [key for key, entry in entries.items() if route in (key, entry.stem)]


def _summary(anchor: Symbol | None) -> str:
    if anchor is None or not anchor.documentation:
        return ""
    return anchor.documentation.splitlines()[0]


def _section_title(page: object) -> str:
    match page:
        case TypePage(symbol=symbol):
            return dict(_TYPE_SECTIONS)[symbol.kind]
        case TypealiasPage():
            return "Typealiases"
        case OperatorPage():
            return "Operators"
        case GlobalPage(symbols=symbols):
            if symbols[0].kind is SymbolKind.VARIABLE:
                return "Global Variables"
            return "Global Functions"
        case ExternalTypePage():
            return "Extensions"
        case _:
            msg = f"Unexpected classified page {page!r}"
            raise TypeError(msg)


__all__ = ["PageIndex", "build_page_index", "build_sections"]
