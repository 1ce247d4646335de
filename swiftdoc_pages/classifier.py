"""Partition a module's symbols into documentation pages.

:func:`classify` folds the access-filtered symbol collection into a fresh
:class:`Classification`: one page per nominal type, typealias, and implemented
operator, one page per global function/variable name, and one page per external
type that the module extends. The first symbol seen for a grouped page is its
anchor and decides where the page lands on disk.

Examples
--------
>>> from swiftdoc_pages.interface import AccessLevel, ModuleInterface, Symbol
>>> module = ModuleInterface.from_symbols(
...     "Kit", [Symbol.create("Foo", "class"), Symbol.create("bar", "function")]
... )
>>> sorted(classify(module, AccessLevel.PUBLIC).pages)
['Foo', 'bar']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from .interface import AccessLevel, ModuleInterface, Symbol, SymbolKind
from .pages.models import (
    ExternalTypePage,
    GlobalPage,
    OperatorPage,
    Page,
    PageEntry,
    TypealiasPage,
    TypePage,
)
from .routing import has_route, route_for, stem_for

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class Classification:
    """Pages and symbol groups produced by :func:`classify`.

    Attributes
    ----------
    pages : dict[str, PageEntry]
        Route to page, anchor symbol, and filename stem.
    global_groups : dict[str, list[Symbol]]
        Global functions and variables grouped by name.
    external_types : dict[str, list[Symbol]]
        Extension members grouped by the external type they extend.
    excluded_by_filter : int
        Number of top-level symbols removed by the access filter.
    """

    pages: dict[str, PageEntry]
    global_groups: dict[str, list[Symbol]]
    external_types: dict[str, list[Symbol]]
    excluded_by_filter: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.pages


def classify(module: ModuleInterface, minimum_access: AccessLevel) -> Classification:
    """Classify the symbols of ``module`` visible at ``minimum_access``.

    Parameters
    ----------
    module : ModuleInterface
        Extracted interface to document.
    minimum_access : AccessLevel
        Lowest access level included in the output.

    Returns
    -------
    Classification
        Classified pages; an empty ``pages`` mapping is a valid result.
    """
    includes = minimum_access.includes
    pages: dict[str, PageEntry] = {}
    global_groups: dict[str, list[Symbol]] = {}

    top_level = module.top_level_symbols
    candidates = [symbol for symbol in top_level if includes(symbol)]
    for symbol in candidates:
        match symbol.kind:
            case (
                SymbolKind.CLASS
                | SymbolKind.ENUMERATION
                | SymbolKind.STRUCTURE
                | SymbolKind.PROTOCOL
            ):
                page = TypePage(
                    module=module,
                    symbol=symbol,
                    members=[m for m in module.members_of(symbol) if includes(m)],
                    typealiases=[
                        alias
                        for alias in module.typealiases_of(symbol.qualified_name)
                        if includes(alias)
                    ],
                )
                _store(pages, symbol, page, symbol)
            case SymbolKind.TYPEALIAS:
                page = TypealiasPage(module, symbol)
                _store(pages, symbol.name, page, symbol)
            case SymbolKind.OPERATOR:
                implementations = [
                    impl
                    for impl in module.operator_implementations(symbol)
                    if includes(impl)
                ]
                if implementations:
                    page = OperatorPage(module, symbol, implementations)
                    _store(pages, symbol, page, symbol)
            case SymbolKind.FUNCTION:
                if not symbol.is_operator:
                    global_groups.setdefault(symbol.name, []).append(symbol)
            case SymbolKind.VARIABLE:
                global_groups.setdefault(symbol.name, []).append(symbol)
            case SymbolKind.OTHER:
                continue
            case _:  # pragma: no cover - exhaustive over SymbolKind
                typ.assert_never(symbol.kind)

    external_types = _group_external_extensions(module, includes)
    for type_name, symbols in external_types.items():
        page = ExternalTypePage(module, type_name, symbols)
        _store(pages, type_name, page, symbols[0])

    for name, symbols in global_groups.items():
        _store(pages, name, GlobalPage(module, name, symbols), symbols[0])

    return Classification(
        pages=pages,
        global_groups=global_groups,
        external_types=external_types,
        excluded_by_filter=len(top_level) - len(candidates),
    )


def _group_external_extensions(
    module: ModuleInterface, includes: typ.Callable[[Symbol], bool]
) -> dict[str, list[Symbol]]:
    """Group single-level extension members whose extended type is not in-module."""
    groups: dict[str, list[Symbol]] = {}
    for symbol in module.symbols:
        if not includes(symbol) or len(symbol.context) != 1:
            continue
        scope = symbol.context[0]
        if not scope.is_extension:
            continue
        if module.symbols_named(scope.name, resolving_typealiases=True):
            continue
        groups.setdefault(scope.name, []).append(symbol)
    return groups


def _store(
    pages: dict[str, PageEntry],
    identifier: object,
    page: Page,
    anchor: Symbol,
) -> None:
    """Insert ``page`` under the route for ``identifier``; later entries win.

    Identifiers whose route has nothing left after encoding, such as the ``<``
    or ``<.>`` operators, are keyed by their filename stem instead.
    """
    stem = stem_for(identifier)
    route = route_for(identifier)
    if not has_route(route):
        route = stem = _fallback_key(pages, stem, page)
        logger.debug("Route of %s falls back to %s", identifier, route)
    elif route in pages:
        logger.debug("Route %s reassigned to %s", route, page.title)
    pages[route] = PageEntry(page, anchor, stem)


def _fallback_key(pages: dict[str, PageEntry], stem: str, page: Page) -> str:
    """Return ``stem``, suffixed when a different page already uses it."""
    key = stem
    counter = 1
    while key in pages and pages[key].page.title != page.title:
        counter += 1
        key = f"{stem}-{counter}"
    return key


__all__ = ["Classification", "classify"]
