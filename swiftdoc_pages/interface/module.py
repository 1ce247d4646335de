"""Module-level views over an extracted symbol collection."""

from __future__ import annotations

import dataclasses as dc
import functools
import typing as typ

from .models import Symbol, SymbolKind

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True)
class ModuleInterface:
    """The complete interface of one module as produced by the extractor.

    Attributes
    ----------
    name : str
        Module name shown on generated pages.
    symbols : tuple[Symbol, ...]
        Every extracted symbol in extraction order.
    """

    name: str
    symbols: tuple[Symbol, ...]

    @classmethod
    def from_symbols(cls, name: str, symbols: cabc.Iterable[Symbol]) -> ModuleInterface:
        return cls(name=name, symbols=tuple(symbols))

    @functools.cached_property
    def top_level_symbols(self) -> tuple[Symbol, ...]:
        """Return types at any depth plus declarations with no enclosing scope."""
        return tuple(
            symbol
            for symbol in self.symbols
            if symbol.kind.is_type or not symbol.context
        )

    @functools.cached_property
    def _by_qualified_name(self) -> dict[str, list[Symbol]]:
        grouped: dict[str, list[Symbol]] = {}
        for symbol in self.symbols:
            if symbol.kind.is_type or symbol.kind is SymbolKind.TYPEALIAS:
                grouped.setdefault(symbol.qualified_name, []).append(symbol)
        return grouped

    def symbols_named(
        self, name: str, *, resolving_typealiases: bool = True
    ) -> list[Symbol]:
        """Return the type declarations named ``name``.

        When ``resolving_typealiases`` is set, a typealias is replaced by the
        declarations of its aliased type if that type is defined in the module.
        An alias of an external type resolves to the alias itself.
        """
        matches = list(self._by_qualified_name.get(name, []))
        if not resolving_typealiases:
            return matches
        resolved: list[Symbol] = []
        for symbol in matches:
            if symbol.kind is SymbolKind.TYPEALIAS and symbol.aliased_type:
                target = self._by_qualified_name.get(symbol.aliased_type)
                resolved.extend(target or [symbol])
            else:
                resolved.append(symbol)
        return resolved

    def members_of(self, symbol: Symbol) -> list[Symbol]:
        """Return declarations whose innermost scope is ``symbol`` or an extension of it."""
        members: list[Symbol] = []
        for candidate in self.symbols:
            if not candidate.context or candidate is symbol:
                continue
            scope_path = ".".join(entry.name for entry in candidate.context)
            if scope_path == symbol.qualified_name:
                members.append(candidate)
        return members

    def operator_implementations(self, operator: Symbol) -> list[Symbol]:
        """Return functions that implement the operator declared by ``operator``."""
        return [
            symbol
            for symbol in self.symbols
            if symbol.kind is SymbolKind.FUNCTION
            and symbol.is_operator
            and symbol.name == operator.name
        ]

    def typealiases_of(self, type_name: str) -> list[Symbol]:
        """Return typealiases whose aliased type is ``type_name``."""
        return [
            symbol
            for symbol in self.symbols
            if symbol.kind is SymbolKind.TYPEALIAS and symbol.aliased_type == type_name
        ]


__all__ = ["ModuleInterface"]
