"""Typed records describing the symbols of a module's public interface."""

from __future__ import annotations

import dataclasses as dc
import enum

from swiftdoc_pages.errors import InterfaceLoadError


class AccessLevel(enum.IntEnum):
    """Visibility tier of a declaration, ordered from least to most visible."""

    PRIVATE = 0
    FILEPRIVATE = 1
    INTERNAL = 2
    PUBLIC = 3
    OPEN = 4

    @classmethod
    def parse(cls, value: str | AccessLevel) -> AccessLevel:
        """Return the access level named by ``value`` (case-insensitive)."""
        if isinstance(value, AccessLevel):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError as exc:
            known = ", ".join(level.name.lower() for level in cls)
            msg = f"Unknown access level '{value}'. Expected one of: {known}"
            raise ValueError(msg) from exc

    def includes(self, symbol: Symbol) -> bool:
        """Return whether ``symbol`` is visible at or above this level."""
        return symbol.access_level >= self

    def __str__(self) -> str:
        return self.name.lower()


class SymbolKind(enum.StrEnum):
    """Closed set of declaration kinds the classifier understands."""

    CLASS = "class"
    ENUMERATION = "enumeration"
    STRUCTURE = "structure"
    PROTOCOL = "protocol"
    TYPEALIAS = "typealias"
    OPERATOR = "operator"
    FUNCTION = "function"
    VARIABLE = "variable"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> SymbolKind:
        """Return the kind for ``value``, mapping unknown kinds to ``OTHER``."""
        normalized = _KIND_ALIASES.get(value.strip().lower(), value.strip().lower())
        try:
            return cls(normalized)
        except ValueError:
            return cls.OTHER

    @property
    def is_type(self) -> bool:
        """Return whether the kind declares a nominal type."""
        return self in TYPE_KINDS


_KIND_ALIASES = {
    "enum": "enumeration",
    "struct": "structure",
    "func": "function",
    "var": "variable",
    "let": "variable",
    "property": "variable",
}

TYPE_KINDS = frozenset(
    {
        SymbolKind.CLASS,
        SymbolKind.ENUMERATION,
        SymbolKind.STRUCTURE,
        SymbolKind.PROTOCOL,
    }
)


class ContextKind(enum.StrEnum):
    """Kind of scope enclosing a declaration."""

    EXTENSION = "extension"
    TYPE = "type"


@dc.dataclass(frozen=True, slots=True)
class DeclarationContext:
    """One enclosing scope of a declaration.

    For extensions ``name`` holds the extended type name.
    """

    kind: ContextKind
    name: str

    @property
    def is_extension(self) -> bool:
        return self.kind is ContextKind.EXTENSION


@dc.dataclass(frozen=True, slots=True)
class Symbol:
    """A declared entity produced by the interface extractor.

    Attributes
    ----------
    id : str
        Unique declaration identity, usually the dotted qualified name.
    name : str
        Unqualified declaration name.
    kind : SymbolKind
        Declaration kind used to route the symbol to a page.
    access_level : AccessLevel
        Declared visibility.
    context : tuple[DeclarationContext, ...]
        Enclosing scopes, outermost first.
    file_path : str
        ``file://`` reference to the declaring source file.
    declaration : str
        Signature text shown on the page.
    documentation : str
        Summary prose supplied by the extractor.
    is_operator : bool
        Whether a function implements an operator.
    aliased_type : str or None
        Target type name of a typealias.
    """

    id: str
    name: str
    kind: SymbolKind
    access_level: AccessLevel
    context: tuple[DeclarationContext, ...] = ()
    file_path: str = ""
    declaration: str = ""
    documentation: str = ""
    is_operator: bool = False
    aliased_type: str | None = None

    @classmethod
    def create(
        cls,
        name: str,
        kind: SymbolKind | str,
        access_level: AccessLevel | str = AccessLevel.PUBLIC,
        *,
        context: tuple[DeclarationContext, ...] = (),
        file_path: str = "",
        symbol_id: str | None = None,
        **extra: object,
    ) -> Symbol:
        """Build a symbol, deriving ``id`` from the context path when omitted."""
        if not name:
            msg = "Symbol name must not be empty."
            raise InterfaceLoadError(msg)
        resolved_kind = kind if isinstance(kind, SymbolKind) else SymbolKind.parse(kind)
        try:
            level = AccessLevel.parse(access_level)
        except ValueError as exc:
            raise InterfaceLoadError(str(exc)) from exc
        qualified = ".".join([*(entry.name for entry in context), name])
        return cls(
            id=symbol_id or qualified,
            name=name,
            kind=resolved_kind,
            access_level=level,
            context=context,
            file_path=file_path,
            **extra,  # type: ignore[arg-type]
        )

    @property
    def qualified_name(self) -> str:
        """Return the dotted name including enclosing scopes."""
        return ".".join([*(entry.name for entry in self.context), self.name])

    @property
    def local_path(self) -> str:
        """Return ``file_path`` with any ``file://`` scheme removed."""
        if self.file_path.startswith("file://"):
            return self.file_path[len("file://") :]
        return self.file_path

    def __str__(self) -> str:
        return self.id


__all__ = [
    "TYPE_KINDS",
    "AccessLevel",
    "ContextKind",
    "DeclarationContext",
    "Symbol",
    "SymbolKind",
]
