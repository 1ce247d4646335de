"""Page models produced by the classifier and consumed by the renderer.

Each page kind is a small dataclass naming the jinja template that renders it.
:data:`Page` is the closed union of every kind so renderer and planner code can
``match`` on it exhaustively.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from swiftdoc_pages.interface import ModuleInterface, Symbol


@dc.dataclass(slots=True)
class TypePage:
    """A class, enumeration, structure, or protocol and its members."""

    template: typ.ClassVar[str] = "type.md.jinja"

    module: ModuleInterface
    symbol: Symbol
    members: list[Symbol]
    typealiases: list[Symbol] = dc.field(default_factory=list)

    @property
    def title(self) -> str:
        return self.symbol.id


@dc.dataclass(slots=True)
class TypealiasPage:
    """A typealias declaration."""

    template: typ.ClassVar[str] = "typealias.md.jinja"

    module: ModuleInterface
    symbol: Symbol

    @property
    def title(self) -> str:
        return self.symbol.id


@dc.dataclass(slots=True)
class OperatorPage:
    """An operator declaration with its implementing functions."""

    template: typ.ClassVar[str] = "operator.md.jinja"

    module: ModuleInterface
    symbol: Symbol
    implementations: list[Symbol]

    @property
    def title(self) -> str:
        return self.symbol.name


@dc.dataclass(slots=True)
class GlobalPage:
    """Global functions or variables sharing one name."""

    template: typ.ClassVar[str] = "global.md.jinja"

    module: ModuleInterface
    name: str
    symbols: list[Symbol]

    @property
    def title(self) -> str:
        return self.name


@dc.dataclass(slots=True)
class ExternalTypePage:
    """Extension members added to a type declared outside the module."""

    template: typ.ClassVar[str] = "external_type.md.jinja"

    module: ModuleInterface
    external_type: str
    symbols: list[Symbol]

    @property
    def title(self) -> str:
        return f"Extensions on {self.external_type}"


@dc.dataclass(slots=True)
class IndexEntry:
    """A link from a navigation page to one documented page."""

    name: str
    route: str
    summary: str = ""


@dc.dataclass(slots=True)
class IndexSection:
    """A titled group of index entries."""

    title: str
    entries: list[IndexEntry]


@dc.dataclass(slots=True)
class HomePage:
    """Landing page listing every documented page."""

    template: typ.ClassVar[str] = "home.md.jinja"

    module: ModuleInterface
    sections: list[IndexSection]
    external_types: list[str]

    @property
    def title(self) -> str:
        return self.module.name


@dc.dataclass(slots=True)
class SidebarPage:
    """Wiki sidebar navigation."""

    template: typ.ClassVar[str] = "sidebar.md.jinja"

    module: ModuleInterface
    sections: list[IndexSection]
    external_types: list[str]

    @property
    def title(self) -> str:
        return self.module.name


@dc.dataclass(slots=True)
class FooterPage:
    """Wiki footer crediting the generator."""

    template: typ.ClassVar[str] = "footer.md.jinja"

    generator: str
    generator_url: str
    version: str

    @property
    def title(self) -> str:
        return "Footer"


Page: typ.TypeAlias = (
    TypePage
    | TypealiasPage
    | OperatorPage
    | GlobalPage
    | ExternalTypePage
    | HomePage
    | SidebarPage
    | FooterPage
)


class PageEntry(typ.NamedTuple):
    """A page, the symbol anchoring its placement, and its filename stem."""

    page: Page
    anchor: Symbol | None
    stem: str


__all__ = [
    "ExternalTypePage",
    "FooterPage",
    "GlobalPage",
    "HomePage",
    "IndexEntry",
    "IndexSection",
    "OperatorPage",
    "Page",
    "PageEntry",
    "SidebarPage",
    "TypePage",
    "TypealiasPage",
]
