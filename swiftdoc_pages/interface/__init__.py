"""Symbol records and module views consumed by the page classifier."""

from .extractor import InterfaceExtractor, ManifestExtractor, load_module
from .models import (
    AccessLevel,
    ContextKind,
    DeclarationContext,
    Symbol,
    SymbolKind,
)
from .module import ModuleInterface

__all__ = [
    "AccessLevel",
    "ContextKind",
    "DeclarationContext",
    "InterfaceExtractor",
    "ManifestExtractor",
    "ModuleInterface",
    "Symbol",
    "SymbolKind",
    "load_module",
]
