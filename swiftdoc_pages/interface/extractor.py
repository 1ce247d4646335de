"""Load extracted symbol manifests into :class:`ModuleInterface` values.

Swift semantic analysis happens outside this package: an external analyzer
writes ``*.symbols.yaml`` (or ``*.symbols.json``) manifests next to the sources
it scanned. :class:`ManifestExtractor` discovers those manifests beneath each
input directory and turns their entries into immutable :class:`Symbol`
records, normalising every declaring file to an absolute ``file://``
reference.

A manifest looks like::

    symbols:
      - name: Foo
        kind: class
        access: public
        file: Sources/Foo.swift
        declaration: public class Foo
      - name: count
        kind: variable
        access: public
        file: Sources/Array+Count.swift
        context:
          - extension: Array

Examples
--------
>>> from pathlib import Path
>>> from swiftdoc_pages.interface import load_module
>>> module = load_module("Kit", [Path("Sources")])  # doctest: +SKIP
>>> module.top_level_symbols[0].name  # doctest: +SKIP
'Foo'
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from swiftdoc_pages._constants import MANIFEST_PATTERNS
from swiftdoc_pages.errors import InterfaceLoadError

from .models import ContextKind, DeclarationContext, Symbol
from .module import ModuleInterface

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)


class InterfaceExtractor(typ.Protocol):
    """Collaborator that turns scanned paths into symbol records."""

    def extract(self, paths: cabc.Sequence[Path]) -> list[Symbol]: ...


class ManifestExtractor:
    """Read symbols from analyzer manifests found beneath the input paths."""

    def __init__(self, patterns: cabc.Sequence[str] = MANIFEST_PATTERNS) -> None:
        self.patterns = tuple(patterns)
        self._loader = YAML(typ="safe")
        self._loader.version = (1, 2)

    def extract(self, paths: cabc.Sequence[Path]) -> list[Symbol]:
        """Return every symbol listed in manifests under ``paths``.

        Manifests are read in sorted path order so extraction order, and
        therefore page anchors, stay stable between runs.

        Raises
        ------
        InterfaceLoadError
            If a manifest is not valid YAML/JSON or an entry is malformed.
        """
        symbols: list[Symbol] = []
        for root in paths:
            if not root.is_dir():
                continue
            for manifest in self._discover(root):
                loaded = self._load_manifest(manifest)
                logger.debug("Loaded %d symbols from %s", len(loaded), manifest)
                symbols.extend(loaded)
        return symbols

    def _discover(self, root: Path) -> list[Path]:
        found: set[Path] = set()
        for pattern in self.patterns:
            found.update(root.rglob(pattern))
        return sorted(found)

    def _load_manifest(self, path: Path) -> list[Symbol]:
        try:
            with path.open("r", encoding="utf-8") as handle:
                loaded = self._loader.load(handle) or {}
        except YAMLError as exc:
            msg = f"Symbol manifest '{path}' could not be parsed: {exc}"
            raise InterfaceLoadError(msg) from exc

        match loaded:
            case {"symbols": list() as entries}:
                pass
            case list() as entries:
                pass
            case dict() if not loaded.get("symbols"):
                return []
            case _:
                msg = f"Symbol manifest '{path}' must contain a 'symbols' list."
                raise InterfaceLoadError(msg)

        base_dir = path.parent.resolve()
        return [
            _build_symbol(entry, base_dir=base_dir, source=path, index=index)
            for index, entry in enumerate(entries)
        ]


def _build_symbol(
    entry: object, *, base_dir: Path, source: Path, index: int
) -> Symbol:
    """Build a Symbol from a single manifest entry."""
    if not isinstance(entry, dict):
        msg = f"Entry {index} in '{source}' is not a mapping."
        raise InterfaceLoadError(msg)
    payload = typ.cast("dict[str, typ.Any]", entry)
    for key in ("name", "kind"):
        if not payload.get(key):
            msg = f"Entry {index} in '{source}' is missing '{key}'."
            raise InterfaceLoadError(msg)

    return Symbol.create(
        str(payload["name"]),
        str(payload["kind"]),
        str(payload.get("access", "internal")),
        context=_parse_context(payload.get("context"), source=source, index=index),
        file_path=_file_reference(payload.get("file"), base_dir),
        symbol_id=_optional_str(payload.get("id")),
        declaration=str(payload.get("declaration") or ""),
        documentation=str(payload.get("documentation") or "").strip(),
        is_operator=bool(payload.get("operator", False)),
        aliased_type=_optional_str(payload.get("aliased_type")),
    )


def _parse_context(
    value: object, *, source: Path, index: int
) -> tuple[DeclarationContext, ...]:
    """Parse the ``context`` list of ``{extension: X}`` / ``{type: X}`` mappings."""
    if not value:
        return ()
    if not isinstance(value, list):
        msg = f"Entry {index} in '{source}' has a non-list 'context'."
        raise InterfaceLoadError(msg)
    scopes: list[DeclarationContext] = []
    for scope in value:
        match scope:
            case {"extension": str() as name}:
                scopes.append(DeclarationContext(ContextKind.EXTENSION, name))
            case {"type": str() as name}:
                scopes.append(DeclarationContext(ContextKind.TYPE, name))
            case str() as name:
                scopes.append(DeclarationContext(ContextKind.TYPE, name))
            case _:
                msg = (
                    f"Entry {index} in '{source}' has an invalid context "
                    f"scope {scope!r}."
                )
                raise InterfaceLoadError(msg)
    return tuple(scopes)


def _file_reference(value: object, base_dir: Path) -> str:
    """Return an absolute ``file://`` reference for a manifest ``file`` value."""
    text = _optional_str(value)
    if text is None:
        return ""
    if text.startswith("file://"):
        return text
    path = Path(text)
    if not path.is_absolute():
        path = base_dir / path
    return f"file://{path.resolve()}"


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def load_module(
    name: str,
    paths: cabc.Sequence[Path],
    *,
    extractor: InterfaceExtractor | None = None,
) -> ModuleInterface:
    """Extract the symbols beneath ``paths`` into a :class:`ModuleInterface`."""
    active = extractor or ManifestExtractor()
    symbols = active.extract(paths)
    logger.info("Extracted %d symbols for module %s", len(symbols), name)
    return ModuleInterface.from_symbols(name, symbols)


__all__ = ["InterfaceExtractor", "ManifestExtractor", "load_module"]
