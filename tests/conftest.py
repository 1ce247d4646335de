"""Shared fixtures for swiftdoc_pages tests.

Symbols are built through :func:`make_symbol` so tests read like the symbol
manifests the external analyzer writes, and :func:`write_manifest` drops such
a manifest into a temporary source tree for end-to-end runs.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest

from swiftdoc_pages.interface import (
    ContextKind,
    DeclarationContext,
    ModuleInterface,
    Symbol,
)


def make_symbol(
    name: str,
    kind: str,
    access: str = "public",
    *,
    file: str = "/src/Module.swift",
    extends: str | None = None,
    within: str | None = None,
    **extra: typ.Any,
) -> Symbol:
    """Build a symbol declared in ``file``, optionally inside an extension or type."""
    context: tuple[DeclarationContext, ...] = ()
    if extends:
        context = (DeclarationContext(ContextKind.EXTENSION, extends),)
    elif within:
        context = tuple(
            DeclarationContext(ContextKind.TYPE, part) for part in within.split(".")
        )
    return Symbol.create(
        name, kind, access, context=context, file_path=f"file://{file}", **extra
    )


def make_module(*symbols: Symbol, name: str = "Kit") -> ModuleInterface:
    """Wrap ``symbols`` in a ModuleInterface."""
    return ModuleInterface.from_symbols(name, symbols)


def write_manifest(
    directory: Path,
    symbols: list[dict[str, typ.Any]],
    *,
    name: str = "module.symbols.yaml",
) -> Path:
    """Write a symbol manifest (JSON, which the YAML loader accepts)."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(json.dumps({"symbols": symbols}, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def sources(tmp_path: Path) -> Path:
    """Return an empty ``Sources`` directory inside the test's temp dir."""
    root = tmp_path / "Sources"
    root.mkdir()
    return root


@pytest.fixture
def sample_manifest(sources: Path) -> Path:
    """Write a manifest describing a small module spread over two folders."""
    return write_manifest(
        sources,
        [
            {
                "name": "Foo",
                "kind": "class",
                "access": "public",
                "file": "Models/Foo.swift",
                "declaration": "public class Foo",
                "documentation": "A foo.",
            },
            {
                "name": "size",
                "kind": "variable",
                "access": "public",
                "file": "Models/Foo.swift",
                "context": [{"type": "Foo"}],
                "declaration": "public var size: Int",
            },
            {
                "name": "bar",
                "kind": "function",
                "access": "public",
                "file": "Helpers/Bar.swift",
                "declaration": "public func bar()",
            },
            {
                "name": "isBlank",
                "kind": "variable",
                "access": "public",
                "file": "Extensions/Array+Blank.swift",
                "context": [{"extension": "Array"}],
                "declaration": "public var isBlank: Bool",
            },
            {
                "name": "Hidden",
                "kind": "struct",
                "access": "internal",
                "file": "Models/Hidden.swift",
            },
        ],
    )
