"""Generate cross-linked documentation pages from a module's interface.

This package classifies the symbols extracted from a Swift module into pages,
assigns each page a filesystem-safe route, and writes CommonMark wiki pages or
an HTML site whose layout mirrors the module's source tree.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from swiftdoc_pages import main
>>> main()  # doctest: +SKIP
>>> from swiftdoc_pages import app
>>> app(["generate", "Sources", "-n", "Kit"])  # doctest: +SKIP
"""

from __future__ import annotations

from ._constants import GENERATOR_VERSION as __version__
from .cli import app, main

__all__ = ["__version__", "app", "main"]
