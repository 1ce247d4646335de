"""Exception hierarchy raised by the documentation pipeline."""

from __future__ import annotations

from pathlib import Path


class SwiftDocError(Exception):
    """Base class for errors raised while generating documentation."""


class GenerateConfigError(SwiftDocError, ValueError):
    """Raised when generation options or the config file are invalid."""


class InterfaceLoadError(SwiftDocError, ValueError):
    """Raised when a symbol manifest cannot be parsed into symbols."""


class RouteConstructionError(SwiftDocError, ValueError):
    """Raised when a route cannot be combined with the base URL."""


class PageWriteError(SwiftDocError, OSError):
    """Raised when a page or asset fails to render or persist.

    Attributes
    ----------
    path : Path
        Destination that could not be written.
    """

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"Failed to write {path}: {message}")
        self.path = path


__all__ = [
    "GenerateConfigError",
    "InterfaceLoadError",
    "PageWriteError",
    "RouteConstructionError",
    "SwiftDocError",
]
