"""Typed dataclasses describing documentation generation options."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import Path

from swiftdoc_pages.errors import GenerateConfigError
from swiftdoc_pages.interface.models import AccessLevel

DEFAULT_OUTPUT_DIR = Path(".build/documentation")
DEFAULT_BASE_URL = "/"


class OutputFormat(enum.StrEnum):
    """Rendering target selecting filename conventions and navigation pages."""

    COMMONMARK = "commonmark"
    HTML = "html"

    @classmethod
    def parse(cls, value: str | OutputFormat) -> OutputFormat:
        """Return the format named by ``value`` (case-insensitive)."""
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            known = ", ".join(member.value for member in cls)
            msg = f"Unknown output format '{value}'. Expected one of: {known}"
            raise GenerateConfigError(msg) from exc


@dc.dataclass(slots=True)
class GenerateDefaults:
    """Optional defaults read from the ``defaults`` block of the config file."""

    module_name: str | None = None
    inputs: list[Path] = dc.field(default_factory=list)
    output: Path = DEFAULT_OUTPUT_DIR
    output_format: OutputFormat = OutputFormat.COMMONMARK
    base_url: str = DEFAULT_BASE_URL
    minimum_access_level: AccessLevel = AccessLevel.PUBLIC


@dc.dataclass(slots=True)
class GenerateOptions:
    """A fully resolved generation request.

    Attributes
    ----------
    module_name : str
        Name of the documented module.
    inputs : list[Path]
        Directories scanned for symbol manifests; anchored pages mirror their
        layout beneath ``output``.
    output : Path
        Root directory receiving generated files.
    output_format : OutputFormat
        CommonMark wiki pages or an HTML site.
    base_url : str
        Prefix for links embedded in generated pages.
    minimum_access_level : AccessLevel
        Lowest access level documented.
    """

    module_name: str
    inputs: list[Path]
    output: Path = DEFAULT_OUTPUT_DIR
    output_format: OutputFormat = OutputFormat.COMMONMARK
    base_url: str = DEFAULT_BASE_URL
    minimum_access_level: AccessLevel = AccessLevel.PUBLIC


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_OUTPUT_DIR",
    "GenerateConfigError",
    "GenerateDefaults",
    "GenerateOptions",
    "OutputFormat",
]
