"""Load and validate documentation generation options.

This subpackage parses the optional ``swift-doc.yaml`` file, merges its
``defaults`` block with command-line overrides, and produces the typed
:class:`GenerateOptions` consumed by the generator. The primary entry points
are :func:`load_generate_defaults` and :func:`resolve_options`.

Examples
--------
>>> from pathlib import Path
>>> from swiftdoc_pages.config import load_generate_defaults, resolve_options
>>> defaults = load_generate_defaults(Path("swift-doc.yaml"))  # doctest: +SKIP
>>> options = resolve_options(defaults, module_name="Kit", inputs=[Path("Sources")])  # doctest: +SKIP
>>> options.base_url  # doctest: +SKIP
'/'
"""

from .loader import load_generate_defaults, resolve_options
from .models import (
    DEFAULT_BASE_URL,
    DEFAULT_OUTPUT_DIR,
    GenerateConfigError,
    GenerateDefaults,
    GenerateOptions,
    OutputFormat,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_OUTPUT_DIR",
    "GenerateConfigError",
    "GenerateDefaults",
    "GenerateOptions",
    "OutputFormat",
    "load_generate_defaults",
    "resolve_options",
]
