"""Cyclopts CLI entrypoint for generating module documentation pages.

The ``swift-doc`` console script defined here reads the symbol manifests found
beneath one or more source directories and writes cross-linked CommonMark
(wiki) or HTML pages. Every option can also come from the ``defaults`` block of
``swift-doc.yaml`` or from ``INPUT_*`` environment variables, which keeps CI
action usage flag-free.

Examples
--------
Generate wiki pages for the ``Kit`` module:

>>> from swiftdoc_pages.cli import app
>>> app.run(["generate", "Sources", "--module-name", "Kit"])  # doctest: +SKIP

Generate an HTML site that includes internal declarations:

>>> app.run(
...     [
...         "generate",
...         "Sources",
...         "-n",
...         "Kit",
...         "--format",
...         "html",
...         "--minimum-access-level",
...         "internal",
...     ]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_generate_defaults, resolve_options
from .errors import SwiftDocError
from .generator import DocumentationGenerator

DEFAULT_CONFIG = Path("swift-doc.yaml")
LOG_FORMAT = "%(levelname)s: %(message)s"

logger = logging.getLogger(__name__)

app = App(name="swift-doc", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate documentation pages for a module.")
def generate(
    inputs: typ.Annotated[
        list[Path] | None,
        Parameter(help="One or more directories containing symbol manifests"),
    ] = None,
    *,
    module_name: typ.Annotated[
        str | None,
        Parameter(
            name=["--module-name", "-n"],
            help="The name of the module",
            env_var="INPUT_MODULE_NAME",
        ),
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(
            name=["--output", "-o"],
            help="The path for generated output",
            env_var="INPUT_OUTPUT",
        ),
    ] = None,
    output_format: typ.Annotated[
        str | None,
        Parameter(
            name=["--format", "-f"],
            help="The output format (commonmark or html)",
            env_var="INPUT_FORMAT",
        ),
    ] = None,
    base_url: typ.Annotated[
        str | None,
        Parameter(
            name="--base-url",
            help="The base URL used for all relative URLs in generated documents",
            env_var="INPUT_BASE_URL",
        ),
    ] = None,
    minimum_access_level: typ.Annotated[
        str | None,
        Parameter(
            name="--minimum-access-level",
            help="The minimum access level of the symbols included",
            env_var="INPUT_MINIMUM_ACCESS_LEVEL",
        ),
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to swift-doc.yaml", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    verbose: typ.Annotated[
        bool, Parameter(help="Log planning details", env_var="INPUT_VERBOSE")
    ] = False,
) -> None:
    """Generate documentation pages for the requested module.

    Parameters
    ----------
    inputs : list[Path] or None, optional
        Directories scanned for symbol manifests; falls back to
        ``defaults.inputs`` in the config file.
    module_name : str or None, optional
        Module name; falls back to ``defaults.module_name``.
    output : Path or None, optional
        Output root; defaults to ``.build/documentation``.
    output_format : str or None, optional
        ``commonmark`` (default) or ``html``.
    base_url : str or None, optional
        Link prefix; defaults to ``/``.
    minimum_access_level : str or None, optional
        Lowest access level documented; defaults to ``public``.
    config : Path, optional
        Optional YAML file supplying defaults (``INPUT_CONFIG``).
    verbose : bool, optional
        Enable debug logging for the pipeline.

    Returns
    -------
    None
        Writes pages and prints one ``wrote`` line per file.

    Raises
    ------
    GenerateConfigError
        If the module name or inputs are missing, or an option is invalid.
    """
    if verbose:
        logging.getLogger("swiftdoc_pages").setLevel(logging.DEBUG)

    defaults = load_generate_defaults(config, required=config != DEFAULT_CONFIG)
    options = resolve_options(
        defaults,
        module_name=module_name,
        inputs=inputs or (),
        output=output,
        output_format=output_format,
        base_url=base_url,
        minimum_access_level=minimum_access_level,
    )
    result = DocumentationGenerator(options).run()
    for path in result.written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `swift-doc` console command.

    Library errors are logged and turned into a non-zero exit status.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    try:
        app()
    except SwiftDocError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
