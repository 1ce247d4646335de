"""Load generation defaults from YAML and merge them with CLI overrides."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from swiftdoc_pages.interface.models import AccessLevel

from .models import (
    DEFAULT_BASE_URL,
    DEFAULT_OUTPUT_DIR,
    GenerateConfigError,
    GenerateDefaults,
    GenerateOptions,
    OutputFormat,
)


def load_generate_defaults(path: Path, *, required: bool = False) -> GenerateDefaults:
    """Load the ``defaults`` block of a ``swift-doc.yaml`` configuration file.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file.
    required : bool, optional
        When ``False`` (default) a missing file yields empty defaults.

    Returns
    -------
    GenerateDefaults
        Parsed defaults; relative paths are resolved against the config file's
        directory.

    Raises
    ------
    FileNotFoundError
        If ``required`` is set and the file does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    GenerateConfigError
        If a value has the wrong shape or names an unknown format/access level.

    Examples
    --------
    >>> from pathlib import Path
    >>> defaults = load_generate_defaults(Path("swift-doc.yaml"))  # doctest: +SKIP
    >>> defaults.output_format  # doctest: +SKIP
    <OutputFormat.HTML: 'html'>
    """
    if not path.exists():
        if required:
            msg = f"Configuration file '{path}' not found."
            raise FileNotFoundError(msg)
        return GenerateDefaults()

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    if not isinstance(defaults, dict):
        msg = f"'defaults' in '{path}' must be a mapping."
        raise GenerateConfigError(msg)

    base_dir = path.parent
    inputs_raw = defaults.get("inputs") or []
    if isinstance(inputs_raw, str):
        inputs_raw = [inputs_raw]
    if not isinstance(inputs_raw, list):
        msg = f"'inputs' in '{path}' must be a path or a list of paths."
        raise GenerateConfigError(msg)

    return GenerateDefaults(
        module_name=defaults.get("module_name"),
        inputs=[_resolve(base_dir, item) for item in inputs_raw],
        output=_resolve(base_dir, defaults.get("output", DEFAULT_OUTPUT_DIR)),
        output_format=OutputFormat.parse(
            defaults.get("format", OutputFormat.COMMONMARK)
        ),
        base_url=str(defaults.get("base_url", DEFAULT_BASE_URL)),
        minimum_access_level=_parse_access_level(
            defaults.get("minimum_access_level", AccessLevel.PUBLIC)
        ),
    )


def resolve_options(
    defaults: GenerateDefaults,
    *,
    module_name: str | None = None,
    inputs: typ.Sequence[Path] = (),
    output: Path | None = None,
    output_format: str | OutputFormat | None = None,
    base_url: str | None = None,
    minimum_access_level: str | AccessLevel | None = None,
) -> GenerateOptions:
    """Merge explicit overrides onto ``defaults`` into :class:`GenerateOptions`.

    Raises
    ------
    GenerateConfigError
        If no module name or no input path is available from either source.
    """
    name = module_name or defaults.module_name
    if not name:
        msg = "A module name is required (--module-name or defaults.module_name)."
        raise GenerateConfigError(msg)
    paths = list(inputs) or list(defaults.inputs)
    if not paths:
        msg = "At least one input directory is required."
        raise GenerateConfigError(msg)

    return GenerateOptions(
        module_name=name,
        inputs=paths,
        output=output or defaults.output,
        output_format=(
            OutputFormat.parse(output_format)
            if output_format is not None
            else defaults.output_format
        ),
        base_url=base_url if base_url is not None else defaults.base_url,
        minimum_access_level=(
            _parse_access_level(minimum_access_level)
            if minimum_access_level is not None
            else defaults.minimum_access_level
        ),
    )


def _resolve(base_dir: Path, value: object) -> Path:
    """Return ``value`` as a path, anchored at ``base_dir`` when relative."""
    candidate = Path(str(value))
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def _parse_access_level(value: object) -> AccessLevel:
    try:
        return AccessLevel.parse(typ.cast("str", value))
    except ValueError as exc:
        raise GenerateConfigError(str(exc)) from exc


__all__ = ["load_generate_defaults", "resolve_options"]
