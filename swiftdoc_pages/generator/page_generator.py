"""High-level orchestration for documentation generation.

This module wires the pipeline together: it validates the input directories,
asks the interface extractor for the module's symbols, classifies them into
pages, assembles the route index, plans output paths, and finally writes every
page concurrently. It exposes :class:`DocumentationGenerator`, which consumes
:class:`~swiftdoc_pages.config.GenerateOptions` and returns a
:class:`GenerationResult` describing what was written.

Example
-------
>>> from pathlib import Path
>>> from swiftdoc_pages.config import GenerateOptions
>>> from swiftdoc_pages.generator import DocumentationGenerator
>>> options = GenerateOptions(module_name="Kit", inputs=[Path("Sources")])
>>> DocumentationGenerator(options).run()  # doctest: +SKIP
GenerationResult(written=[PosixPath('.build/documentation/Home.md'), ...], ...)
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from swiftdoc_pages._constants import HOME_ROUTE
from swiftdoc_pages.classifier import Classification, classify
from swiftdoc_pages.errors import PageWriteError
from swiftdoc_pages.interface import load_module
from swiftdoc_pages.pages import build_page_index, build_sections
from swiftdoc_pages.routing import RouteEncoder

from .emitter import ParallelEmitter
from .planner import OutputPlanner
from .renderer import PageRenderer, write_text

if typ.TYPE_CHECKING:
    from pathlib import Path

    from swiftdoc_pages.config import GenerateOptions
    from swiftdoc_pages.interface import InterfaceExtractor

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class GenerationResult:
    """Outcome of a generation run.

    Attributes
    ----------
    written : list[Path]
        Every file written, pages first, then the stylesheet for HTML runs.
    empty : bool
        True when classification produced no pages and nothing was written.
    excluded_by_filter : int
        Top-level declarations hidden by the minimum access level.
    """

    written: list[Path]
    empty: bool = False
    excluded_by_filter: int = 0


class DocumentationGenerator:
    """Turn a module's extracted interface into a tree of documentation pages."""

    def __init__(
        self,
        options: GenerateOptions,
        *,
        extractor: InterfaceExtractor | None = None,
        templates_dir: Path | None = None,
        max_workers: int | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        options : GenerateOptions
            Resolved generation options.
        extractor : InterfaceExtractor, optional
            Symbol source; defaults to reading analyzer manifests.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        max_workers : int, optional
            Upper bound on concurrent page writes; defaults to the CPU count.
        """
        self.options = options
        self.extractor = extractor
        self.templates_dir = templates_dir
        self.max_workers = max_workers

    def run(self) -> GenerationResult:
        """Generate every page and return the written paths.

        Returns
        -------
        GenerationResult
            Written paths, or an empty result when no symbols qualified.

        Raises
        ------
        RouteConstructionError
            If the base URL cannot be combined with page routes.
        InterfaceLoadError
            If a symbol manifest is malformed.
        PageWriteError
            If any page or the stylesheet could not be written.
        """
        options = self.options
        # Fail before any output exists when links cannot be built.
        RouteEncoder(options.base_url).encode(HOME_ROUTE)

        inputs = self._validate_inputs()
        module = load_module(options.module_name, inputs, extractor=self.extractor)
        classification = classify(module, options.minimum_access_level)
        if classification.is_empty:
            self._report_empty(classification)
            return GenerationResult(
                written=[],
                empty=True,
                excluded_by_filter=classification.excluded_by_filter,
            )

        index = build_page_index(classification, module, options.output_format)
        renderer = PageRenderer(
            module.name,
            output_format=options.output_format,
            base_url=options.base_url,
            navigation=None if index.single_page else build_sections(classification),
            templates_dir=self.templates_dir,
        )
        planner = OutputPlanner(
            options.output,
            inputs,
            options.output_format,
            single_page=index.single_page,
        )
        planned = planner.plan_index(index)

        options.output.mkdir(parents=True, exist_ok=True)
        logger.info(
            "Writing %d pages for %s to %s", len(planned), module.name, options.output
        )
        emitter = ParallelEmitter(renderer.write, max_workers=self.max_workers)
        written = emitter.emit(planned)

        stylesheet_path = planner.stylesheet_path()
        if stylesheet_path is not None:
            try:
                write_text(stylesheet_path, renderer.stylesheet())
            except OSError as exc:
                raise PageWriteError(stylesheet_path, str(exc)) from exc
            written.append(stylesheet_path)

        return GenerationResult(
            written=written, excluded_by_filter=classification.excluded_by_filter
        )

    def _validate_inputs(self) -> list[Path]:
        """Return the input paths that are existing directories, warning on others."""
        valid: list[Path] = []
        for directory in self.options.inputs:
            if not directory.exists():
                logger.warning("Input path %s does not exist.", directory)
            elif not directory.is_dir():
                logger.warning("Input path %s is not a directory.", directory)
            else:
                valid.append(directory)
        return valid

    def _report_empty(self, classification: Classification) -> None:
        """Explain why no pages were generated."""
        level = self.options.minimum_access_level
        logger.warning(
            "No %s API symbols were found at the specified path. "
            "No output was written.",
            level,
        )
        if classification.excluded_by_filter:
            logger.warning(
                "%d declarations are below the minimum access level '%s'. "
                "Lower --minimum-access-level to include them.",
                classification.excluded_by_filter,
                level,
            )


__all__ = ["DocumentationGenerator", "GenerationResult"]
