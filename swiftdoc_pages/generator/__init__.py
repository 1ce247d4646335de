"""Planning, rendering, and writing of documentation pages."""

from .emitter import ParallelEmitter
from .page_generator import DocumentationGenerator, GenerationResult
from .planner import OutputPlanner, PlannedPage
from .renderer import PageRenderer

__all__ = [
    "DocumentationGenerator",
    "GenerationResult",
    "OutputPlanner",
    "PageRenderer",
    "ParallelEmitter",
    "PlannedPage",
]
