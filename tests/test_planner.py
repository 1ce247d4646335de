"""Unit tests for output path planning."""

from __future__ import annotations

from pathlib import Path

import pytest

from swiftdoc_pages.classifier import classify
from swiftdoc_pages.config import OutputFormat
from swiftdoc_pages.generator import OutputPlanner
from swiftdoc_pages.interface import AccessLevel, Symbol
from swiftdoc_pages.pages import FooterPage, TypePage, build_page_index

from conftest import make_module, make_symbol


@pytest.fixture
def layout(tmp_path: Path) -> dict[str, Path]:
    return {"sources": tmp_path / "Sources", "output": tmp_path / "docs"}


def _type_page(name: str, file: Path) -> tuple[TypePage, Symbol]:
    symbol = make_symbol(name, "class", file=str(file))
    return TypePage(make_module(symbol), symbol, []), symbol


def test_single_page_uses_home_filename(layout: dict[str, Path]) -> None:
    page, anchor = _type_page("Foo", layout["sources"] / "Models" / "Foo.swift")
    markdown = OutputPlanner(
        layout["output"], [layout["sources"]], OutputFormat.COMMONMARK, single_page=True
    )
    html = OutputPlanner(
        layout["output"], [layout["sources"]], OutputFormat.HTML, single_page=True
    )
    assert markdown.plan("Foo", page, anchor) == layout["output"] / "Home.md"
    assert html.plan("Foo", page, anchor) == layout["output"] / "index.html"


def test_anchored_page_mirrors_source_directory(layout: dict[str, Path]) -> None:
    page, anchor = _type_page("Foo", layout["sources"] / "Models" / "Foo.swift")
    markdown = OutputPlanner(layout["output"], [layout["sources"]], OutputFormat.COMMONMARK)
    html = OutputPlanner(layout["output"], [layout["sources"]], OutputFormat.HTML)

    assert markdown.plan("Foo", page, anchor) == layout["output"] / "Models" / "Foo.md"
    assert html.plan("Foo", page, anchor) == (
        layout["output"] / "Models" / "Foo" / "index.html"
    )


def test_anchor_at_scan_root_lands_at_output_root(layout: dict[str, Path]) -> None:
    page, anchor = _type_page("Foo", layout["sources"] / "Foo.swift")
    planner = OutputPlanner(layout["output"], [layout["sources"]], OutputFormat.COMMONMARK)
    assert planner.plan("Foo", page, anchor) == layout["output"] / "Foo.md"


def test_anchor_under_second_scan_root(tmp_path: Path, layout: dict[str, Path]) -> None:
    extra = tmp_path / "Plugins"
    page, anchor = _type_page("Plugin", extra / "Core" / "Plugin.swift")
    planner = OutputPlanner(
        layout["output"], [layout["sources"], extra], OutputFormat.COMMONMARK
    )
    assert planner.plan("Plugin", page, anchor) == layout["output"] / "Core" / "Plugin.md"


def test_anchor_outside_scan_roots_uses_flat_layout(
    tmp_path: Path, layout: dict[str, Path]
) -> None:
    page, anchor = _type_page("Foo", tmp_path / "elsewhere" / "Foo.swift")
    planner = OutputPlanner(layout["output"], [layout["sources"]], OutputFormat.COMMONMARK)
    assert planner.plan("Foo", page, anchor) == layout["output"] / "Foo.md"


def test_unanchored_pages_land_at_output_root(layout: dict[str, Path]) -> None:
    footer = FooterPage("swift-doc", "https://example.invalid", "1.0.0")
    markdown = OutputPlanner(layout["output"], [layout["sources"]], OutputFormat.COMMONMARK)
    html = OutputPlanner(layout["output"], [layout["sources"]], OutputFormat.HTML)

    assert markdown.plan("_Footer", footer, None) == layout["output"] / "_Footer.md"
    assert markdown.plan("Home", footer, None) == layout["output"] / "Home.md"
    assert html.plan("Home", footer, None) == layout["output"] / "index.html"


def test_stylesheet_only_planned_for_html(layout: dict[str, Path]) -> None:
    markdown = OutputPlanner(layout["output"], [layout["sources"]], OutputFormat.COMMONMARK)
    html = OutputPlanner(layout["output"], [layout["sources"]], OutputFormat.HTML)
    assert markdown.stylesheet_path() is None
    assert html.stylesheet_path() == layout["output"] / "all.css"


def test_planning_creates_no_directories(layout: dict[str, Path]) -> None:
    page, anchor = _type_page("Foo", layout["sources"] / "Models" / "Foo.swift")
    planner = OutputPlanner(layout["output"], [layout["sources"]], OutputFormat.COMMONMARK)
    planner.plan("Foo", page, anchor)
    assert not layout["output"].exists()


@pytest.mark.parametrize(
    ("stem", "directory"),
    [("_._", "_._"), ("_.._", "_.._"), (".", "_"), ("..", "__"), ("", "_")],
)
def test_html_stems_never_escape_the_output_root(
    layout: dict[str, Path], stem: str, directory: str
) -> None:
    footer = FooterPage("swift-doc", "https://example.invalid", "1.0.0")
    html = OutputPlanner(layout["output"], [layout["sources"]], OutputFormat.HTML)
    path = html.plan(stem, footer, None)
    assert path == layout["output"] / directory / "index.html"
    assert path.parent.parent == layout["output"]


def test_dotted_operators_get_their_own_paths(layout: dict[str, Path]) -> None:
    symbols = [make_symbol("Foo", "class")]
    for name in ("<.>", "<..>"):
        symbols.append(make_symbol(name, "operator"))
        symbols.append(make_symbol(name, "function", is_operator=True))
    module = make_module(*symbols)
    index = build_page_index(
        classify(module, AccessLevel.PUBLIC), module, OutputFormat.HTML
    )
    planner = OutputPlanner(layout["output"], [layout["sources"]], OutputFormat.HTML)

    paths = [item.path for item in planner.plan_index(index)]
    assert len(paths) == len(set(paths)), "every page needs a distinct path"
    assert layout["output"] / "_._" / "index.html" in paths
    assert layout["output"] / "_.._" / "index.html" in paths
    assert all(".." not in path.relative_to(layout["output"]).parts for path in paths)
