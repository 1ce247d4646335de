"""Unit tests for the documentation generation pipeline."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import pytest

from swiftdoc_pages.config import GenerateOptions, OutputFormat
from swiftdoc_pages.errors import PageWriteError
from swiftdoc_pages.generator import DocumentationGenerator

from conftest import make_symbol

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from swiftdoc_pages.interface import Symbol


class StaticExtractor:
    """Extractor stub returning a fixed symbol list."""

    def __init__(self, *symbols: Symbol) -> None:
        self.symbols = list(symbols)
        self.seen: list[Path] = []

    def extract(self, paths: cabc.Sequence[Path]) -> list[Symbol]:
        self.seen.extend(paths)
        return self.symbols


def _options(sources: Path, output: Path, **overrides: typ.Any) -> GenerateOptions:
    return GenerateOptions(
        module_name="Kit", inputs=[sources], output=output, **overrides
    )


def test_single_page_module_writes_only_home(tmp_path: Path, sources: Path) -> None:
    extractor = StaticExtractor(make_symbol("greet", "function"))
    result = DocumentationGenerator(
        _options(sources, tmp_path / "docs"), extractor=extractor
    ).run()

    assert result.written == [tmp_path / "docs" / "Home.md"]
    home = result.written[0].read_text(encoding="utf-8")
    assert home.startswith("# greet"), "expected the lone page to render as Home"
    assert not (tmp_path / "docs" / "_Sidebar.md").exists()


def test_single_page_html_writes_index_and_stylesheet(
    tmp_path: Path, sources: Path
) -> None:
    extractor = StaticExtractor(make_symbol("Widget", "struct"))
    output = tmp_path / "site"
    result = DocumentationGenerator(
        _options(sources, output, output_format=OutputFormat.HTML),
        extractor=extractor,
    ).run()

    assert result.written == [output / "index.html", output / "all.css"]
    assert ".codehilite" in (output / "all.css").read_text(encoding="utf-8")


def test_only_existing_directories_are_scanned(
    tmp_path: Path, sources: Path, caplog: pytest.LogCaptureFixture
) -> None:
    missing = tmp_path / "missing"
    extractor = StaticExtractor(make_symbol("Widget", "class"))
    options = GenerateOptions(
        module_name="Kit", inputs=[missing, sources], output=tmp_path / "docs"
    )
    with caplog.at_level(logging.WARNING):
        DocumentationGenerator(options, extractor=extractor).run()

    assert extractor.seen == [sources]
    assert f"Input path {missing} does not exist." in caplog.text


def test_empty_module_reports_and_writes_nothing(
    tmp_path: Path, sources: Path, caplog: pytest.LogCaptureFixture
) -> None:
    extractor = StaticExtractor()
    with caplog.at_level(logging.WARNING):
        result = DocumentationGenerator(
            _options(sources, tmp_path / "docs"), extractor=extractor
        ).run()

    assert result.empty
    assert result.excluded_by_filter == 0
    assert "No public API symbols were found" in caplog.text
    assert "minimum-access-level" not in caplog.text
    assert not (tmp_path / "docs").exists()


def test_anchor_outside_inputs_uses_flat_layout(tmp_path: Path, sources: Path) -> None:
    extractor = StaticExtractor(
        make_symbol("Widget", "class", file="/elsewhere/Widget.swift"),
        make_symbol("Gadget", "class", file="/elsewhere/Gadget.swift"),
    )
    output = tmp_path / "docs"
    DocumentationGenerator(_options(sources, output), extractor=extractor).run()

    assert (output / "Widget.md").is_file()
    assert (output / "Gadget.md").is_file()


def test_write_failure_raises_page_write_error(tmp_path: Path, sources: Path) -> None:
    extractor = StaticExtractor(
        make_symbol("Widget", "class"), make_symbol("Gadget", "class")
    )
    output = tmp_path / "docs"
    (output / "Widget.md").mkdir(parents=True)

    with pytest.raises(PageWriteError) as excinfo:
        DocumentationGenerator(_options(sources, output), extractor=extractor).run()

    assert excinfo.value.path == output / "Widget.md"
    assert (output / "Gadget.md").is_file(), "other pages still complete"


def _operator(name: str) -> list[Symbol]:
    return [
        make_symbol(name, "operator"),
        make_symbol(name, "function", is_operator=True),
    ]


def test_dotted_operators_stay_inside_the_output_root(
    tmp_path: Path, sources: Path
) -> None:
    extractor = StaticExtractor(
        make_symbol("Foo", "class"), *_operator("<.>"), *_operator("<..>")
    )
    output = tmp_path / "site" / "docs"
    result = DocumentationGenerator(
        _options(sources, output, output_format=OutputFormat.HTML),
        extractor=extractor,
    ).run()

    assert len(result.written) == len(set(result.written)), "paths must not repeat"
    root = output.resolve()
    escaped = [p for p in result.written if not p.resolve().is_relative_to(root)]
    assert escaped == [], f"written outside output root: {escaped}"
    assert output / "_._" / "index.html" in result.written
    assert output / "_.._" / "index.html" in result.written
    home = (output / "index.html").read_text(encoding="utf-8")
    assert 'href="/_._"' in home, "home navigation should link to the operator page"


def test_operators_without_route_characters_are_written(
    tmp_path: Path, sources: Path
) -> None:
    extractor = StaticExtractor(
        make_symbol("Foo", "class"), *_operator("<"), *_operator("<*>")
    )
    output = tmp_path / "docs"
    DocumentationGenerator(_options(sources, output), extractor=extractor).run()

    assert (output / "_.md").read_text(encoding="utf-8").startswith("# < Operator")
    assert (output / "___.md").read_text(encoding="utf-8").startswith("# <*> Operator")
    sidebar = (output / "_Sidebar.md").read_text(encoding="utf-8")
    assert "[<](/_)" in sidebar
    assert "[<*>](/___)" in sidebar
