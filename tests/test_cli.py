"""Tests for the ``swift-doc generate`` command and the console entrypoint."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import pytest

from swiftdoc_pages import cli
from swiftdoc_pages.config import OutputFormat
from swiftdoc_pages.errors import GenerateConfigError
from swiftdoc_pages.generator import GenerationResult
from swiftdoc_pages.interface import AccessLevel

from conftest import write_manifest

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every CLI test from the temp dir so no real config file is read."""
    monkeypatch.chdir(tmp_path)


def _written(capsys: pytest.CaptureFixture[str]) -> set[str]:
    lines = capsys.readouterr().out.splitlines()
    return {line.removeprefix("wrote ") for line in lines if line.startswith("wrote ")}


def test_generate_writes_wiki_pages(
    tmp_path: Path,
    sources: Path,
    sample_manifest: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.generate([sources], module_name="Kit", output=tmp_path / "docs")
    assert _written(capsys) == {
        "docs/Models/Foo.md",
        "docs/Helpers/bar.md",
        "docs/Extensions/Array.md",
        "docs/Home.md",
        "docs/_Sidebar.md",
        "docs/_Footer.md",
    }


def test_generate_reads_defaults_from_config(
    tmp_path: Path,
    sources: Path,
    sample_manifest: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "swift-doc.yaml").write_text(
        """
defaults:
  module_name: Kit
  inputs:
    - Sources
  output: site
  format: html
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    cli.generate()
    written = _written(capsys)
    assert "site/index.html" in written
    assert "site/Models/Foo/index.html" in written
    assert "site/all.css" in written
    assert not any(path.endswith(".md") for path in written)


def test_generate_with_explicit_missing_config_fails(
    tmp_path: Path, sources: Path
) -> None:
    with pytest.raises(FileNotFoundError):
        cli.generate([sources], module_name="Kit", config=tmp_path / "custom.yaml")


def test_empty_result_writes_nothing_and_hints(
    tmp_path: Path,
    sources: Path,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    write_manifest(sources, [{"name": "Hidden", "kind": "class", "access": "internal"}])
    with caplog.at_level(logging.WARNING):
        cli.generate([sources], module_name="Kit", output=tmp_path / "docs")

    assert _written(capsys) == set()
    assert not (tmp_path / "docs").exists()
    assert "No public API symbols" in caplog.text
    assert "Lower --minimum-access-level" in caplog.text


def test_missing_inputs_warn_and_continue(
    tmp_path: Path,
    sources: Path,
    sample_manifest: Path,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    missing = tmp_path / "missing"
    not_a_dir = tmp_path / "file.txt"
    not_a_dir.write_text("x", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        cli.generate(
            [missing, not_a_dir, sources], module_name="Kit", output=tmp_path / "docs"
        )

    assert "does not exist" in caplog.text
    assert "is not a directory" in caplog.text
    assert "docs/Home.md" in _written(capsys)


def test_minimum_access_level_option_includes_internal(
    tmp_path: Path,
    sources: Path,
    sample_manifest: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.generate(
        [sources],
        module_name="Kit",
        output=tmp_path / "docs",
        minimum_access_level="internal",
    )
    assert "docs/Models/Hidden.md" in _written(capsys)


def test_main_turns_library_errors_into_exit_status(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _fail() -> None:
        msg = "A module name is required"
        raise GenerateConfigError(msg)

    monkeypatch.setattr(cli, "app", _fail)
    with pytest.raises(SystemExit) as excinfo:
        cli.main()
    assert excinfo.value.code == 1


def test_generate_resolves_options_for_the_generator(
    tmp_path: Path, sources: Path, mocker: MockerFixture
) -> None:
    generator_cls = mocker.patch("swiftdoc_pages.cli.DocumentationGenerator")
    generator_cls.return_value.run.return_value = GenerationResult(written=[])

    cli.generate(
        [sources],
        module_name="Kit",
        output_format="HTML",
        base_url="https://example.com/docs/",
    )

    (options,), _ = generator_cls.call_args
    assert options.module_name == "Kit"
    assert options.inputs == [sources]
    assert options.output_format is OutputFormat.HTML
    assert options.base_url == "https://example.com/docs/"
    assert options.minimum_access_level is AccessLevel.PUBLIC
