"""Render page models into CommonMark or HTML documents.

CommonMark is the primary rendering: every page kind has a jinja template under
``swiftdoc_pages/templates``. HTML output converts that CommonMark with
Python-Markdown, highlights ``swift`` declaration blocks with Pygments, and
wraps the result in ``layout.html.jinja`` together with site navigation.
"""

from __future__ import annotations

import re
import typing as typ
from html import escape
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from swiftdoc_pages._constants import STYLESHEET_FILENAME
from swiftdoc_pages.config.models import OutputFormat
from swiftdoc_pages.interface import SymbolKind
from swiftdoc_pages.routing import link_for, route_for

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from swiftdoc_pages.interface import Symbol
    from swiftdoc_pages.pages import IndexSection, Page

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')

_MEMBER_GROUPS = (
    ("Nested Types", lambda s: s.kind.is_type),
    ("Typealiases", lambda s: s.kind is SymbolKind.TYPEALIAS),
    ("Properties", lambda s: s.kind is SymbolKind.VARIABLE),
    ("Operators", lambda s: s.kind is SymbolKind.FUNCTION and s.is_operator),
    ("Methods", lambda s: s.kind is SymbolKind.FUNCTION),
    ("Other Members", lambda _s: True),
)


def group_members(symbols: cabc.Iterable[Symbol]) -> list[tuple[str, list[Symbol]]]:
    """Group member symbols under display headings, keeping declaration order."""
    grouped: dict[str, list[Symbol]] = {}
    for symbol in symbols:
        for title, predicate in _MEMBER_GROUPS:
            if predicate(symbol):
                grouped.setdefault(title, []).append(symbol)
                break
    return [(title, grouped[title]) for title, _ in _MEMBER_GROUPS if title in grouped]


class PageRenderer:
    """Render pages with consistent templates, links, and code styling."""

    def __init__(
        self,
        module_name: str,
        *,
        output_format: OutputFormat = OutputFormat.COMMONMARK,
        base_url: str = "/",
        navigation: list[IndexSection] | None = None,
        templates_dir: Path | None = None,
        pygments_style: str = "default",
    ) -> None:
        """Initialize a renderer and its Jinja environment.

        Parameters
        ----------
        module_name : str
            Module name used in HTML titles.
        output_format : OutputFormat, optional
            Rendering target; defaults to CommonMark.
        base_url : str, optional
            Prefix for links between pages.
        navigation : list[IndexSection], optional
            Sections shown in the HTML layout's navigation column.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        pygments_style : str, optional
            Pygments style for highlighted declarations.
        """
        self.module_name = module_name
        self.output_format = output_format
        self.base_url = base_url
        self.navigation = navigation or []
        self.templates_dir = templates_dir or Path(__file__).resolve().parents[1] / "templates"
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "html.jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["link"] = self.link
        self.env.filters["route"] = route_for
        self.env.filters["group_members"] = group_members

    def link(self, route: str) -> str:
        """Return the link target for the page keyed ``route``."""
        return link_for(route, self.base_url)

    def render(self, page: Page) -> str:
        """Render ``page`` in the configured output format."""
        if self.output_format is OutputFormat.HTML:
            return self.html(page)
        return self.commonmark(page)

    def commonmark(self, page: Page) -> str:
        """Render ``page`` to CommonMark using its template."""
        text = self.env.get_template(page.template).render(page=page)
        return text.strip() + "\n"

    def html(self, page: Page) -> str:
        """Render ``page`` to a standalone HTML document."""
        body = self.markdown(self.commonmark(page))
        html = self.env.get_template("layout.html.jinja").render(
            title=page.title,
            module_name=self.module_name,
            body=body,
            navigation=self.navigation,
            home_href=self.base_url if self.navigation else None,
            stylesheet_href=self.link(STYLESHEET_FILENAME),
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def markdown(self, text: str) -> str:
        """Render markdown into HTML with highlighted fenced code."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        html = md.convert(text)
        return self._annotate_codehilite(html, text)

    def stylesheet(self) -> str:
        """Return the site stylesheet followed by the code highlighting rules."""
        base = (self.templates_dir / STYLESHEET_FILENAME).read_text(encoding="utf-8")
        return f"{base.rstrip()}\n\n{self._formatter.get_style_defs('.codehilite')}\n"

    def write(self, page: Page, path: Path) -> Path:
        """Render ``page`` and persist it at ``path``, creating parent directories."""
        write_text(path, self.render(page))
        return path

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))


def write_text(path: Path, text: str) -> None:
    """Write UTF-8 ``text`` to ``path`` after creating intermediate directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


__all__ = ["CODE_BLOCK_PATTERN", "PageRenderer", "group_members", "write_text"]
