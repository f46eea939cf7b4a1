"""Render a navigation page from a page tree.

The builder walks a :class:`~pagetree.page.PageNode` tree through its public
``find_all`` and ``is_hidden`` operations, turns each visible page into a
template entry, and writes ``public/navigation.html`` (or the configured output
path). Hidden pages are left out together with everything beneath them.

>>> from pathlib import Path
>>> from pagetree.config import load_tree_config
>>> from pagetree.navigation import NavigationBuilder
>>> config = load_tree_config(Path("config/tree.yaml"))  # doctest: +SKIP
>>> NavigationBuilder(config).run()  # doctest: +SKIP
PosixPath('public/navigation.html')

Templates are read from ``pagetree/templates`` by default and descriptions are
rendered as Markdown.
"""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import markdown

if typ.TYPE_CHECKING:
    from .config import TreeConfig
    from .page import PageNode

logger = logging.getLogger(__name__)


class NavigationBuilder:
    """Render the navigation tree of a loaded page tree config."""

    def __init__(
        self, config: TreeConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        config : TreeConfig
            Loaded tree configuration (see
            :func:`pagetree.config.load_tree_config`).
        templates_dir : Path, optional
            Directory containing ``navigation.jinja``. Defaults to the
            ``pagetree/templates`` directory when ``None``.
        """
        self.config = config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("navigation.jinja")
        self._markdown_extensions = ["sane_lists", "tables", "fenced_code"]

    def run(self) -> Path:
        """Render the navigation HTML file to the configured output path."""
        output_path = self.config.navigation_output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        context = {
            "site_name": self.config.site_name,
            "root": self._entry(self.config.root),
            "entries": self.build_entries(),
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        output_path.write_text(html, encoding="utf-8")
        logger.debug("rendered navigation for %r to %s", self.config.root.url, output_path)
        return output_path

    def build_entries(self) -> list[dict[str, typ.Any]]:
        """Return nested entry dictionaries for the root's visible subpages."""
        return self._entries_for(self.config.root)

    def _entries_for(self, page: PageNode) -> list[dict[str, typ.Any]]:
        entries: list[dict[str, typ.Any]] = []
        for child in page.find_all():
            if child.is_hidden():
                continue
            entry = self._entry(child)
            entry["children"] = self._entries_for(child)
            entries.append(entry)
        return entries

    def _entry(self, page: PageNode) -> dict[str, typ.Any]:
        return {
            "name": page.name,
            "url": page.url,
            "title": page.title() or page.name,
            "description_html": self._render_description(page.description()),
            "keywords": page.keywords(),
            "children": [],
        }

    def _render_description(self, text: object) -> str:
        normalized = str(text or "").strip()
        if not normalized:
            return ""
        return markdown(
            normalized,
            extensions=self._markdown_extensions,
            output_format="html5",
        )


__all__ = ["NavigationBuilder"]
