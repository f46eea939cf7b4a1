"""Style guide page tree with a preset set of starting pages.

Call :meth:`StyleGuide.init` after setting the title and description, because
the landing page copies them:

>>> from pagetree.styleguide import StyleGuide
>>> guide = (
...     StyleGuide("Example Style Guide", "//example.com/style-guide/")
...     .title("Style Guide of Example Dot Com")
...     .description("A reference for standard styles at Example Dot Com.")
...     .init()
... )
>>> [page.url for page in guide.find_all()][:3]
['index.html', 'visual.html', 'base.html']
>>> guide.find("base.html#links").name
'Links'
"""

from __future__ import annotations

import logging

from .page import PageNode

logger = logging.getLogger(__name__)


class StyleGuide(PageNode):
    """A page tree seeded with the standard style guide sections."""

    __slots__ = ("_initialized",)

    def __init__(self, name: str | None = None, url: str | None = None) -> None:
        super().__init__(name, url)
        self._initialized = False

    def is_initialized(self) -> bool:
        """Return whether :meth:`init` has already seeded this guide."""
        return self._initialized

    def init(self) -> StyleGuide:
        """Add the starting pages once and return this guide.

        Later calls leave the tree unchanged.
        """
        if self._initialized:
            return self
        self._initialized = True
        logger.debug("seeding style guide %r at %r", self.name, self.url)
        self.add(PageNode(self.name, "index.html").description(self.description()))
        self.add(
            PageNode("Visual Design", "visual.html").description(
                "Color and font schemes, look-and-feel, overall voice and tone."
            )
        )
        self.add(_base_typography())
        self.add(
            PageNode("Objects", "obj.html").description(
                "Patterns of structure that can be reused many times for many "
                "different purposes."
            )
        )
        self.add(
            PageNode("Components", "comp.html").description(
                "Patterns of look-and-feel that are each only used for one purpose."
            )
        )
        self.add(
            PageNode("Helpers", "help.html").description(
                "Somewhat explicit classes used for enhancing default styles."
            )
        )
        self.add(
            PageNode("Atoms", "atom.html").description(
                "Very specific classes used for creating anomalies or fixing "
                "broken styles."
            )
        )
        return self


def _base_typography() -> PageNode:
    text_level = (
        PageNode("Text-Level Elements", "base.html#text-level-elements")
        .add(PageNode("Links", "base.html#links"))
        .add(PageNode("Stress", "base.html#stress"))
        .add(PageNode("Documentation", "base.html#documentation"))
        .add(PageNode("Data", "base.html#data"))
    )
    return (
        PageNode("Base Typography", "base.html")
        .description("Bare, unstyled HTML elements. No classes.")
        .add(PageNode("Table of Contents", "base.html#table-contents"))
        .add(PageNode("Headings & Paragraphs", "base.html#headings-paragraphs"))
        .add(PageNode("Lists", "base.html#lists"))
        .add(PageNode("Tables", "base.html#tables"))
        .add(text_level)
        .add(PageNode("Embedded Elements", "base.html#embedded-elements"))
        .add(PageNode("Forms", "base.html#forms"))
        .add(PageNode("Interactive Elements", "base.html#interactive-elements"))
    )


__all__ = ["StyleGuide"]
