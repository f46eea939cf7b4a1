"""Hierarchical page trees for describing generated sites and style guides.

The package centres on :class:`~pagetree.page.PageNode`, a fluent tree node
with immutable identity, editable metadata, and url lookup across its
descendants. Around it sit a style guide preset, a YAML loader and writer, a
navigation renderer, and the ``pages`` CLI.

Exports
-------
- ``PageNode``: the page tree node.
- ``StyleGuide``: a ``PageNode`` seeded with the standard style guide pages.
- ``app``: Cyclopts application behind the ``pages`` console script.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from pagetree import PageNode
>>> root = PageNode("Home", "/").add(PageNode("About", "/about"))
>>> root.find("/about").name
'About'
"""

from __future__ import annotations

from .cli import app, main
from .page import PageNode
from .styleguide import StyleGuide

__all__ = ["PageNode", "StyleGuide", "app", "main"]
