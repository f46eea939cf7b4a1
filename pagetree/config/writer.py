"""Serialize page trees back into the YAML layout read by the loader.

The writer emits ruamel round-trip mappings so the output matches the
hand-written files: two-space mapping indents, block sequences, and only the
fields that differ from a fresh page.

Example
-------
.. code-block:: python

    from pathlib import Path
    from pagetree.config import dump_tree_config
    from pagetree.styleguide import StyleGuide

    guide = StyleGuide("Example", "//example.com/style/").init()
    dump_tree_config(guide, Path("config/tree.yaml"))
"""

from __future__ import annotations

import logging
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

if typ.TYPE_CHECKING:
    from pathlib import Path

    from ..page import PageNode

logger = logging.getLogger(__name__)


def dump_tree_config(
    root: PageNode,
    path: Path,
    *,
    navigation_output: Path | None = None,
    site_name: str | None = None,
) -> Path:
    """Write ``root`` and its descendants to ``path`` as a tree YAML file.

    Subpages are always written out explicitly, so a seeded preset is dumped as
    plain pages and reloads without re-seeding.
    """
    document = CommentedMap()
    defaults = CommentedMap()
    if navigation_output is not None:
        defaults["navigation_output"] = navigation_output.as_posix()
    if site_name:
        defaults["site_name"] = site_name
    if defaults:
        document["defaults"] = defaults
    document["tree"] = page_to_mapping(root)

    path.parent.mkdir(parents=True, exist_ok=True)
    yaml = _build_roundtrip_yaml()
    with path.open("w", encoding="utf-8") as handle:
        yaml.dump(document, handle)
    logger.debug("dumped page tree %r to %s", root.url, path)
    return path


def page_to_mapping(page: PageNode) -> CommentedMap:
    """Return the YAML mapping for ``page`` and its subpages."""
    payload = CommentedMap()
    payload["name"] = page.name
    payload["url"] = page.url
    if page.title():
        payload["title"] = page.title()
    if page.description():
        payload["description"] = page.description()
    keywords = page.keywords()
    if isinstance(keywords, (list, tuple)) and keywords:
        payload["keywords"] = CommentedSeq(keywords)
    elif keywords:
        payload["keywords"] = keywords
    if page.is_hidden():
        payload["hidden"] = True
    children = page.find_all()
    if children:
        payload["children"] = CommentedSeq(page_to_mapping(child) for child in children)
    return payload


def _build_roundtrip_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


__all__ = ["dump_tree_config", "page_to_mapping"]
