"""Load page tree YAML definitions into :class:`~pagetree.page.PageNode` trees."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import DEFAULT_NAVIGATION_OUTPUT
from ..page import PageNode
from ..styleguide import StyleGuide
from .helpers import (
    _normalize_keywords,
    _optional_str,
    _parse_bool,
    _required_str,
    find_duplicate_urls,
)
from .models import TreeConfig, TreeConfigError

logger = logging.getLogger(__name__)

PRESETS: dict[str, type[StyleGuide]] = {"styleguide": StyleGuide}


def load_tree_config(path: Path) -> TreeConfig:
    """Load the YAML file describing a page tree and its rendering options.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML tree definition (for example,
        ``config/tree.yaml``).

    Returns
    -------
    TreeConfig
        The assembled root page plus navigation output path, site name, and
        strictness flag.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    TreeConfigError
        If the ``tree`` section is missing or malformed, or if ``strict`` is
        enabled and two pages share a url.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from pagetree.config import load_tree_config
    >>> config = load_tree_config(Path("config/tree.yaml"))  # doctest: +SKIP
    >>> config.root.find("base.html#links").name  # doctest: +SKIP
    'Links'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}

    tree_raw = raw.get("tree")
    if not isinstance(tree_raw, dict) or not tree_raw:
        msg = "No tree defined in configuration."
        raise TreeConfigError(msg)

    root = build_page(tree_raw)
    strict = _parse_bool(defaults.get("strict"))
    duplicates = find_duplicate_urls(root)
    if duplicates:
        listing = ", ".join(f"{url} (x{count})" for url, count in duplicates.items())
        if strict:
            msg = f"Duplicate page urls in '{path}': {listing}"
            raise TreeConfigError(msg)
        logger.warning("duplicate page urls in %s: %s", path, listing)

    site_name = _optional_str(defaults.get("site_name")) or root.title() or root.name
    logger.debug("loaded page tree %r from %s", root.url, path)
    return TreeConfig(
        root=root,
        navigation_output=Path(
            defaults.get("navigation_output", DEFAULT_NAVIGATION_OUTPUT)
        ),
        site_name=site_name,
        strict=strict,
    )


def build_page(payload: typ.Mapping[str, typ.Any], *, where: str = "tree") -> PageNode:
    """Build a page and its subpages from a mapping payload.

    ``where`` names the payload's position for error messages, such as
    ``tree.children[2]``.
    """
    name = _required_str(payload, "name", where)
    url = _required_str(payload, "url", where)
    preset_key = _optional_str(payload.get("preset"))

    page: PageNode
    if preset_key is None:
        page = PageNode(name, url)
    else:
        try:
            preset = PRESETS[preset_key]
        except KeyError as exc:
            available = ", ".join(sorted(PRESETS))
            msg = f"Unknown preset '{preset_key}' at {where}. Known presets: {available}"
            raise TreeConfigError(msg) from exc
        page = preset(name, url)

    if "title" in payload:
        page.title(_optional_str(payload["title"]) or "")
    if "description" in payload:
        page.description(_optional_str(payload["description"]) or "")
    if "keywords" in payload:
        page.keywords(_normalize_keywords(payload["keywords"]))
    page.hide(_parse_bool(payload.get("hidden")))

    if isinstance(page, StyleGuide):
        page.init()

    children = payload.get("children") or []
    if not isinstance(children, list):
        msg = f"'children' at {where} must be a list."
        raise TreeConfigError(msg)
    for index, child in enumerate(children):
        child_where = f"{where}.children[{index}]"
        match child:
            case dict():
                page.add(build_page(child, where=child_where))
            case _:
                msg = f"Page at {child_where} must be a mapping."
                raise TreeConfigError(msg)
    return page


__all__ = ["PRESETS", "build_page", "load_tree_config"]
