"""Load, validate, and write page tree configuration YAML.

This subpackage parses a ``tree.yaml`` file into a :class:`~pagetree.page.PageNode`
hierarchy (optionally seeded from a preset such as the style guide), reports
duplicate urls, and writes trees back out in the same layout. The primary entry
point is :func:`load_tree_config`, which returns a :class:`TreeConfig` ready
for navigation rendering.

Examples
--------
>>> from pathlib import Path
>>> from pagetree.config import load_tree_config
>>> config = load_tree_config(Path("config/tree.yaml"))  # doctest: +SKIP
>>> config.root.find("visual.html").name  # doctest: +SKIP
'Visual Design'
"""

from .helpers import find_duplicate_urls
from .loader import PRESETS, build_page, load_tree_config
from .models import TreeConfig, TreeConfigError
from .writer import dump_tree_config, page_to_mapping

__all__ = [
    "PRESETS",
    "TreeConfig",
    "TreeConfigError",
    "build_page",
    "dump_tree_config",
    "find_duplicate_urls",
    "load_tree_config",
    "page_to_mapping",
]
