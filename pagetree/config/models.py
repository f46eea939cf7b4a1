"""Typed dataclasses describing page tree configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_NAVIGATION_OUTPUT
from ..page import PageNode


class TreeConfigError(ValueError):
    """Raised when the tree configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class TreeConfig:
    """A loaded page tree alongside the options used to render it."""

    root: PageNode
    navigation_output: Path = DEFAULT_NAVIGATION_OUTPUT
    site_name: str = "Site map"
    strict: bool = False


__all__ = ["TreeConfig", "TreeConfigError"]
