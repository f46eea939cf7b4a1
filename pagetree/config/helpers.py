"""Utility helpers shared by the page tree configuration loader."""

from __future__ import annotations

import collections
import typing as typ

from .models import TreeConfigError

if typ.TYPE_CHECKING:
    from ..page import PageNode


def _normalize_keywords(value: str | list[object] | None) -> list[str]:
    """Return keywords in first-seen order, dropping blanks and repeats.

    A string is split on whitespace. Repeats are detected case-insensitively
    and the first spelling is kept.
    """
    match value:
        case str():
            candidates: list[object] = list(value.split())
        case list():
            candidates = value
        case _:
            return []
    seen: set[str] = set()
    keywords: list[str] = []
    for candidate in candidates:
        keyword = str(candidate).strip()
        if not keyword or keyword.casefold() in seen:
            continue
        seen.add(keyword.casefold())
        keywords.append(keyword)
    return keywords


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _required_str(payload: typ.Mapping[str, typ.Any], key: str, where: str) -> str:
    """Return ``payload[key]`` as a non-empty string or raise TreeConfigError."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"Page at {where} is missing '{key}'."
        raise TreeConfigError(msg)
    return value


def _parse_bool(value: object | None, *, default: bool = False) -> bool:
    """Interpret YAML-ish truthy strings alongside real booleans."""
    match value:
        case None:
            return default
        case bool():
            return value
        case str() as text:
            return text.strip().lower() in {"1", "true", "yes", "on"}
        case _:
            return bool(value)


def find_duplicate_urls(root: PageNode) -> dict[str, int]:
    """Return the urls that occur more than once in ``root``'s tree.

    The root itself is included. The mapping is ordered by first occurrence and
    maps each duplicated url to its number of occurrences.
    """
    counts: collections.Counter[str | None] = collections.Counter([root.url])
    counts.update(page.url for page in root.walk())
    return {
        url: count
        for url, count in counts.items()
        if count > 1 and url is not None
    }


__all__ = [
    "_normalize_keywords",
    "_optional_str",
    "_parse_bool",
    "_required_str",
    "find_duplicate_urls",
]
