"""Hierarchical page nodes used to describe the structure of a generated site.

A :class:`PageNode` carries an immutable ``name`` and ``url`` (the page
identifier), mutable metadata (title, description, keywords, visibility), and
an ordered list of child pages. Trees are assembled by attaching children with
:meth:`PageNode.add`; every mutator returns the node so construction reads as
a fluent chain.

Examples
--------
>>> from pagetree.page import PageNode
>>> root = (
...     PageNode("Guide", "/")
...     .title("The Guide")
...     .add(PageNode("Intro", "/intro"))
...     .add(PageNode("Usage", "/usage").add(PageNode("CLI", "/usage/cli")))
... )
>>> root.find("/usage/cli").name
'CLI'
>>> root.find("/missing") is None
True
>>> [page.url for page in root.find_all()]
['/intro', '/usage']

Notes
-----
Nodes hold no parent pointer and perform no locking. URL uniqueness within a
tree is the caller's responsibility; see
:func:`pagetree.config.find_duplicate_urls` for an explicit check.
"""

from __future__ import annotations

import collections.abc as cabc
import copy
import inspect
import typing as typ

_UNSET: typ.Final = object()

Producer = cabc.Callable[["PageNode"], typ.Any]
Criterion = typ.Union["PageNode", str, cabc.Callable[["PageNode"], typ.Any], None]


class PageNode:
    """A page with immutable identity and an ordered list of subpages."""

    __slots__ = ("_children", "_description", "_hidden", "_keywords", "_name", "_title", "_url")

    def __init__(self, name: str | None = None, url: str | None = None) -> None:
        """Create an empty page.

        Parameters
        ----------
        name : str, optional
            Human-readable label of the page.
        url : str, optional
            URL of the page, used as its identifier within a tree.
        """
        self._name = name
        self._url = url
        self._title: typ.Any = ""
        self._description: typ.Any = ""
        self._keywords: typ.Any = []
        self._hidden = False
        self._children: list[PageNode] = []

    @classmethod
    def from_info(cls, info: cabc.Mapping[str, typ.Any] | None = None) -> PageNode:
        """Build a page from a record with ``name`` and ``url`` keys.

        Absent keys leave the corresponding field as ``None``.
        """
        info = info or {}
        return cls(name=info.get("name"), url=info.get("url"))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, url={self._url!r})"

    @property
    def name(self) -> str | None:
        """Return the name given at construction."""
        return self._name

    @property
    def url(self) -> str | None:
        """Return the url given at construction."""
        return self._url

    def _resolve(self, value: typ.Any) -> typ.Any:
        if not callable(value):
            return value
        if _takes_no_arguments(value):
            return value()
        return value(self)

    @typ.overload
    def title(self) -> typ.Any: ...
    @typ.overload
    def title(self, value: typ.Any) -> PageNode: ...

    def title(self, value: typ.Any = _UNSET) -> typ.Any:
        """Set or get the formal title of this page.

        Parameters
        ----------
        value : str or callable, optional
            New title, or a producer whose return value becomes the title.
            Producers taking a positional argument are called with this page,
            others with no arguments. Omit to read the current title.

        Returns
        -------
        PageNode or str
            This page when setting, otherwise the current title.
        """
        if value is _UNSET:
            return self._title
        self._title = self._resolve(value)
        return self

    @typ.overload
    def description(self) -> typ.Any: ...
    @typ.overload
    def description(self, value: typ.Any) -> PageNode: ...

    def description(self, value: typ.Any = _UNSET) -> typ.Any:
        """Set or get the description of this page (see :meth:`title`)."""
        if value is _UNSET:
            return self._description
        self._description = self._resolve(value)
        return self

    @typ.overload
    def keywords(self) -> list[typ.Any]: ...
    @typ.overload
    def keywords(self, value: typ.Any) -> PageNode: ...

    def keywords(self, value: typ.Any = _UNSET) -> typ.Any:
        """Set or get the keywords of this page.

        Reading returns a shallow copy, so mutating the result leaves the
        page untouched. Setting stores the given sequence (or the producer's
        result) as-is.
        """
        if value is _UNSET:
            return copy.copy(self._keywords)
        self._keywords = self._resolve(value)
        return self

    def hide(self, flag: bool = True) -> PageNode:  # noqa: FBT001, FBT002
        """Mark this page hidden (or visible again with ``flag=False``)."""
        self._hidden = flag
        return self

    def is_hidden(self) -> bool:
        """Return whether this page is hidden from navigation."""
        return self._hidden

    def add(self, child: PageNode, index: int | None = None) -> PageNode:
        """Insert ``child`` as a subpage, returning this page.

        Parameters
        ----------
        child : PageNode
            Page to attach as a direct child.
        index : int, optional
            Position to insert at, pushing later subpages back by one. Follows
            list-splice rules: values past the end append, negative values
            count back from the end. ``None`` appends.
        """
        if index is None:
            self._children.append(child)
        else:
            self._children.insert(index, child)
        return self

    def remove(self, criterion: Criterion) -> PageNode:
        """Remove one direct subpage, returning this page.

        ``criterion`` is a page, the url of a descendant, or a producer (see
        :meth:`title`) returning either. Urls are resolved with :meth:`find`,
        so a url that matches only a deeper descendant removes nothing.
        """
        target = self._resolve(criterion)
        if isinstance(target, str):
            target = self.find(target)
        for position, child in enumerate(self._children):
            if child is target:
                del self._children[position]
                break
        return self

    def remove_all(self) -> PageNode:
        """Detach every direct subpage, returning this page."""
        self._children = []
        return self

    def find(self, url: str) -> PageNode | None:
        """Return the descendant with the given url, or ``None``.

        Direct children are all checked before any of them is searched, so a
        shallower match beats a deeper one and earlier siblings win ties.
        """
        for child in self._children:
            if child.url == url:
                return child
        for child in self._children:
            found = child.find(url)
            if found is not None:
                return found
        return None

    def find_all(self) -> list[PageNode]:
        """Return a shallow copy of the direct subpages."""
        return list(self._children)

    def walk(self) -> cabc.Iterator[PageNode]:
        """Yield every descendant in depth-first pre-order."""
        for child in self._children:
            yield child
            yield from child.walk()


_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def _takes_no_arguments(producer: cabc.Callable[..., typ.Any]) -> bool:
    """Return whether ``producer`` accepts no positional argument."""
    try:
        parameters = inspect.signature(producer).parameters.values()
    except (TypeError, ValueError):
        return False
    return not any(param.kind in _POSITIONAL for param in parameters)


__all__ = ["Criterion", "PageNode", "Producer"]
