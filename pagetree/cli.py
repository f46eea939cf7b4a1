"""Cyclopts CLI entrypoint for page tree lookups, checks, and navigation output.

The ``pages`` console script defined here loads a ``tree.yaml`` definition and
can render its navigation page, look up a page by url, report duplicate urls,
or scaffold a new tree from the style guide preset. Every option can also be
supplied through ``PAGES_*`` environment variables.

Examples
--------
Render navigation for the default configuration:

>>> from pagetree.cli import main
>>> main()  # doctest: +SKIP

Look up a page in a custom tree file:

>>> from pagetree.cli import app
>>> app(["find", "base.html#links", "--config", "site/tree.yaml"])  # doctest: +SKIP
base.html#links: Links
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_PATH, DEFAULT_NAVIGATION_OUTPUT, ENV_PREFIX
from .config import dump_tree_config, find_duplicate_urls, load_tree_config
from .navigation import NavigationBuilder
from .styleguide import StyleGuide

app = App(name="pages", config=cyclopts.config.Env(ENV_PREFIX, command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the navigation page for a page tree.")
def render(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to tree config", env_var="PAGES_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the navigation output file", env_var="PAGES_OUTPUT"),
    ] = None,
) -> None:
    """Render the navigation HTML for the configured tree.

    Parameters
    ----------
    config : Path, optional
        Path to the ``tree.yaml`` configuration file (overridable via
        ``PAGES_CONFIG``).
    output : Path or None, optional
        Override for the configured ``navigation_output`` path.

    Returns
    -------
    None
        Writes the rendered page and prints its path.
    """
    tree_config = load_tree_config(config)
    if output is not None:
        tree_config.navigation_output = output
    written = NavigationBuilder(tree_config).run()
    print(f"wrote {_format_path(written)}")


@app.command(help="Look up a page by url.")
def find(
    url: str,
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to tree config", env_var="PAGES_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
) -> None:
    """Print the page registered under ``url`` or exit with status 1."""
    root = load_tree_config(config).root
    page = root.find(url)
    if page is None:
        print(f"{url}: not found")
        raise SystemExit(1)
    label = page.name
    if page.title():
        label = f"{label} ({page.title()})"
    if page.is_hidden():
        label = f"{label} [hidden]"
    print(f"{url}: {label}")


@app.command(help="Report urls shared by more than one page.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to tree config", env_var="PAGES_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
) -> None:
    """Print duplicated urls with their counts and exit 1 when any exist.

    Strict configs refuse to load with duplicates at all, so this command is
    mainly useful for trees that leave ``strict`` off.
    """
    root = load_tree_config(config).root
    duplicates = find_duplicate_urls(root)
    if not duplicates:
        print("no duplicate urls")
        return
    for url, count in duplicates.items():
        print(f"{url}: {count} pages")
    raise SystemExit(1)


@app.command(help="Write a new tree config seeded with the style guide pages.")
def styleguide(
    *,
    name: typ.Annotated[str, Parameter(help="Name of the style guide")],
    url: typ.Annotated[str, Parameter(help="Url of the style guide landing page")],
    title: typ.Annotated[str, Parameter(help="Formal title of the style guide")] = "",
    description: typ.Annotated[
        str, Parameter(help="Description copied to the landing page")
    ] = "",
    output: typ.Annotated[
        Path, Parameter(help="Where to write the tree config", env_var="PAGES_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
    navigation_output: typ.Annotated[
        Path, Parameter(help="Navigation output recorded in the config")
    ] = DEFAULT_NAVIGATION_OUTPUT,
) -> None:
    """Build the style guide preset and dump it as a tree config file."""
    guide = StyleGuide(name, url).title(title).description(description)
    guide.init()
    written = dump_tree_config(guide, output, navigation_output=navigation_output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pages`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
