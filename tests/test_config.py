"""Tests for loading and writing page tree configuration files."""

from __future__ import annotations

import logging
from pathlib import Path
from textwrap import dedent

import pytest
from ruamel.yaml import YAML

from pagetree.config import (
    TreeConfigError,
    build_page,
    dump_tree_config,
    find_duplicate_urls,
    load_tree_config,
)
from pagetree.page import PageNode
from pagetree.styleguide import StyleGuide


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "tree.yaml"
    path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
    return path


def test_load_builds_nested_tree(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        defaults:
          navigation_output: out/nav.html
        tree:
          name: Docs
          url: /
          title: Documentation
          keywords: guide reference
          children:
            - name: Intro
              url: /intro
              description: "  Start here.  "
            - name: Internal
              url: /internal
              hidden: yes
              children:
                - name: Notes
                  url: /internal/notes
        """,
    )
    config = load_tree_config(path)
    root = config.root
    assert root.title() == "Documentation"
    assert root.keywords() == ["guide", "reference"]
    assert [page.url for page in root.find_all()] == ["/intro", "/internal"]
    assert root.find("/intro").description() == "Start here."
    assert root.find("/internal").is_hidden() is True
    assert root.find("/internal/notes").name == "Notes"
    assert config.navigation_output == Path("out/nav.html")
    assert config.site_name == "Documentation"
    assert config.strict is False


def test_load_applies_styleguide_preset(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        tree:
          name: Example Style Guide
          url: //example.com/style-guide/
          preset: styleguide
          description: Shared styles.
          children:
            - name: Changelog
              url: changelog.html
        """,
    )
    root = load_tree_config(path).root
    assert isinstance(root, StyleGuide)
    assert root.find("index.html").description() == "Shared styles."
    assert root.find_all()[-1].url == "changelog.html"
    assert root.find("base.html#stress").name == "Stress"


def test_sample_config_loads() -> None:
    path = Path(__file__).resolve().parents[1] / "config" / "tree.yaml"
    config = load_tree_config(path)
    assert config.strict is True
    assert config.root.find("drafts.html#dark-mode") is not None


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_tree_config(tmp_path / "absent.yaml")


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path, "- just\n- a list")
    with pytest.raises(TypeError):
        load_tree_config(path)


def test_missing_tree_raises(tmp_path: Path) -> None:
    path = _write(tmp_path, "defaults: {}")
    with pytest.raises(TreeConfigError, match="No tree"):
        load_tree_config(path)


def test_missing_url_names_location(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        tree:
          name: Root
          url: /
          children:
            - name: Ok
              url: /ok
            - name: Broken
        """,
    )
    with pytest.raises(TreeConfigError, match=r"tree\.children\[1\] is missing 'url'"):
        load_tree_config(path)


def test_unknown_preset_raises() -> None:
    with pytest.raises(TreeConfigError, match="Unknown preset 'blog'"):
        build_page({"name": "Root", "url": "/", "preset": "blog"})


def test_children_must_be_a_list() -> None:
    with pytest.raises(TreeConfigError, match="must be a list"):
        build_page({"name": "Root", "url": "/", "children": {"name": "x"}})


def test_duplicates_warn_when_not_strict(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = _write(
        tmp_path,
        """
        tree:
          name: Root
          url: /
          children:
            - {name: One, url: /dup}
            - {name: Two, url: /dup}
        """,
    )
    with caplog.at_level(logging.WARNING, logger="pagetree.config.loader"):
        config = load_tree_config(path)
    assert config.root.find("/dup").name == "One"
    assert "/dup (x2)" in caplog.text


def test_duplicates_rejected_when_strict(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        defaults:
          strict: true
        tree:
          name: Root
          url: /
          children:
            - {name: Nested, url: /a, children: [{name: Back, url: /}]}
        """,
    )
    with pytest.raises(TreeConfigError, match=r"Duplicate page urls .*: / \(x2\)"):
        load_tree_config(path)


def test_find_duplicate_urls_counts_root_and_descendants() -> None:
    root = (
        PageNode("Root", "/")
        .add(PageNode("A", "/a").add(PageNode("A again", "/a")))
        .add(PageNode("B", "/b"))
        .add(PageNode("A third", "/a"))
    )
    assert find_duplicate_urls(root) == {"/a": 3}
    assert find_duplicate_urls(PageNode("Solo", "/")) == {}


def test_dump_writes_only_non_default_fields(tmp_path: Path) -> None:
    root = (
        PageNode("Root", "/")
        .title("Home")
        .add(PageNode("Secret", "/secret").hide().keywords(["x"]))
    )
    path = dump_tree_config(
        root, tmp_path / "nested" / "tree.yaml", navigation_output=Path("site/nav.html")
    )
    data = YAML(typ="safe").load(path.read_text(encoding="utf-8"))
    assert data == {
        "defaults": {"navigation_output": "site/nav.html"},
        "tree": {
            "name": "Root",
            "url": "/",
            "title": "Home",
            "children": [
                {"name": "Secret", "url": "/secret", "keywords": ["x"], "hidden": True}
            ],
        },
    }


def test_dumped_styleguide_reloads_as_plain_pages(tmp_path: Path) -> None:
    guide = StyleGuide("Guide", "/guide/").description("Styles.").init()
    path = dump_tree_config(guide, tmp_path / "tree.yaml")
    root = load_tree_config(path).root
    assert type(root) is PageNode
    assert [page.url for page in root.walk()] == [page.url for page in guide.walk()]
    assert root.find("index.html").description() == "Styles."


def test_keywords_drop_blanks_and_case_insensitive_repeats() -> None:
    page = build_page(
        {"name": "Root", "url": "/", "keywords": ["CSS", " ", "css", "Grid", "grid ", 3]}
    )
    assert page.keywords() == ["CSS", "Grid", "3"]
    spaced = build_page({"name": "Root", "url": "/", "keywords": "a  b A"})
    assert spaced.keywords() == ["a", "b"]


def test_dump_keeps_string_keywords_whole(tmp_path: Path) -> None:
    root = PageNode("Root", "/").keywords("css grid")
    path = dump_tree_config(root, tmp_path / "tree.yaml")
    assert load_tree_config(path).root.keywords() == ["css", "grid"]
