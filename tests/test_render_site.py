"""Tests for rendering a documentation tree end to end."""

import argparse
import json
from pathlib import Path

import pytest

from apilinker.render_site import render_site


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Docs tree with two packages sharing ModuleScope and a few guide pages."""
    docs = tmp_path / "docs"
    pages = {
        "api/core/index.md": "# core\n",
        "api/core/ModuleScope.md": "# ModuleScope\n\nSee `Token`.\n",
        "api/auth/ModuleScope.md": "# ModuleScope\n",
        "api/auth/Token.md": "# Token\n\n`Token` is issued by `ModuleScope`.\n",
        "guide/auth/setup.md": "Use `ModuleScope` and a `Widget`.\n",
        "guide/core/setup.md": "Use `ModuleScope`.\n",
        ".vitepress/theme/notes.md": "`Token`\n",
    }
    for rel, text in pages.items():
        path = docs / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return docs


def make_args(docs: Path, out: Path, **kwargs: object) -> argparse.Namespace:
    """Build CLI arguments with defaults."""
    values: dict[str, object] = {
        "docs_dir": docs,
        "out_dir": out,
        "api_dir": None,
        "config": None,
        "report": None,
        "dry_run": False,
    }
    values.update(kwargs)
    return argparse.Namespace(**values)


def test_render_site_links_pages(docs_dir: Path, tmp_path: Path) -> None:
    """Verify that pages are written with context-dependent links."""
    out = tmp_path / "site"
    assert render_site(make_args(docs_dir, out)) == 0

    auth = (out / "guide/auth/setup.html").read_text(encoding="utf-8")
    assert 'href="../../api/auth/ModuleScope.html"' in auth
    assert "<code>Widget</code>" in auth
    assert 'class="api-link"><code>Widget' not in auth

    core = (out / "guide/core/setup.html").read_text(encoding="utf-8")
    assert 'href="../../api/core/ModuleScope.html"' in core

    token = (out / "api/auth/Token.html").read_text(encoding="utf-8")
    assert "<p><code>Token</code> is issued by" in token
    assert 'href="./ModuleScope.html"' in token

    assert not (out / ".vitepress").exists()


def test_render_site_dry_run_with_report(docs_dir: Path, tmp_path: Path) -> None:
    """Verify that a dry run writes only the report."""
    out = tmp_path / "site"
    report = tmp_path / "links.json"
    render_site(make_args(docs_dir, out, dry_run=True, report=str(report)))

    assert not out.exists()
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["meta"]["catalog_size"] == 2
    assert data["stats"]["outcome_counts"]["self_reference"] == 1
    assert data["stats"]["outcome_counts"]["ignored"] == 1


def test_render_site_without_api_dir(tmp_path: Path) -> None:
    """Verify that a docs tree without reference pages still renders."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "index.md").write_text("`ModuleScope`\n", encoding="utf-8")
    out = tmp_path / "site"
    render_site(make_args(docs, out))
    assert (out / "index.html").read_text(encoding="utf-8") == (
        "<p><code>ModuleScope</code></p>\n"
    )


def test_render_site_config_extends_ignore(docs_dir: Path, tmp_path: Path) -> None:
    """Verify that the config file's ignore list suppresses links."""
    config = tmp_path / "apilinker.yml"
    config.write_text("linker:\n  ignore: [ModuleScope]\n", encoding="utf-8")
    out = tmp_path / "site"
    render_site(make_args(docs_dir, out, config=str(config)))
    html = (out / "guide/core/setup.html").read_text(encoding="utf-8")
    assert "api-link" not in html


def test_render_site_missing_docs_dir(tmp_path: Path) -> None:
    """Verify that a missing docs directory aborts with a message."""
    with pytest.raises(SystemExit, match="Docs directory not found"):
        render_site(make_args(tmp_path / "nope", tmp_path / "site"))
