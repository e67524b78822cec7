"""Tests for resolving inline code spans to reference links."""

from pathlib import Path

import pytest
from markdown_it import MarkdownIt

from apilinker.build_catalog import build_catalog
from apilinker.ignore_list import DEFAULT_IGNORE
from apilinker.occurrence import Occurrence
from apilinker.render_context import RenderContext
from apilinker.resolve_reference import resolve_reference
from apilinker.symbol_catalog import SymbolCatalog
from apilinker.symbol_entry import SymbolEntry


@pytest.fixture
def catalog(tmp_path: Path) -> SymbolCatalog:
    """Catalog with ModuleScope in core and auth, and Token in auth only."""
    pages = {"core": ["ModuleScope"], "auth": ["ModuleScope", "Token"]}
    for package, names in pages.items():
        pkg = tmp_path / "api" / package
        pkg.mkdir(parents=True)
        (pkg / "index.md").write_text("# index\n", encoding="utf-8")
        for name in names:
            (pkg / f"{name}.md").write_text(f"# {name}\n", encoding="utf-8")
    return build_catalog(tmp_path / "api")


def occurrence_of(src: str) -> Occurrence:
    """Parse inline markdown and point at its first code span."""
    tokens = MarkdownIt().parseInline(src)[0].children or []
    idx = next(i for i, t in enumerate(tokens) if t.type == "code_inline")
    return Occurrence(tokens, idx)


def resolve(src: str, page: str, catalog: SymbolCatalog) -> str | None:
    """Resolve the first code span of ``src`` on ``page`` and return its href."""
    res = resolve_reference(occurrence_of(src), RenderContext(page), catalog)
    return res.link.href if res.link else None


def test_ambiguous_symbol_follows_page_package(catalog: SymbolCatalog) -> None:
    """Verify that the page's package picks the matching definition."""
    assert (
        resolve("`ModuleScope`", "guide/auth/setup.md", catalog)
        == "../../api/auth/ModuleScope.html"
    )
    assert (
        resolve("`ModuleScope`", "guide/core/setup.md", catalog)
        == "../../api/core/ModuleScope.html"
    )


def test_ambiguous_symbol_without_hint(catalog: SymbolCatalog) -> None:
    """Verify that the alphabetically first package is the fallback."""
    assert resolve("`ModuleScope`", "guide/intro.md", catalog) == (
        "../api/auth/ModuleScope.html"
    )


def test_ignored_name_passes_through(catalog: SymbolCatalog) -> None:
    """Verify that built-in names never link."""
    res = resolve_reference(
        occurrence_of("`Widget`"), RenderContext("guide/x.md"), catalog
    )
    assert res.is_passthrough
    assert res.outcome == "ignored"


def test_self_reference_passes_through(catalog: SymbolCatalog) -> None:
    """Verify that a symbol's own page does not link to itself."""
    res = resolve_reference(
        occurrence_of("`Token`"), RenderContext("api/auth/Token.md"), catalog
    )
    assert res.is_passthrough
    assert res.outcome == "self_reference"
    assert resolve("`ModuleScope`", "api/core/ModuleScope.md", catalog) is None


def test_other_symbol_on_api_page_links(catalog: SymbolCatalog) -> None:
    """Verify that other symbols still link from a reference page."""
    assert resolve("`Token`", "api/auth/ModuleScope.md", catalog) == "./Token.html"


def test_generic_and_dotted_match_bare_name(catalog: SymbolCatalog) -> None:
    """Verify that generics and member access resolve like the bare name."""
    page = "guide/auth/setup.md"
    bare = resolve("`ModuleScope`", page, catalog)
    assert resolve("`ModuleScope<Auth>`", page, catalog) == bare
    assert resolve("`ModuleScope.of(context)`", page, catalog) == bare
    assert resolve("`Unknown<T>`", page, catalog) is None


def test_display_text_keeps_original(catalog: SymbolCatalog) -> None:
    """Verify that the link shows the full trimmed span text."""
    res = resolve_reference(
        occurrence_of("` ModuleScope<Auth> `"), RenderContext("guide/a.md"), catalog
    )
    assert res.link is not None
    assert res.link.display_text == "ModuleScope<Auth>"
    assert "<code>ModuleScope&lt;Auth&gt;</code>" in res.link.to_html()


@pytest.mark.parametrize(
    ("src", "outcome"),
    [
        ("`binder.get<T>()`", "no_identifier"),
        ("`Missing`", "unknown_symbol"),
        ("[`ModuleScope`](elsewhere.html)", "inside_link"),
    ],
)
def test_passthrough_reasons(src: str, outcome: str, catalog: SymbolCatalog) -> None:
    """Verify the passthrough outcome for each failed check."""
    res = resolve_reference(occurrence_of(src), RenderContext("guide/a.md"), catalog)
    assert res.is_passthrough
    assert res.outcome == outcome


def test_context_inside_link_flag(catalog: SymbolCatalog) -> None:
    """Verify that the context flag also suppresses linking."""
    res = resolve_reference(
        occurrence_of("`Token`"), RenderContext("guide/a.md", inside_link=True), catalog
    )
    assert res.outcome == "inside_link"


def test_idempotent(catalog: SymbolCatalog) -> None:
    """Verify that repeated resolution gives identical results."""
    occ = occurrence_of("`ModuleScope`")
    ctx = RenderContext("guide/core/setup.md")
    assert resolve_reference(occ, ctx, catalog) == resolve_reference(occ, ctx, catalog)


def test_every_ignored_name_passes_through() -> None:
    """Verify that ignore-listed names pass through even when documented."""
    catalog = SymbolCatalog.from_entries(
        [SymbolEntry(n, f"api/core/{n}.html", "core") for n in DEFAULT_IGNORE]
    )
    ctx = RenderContext("guide/a.md")
    for name in DEFAULT_IGNORE:
        res = resolve_reference(occurrence_of(f"`{name}`"), ctx, catalog)
        assert res.is_passthrough, name


def test_empty_catalog_is_noop() -> None:
    """Verify that nothing links with an empty catalog."""
    res = resolve_reference(
        occurrence_of("`ModuleScope`"), RenderContext("guide/a.md"), SymbolCatalog()
    )
    assert res.outcome == "unknown_symbol"
