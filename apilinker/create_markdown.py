"""Factory for the markdown renderer used on documentation pages."""

from typing import Any

from markdown_it import MarkdownIt

from apilinker.api_linker_plugin import api_linker_plugin
from apilinker.embed_fence_plugin import embed_fence_plugin
from apilinker.highlight_code import highlight_code
from apilinker.ignore_list import build_ignore_set
from apilinker.link_report import LinkReport
from apilinker.symbol_catalog import SymbolCatalog


def create_markdown(
    catalog: SymbolCatalog,
    config: dict[str, Any],
    report: LinkReport | None = None,
) -> MarkdownIt:
    """Build a renderer with highlighting, auto-linking and embeds installed."""
    md = MarkdownIt("commonmark", {"html": True, "highlight": highlight_code})
    md.use(
        api_linker_plugin,
        catalog,
        ignore=build_ignore_set(config["linker"].get("ignore")),
        api_root=config["api"]["root"],
        report=report,
    )
    embed = config["embed"]
    md.use(
        embed_fence_plugin,
        tag=embed["tag"],
        component=embed["component"],
        language=embed["language"],
        modes=tuple(embed.get("modes") or ()),
    )
    return md
