"""markdown-it plugin that auto-links inline code references to API pages.

Transforms ``code_inline`` tokens like `ModuleScope` into links to the
matching reference page:

- Simple references: `ModuleScope` -> api/pkg/ModuleScope.html
- Dotted access: `Modularity.observer` -> api/pkg/Modularity.html
- Generics: `ModuleScope<Auth>` -> api/pkg/ModuleScope.html
- Lowercase text such as `binder.get<T>()` is left alone, as are ignored
  built-in names, spans already inside a link and self-references.
"""

from collections.abc import MutableMapping, Sequence
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.renderer import RendererHTML
from markdown_it.token import Token
from markdown_it.utils import OptionsDict

from apilinker.disambiguation import DEFAULT_STRATEGIES, Strategy
from apilinker.ignore_list import DEFAULT_IGNORE
from apilinker.link_report import LinkReport
from apilinker.occurrence import Occurrence
from apilinker.render_context import RenderContext
from apilinker.resolve_reference import resolve_reference
from apilinker.symbol_catalog import SymbolCatalog


def api_linker_plugin(
    md: MarkdownIt,
    catalog: SymbolCatalog,
    *,
    ignore: frozenset[str] = DEFAULT_IGNORE,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
    api_root: str = "api",
    report: LinkReport | None = None,
) -> None:
    """Install the ``code_inline`` override on ``md``.

    The page path is read from the render env: ``md.render(src,
    {"relative_path": "guide/setup.md"})``.
    """
    default_render = md.renderer.rules.get("code_inline")

    def render_code_inline(
        self: RendererHTML,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: MutableMapping[str, Any],
    ) -> str:
        occurrence = Occurrence(tokens, idx)
        context = RenderContext.from_env(env)
        resolution = resolve_reference(
            occurrence,
            context,
            catalog,
            ignore=ignore,
            strategies=strategies,
            api_root=api_root,
        )
        if report is not None:
            report.add_result(context.relative_path, occurrence.content, resolution)

        if resolution.link is not None:
            return resolution.link.to_html()
        if default_render is None:
            return self.renderToken(tokens, idx, options, env)
        return default_render(tokens, idx, options, env)

    md.add_render_rule("code_inline", render_code_inline)
