"""Logic for turning an inline-code span into a link to its reference page."""

import logging
from collections.abc import Sequence

from apilinker.disambiguation import DEFAULT_STRATEGIES, Strategy, pick_entry
from apilinker.ignore_list import DEFAULT_IGNORE
from apilinker.leading_identifier import leading_identifier
from apilinker.occurrence import Occurrence
from apilinker.relative_url import relative_url
from apilinker.render_context import RenderContext
from apilinker.resolution import (
    IGNORED,
    INSIDE_LINK,
    LINKED,
    NO_IDENTIFIER,
    SELF_REFERENCE,
    UNKNOWN_SYMBOL,
    Resolution,
    ResolvedLink,
)
from apilinker.symbol_catalog import SymbolCatalog

logger = logging.getLogger(__name__)


def resolve_reference(
    occurrence: Occurrence,
    context: RenderContext,
    catalog: SymbolCatalog,
    *,
    ignore: frozenset[str] = DEFAULT_IGNORE,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
    api_root: str = "api",
) -> Resolution:
    """Decide whether an occurrence links to a symbol page.

    Every failed check degrades to a passthrough; nothing here raises for
    unresolved text. The catalog is only read.
    """
    if context.inside_link or occurrence.is_inside_link():
        return Resolution(INSIDE_LINK)

    text = occurrence.content.strip()
    name = leading_identifier(text)
    if name is None:
        return Resolution(NO_IDENTIFIER)

    if name in ignore:
        return Resolution(IGNORED)

    entries = catalog.get(name)
    if not entries:
        return Resolution(UNKNOWN_SYMBOL)

    entry, strategy = pick_entry(entries, context, strategies)

    page = context.relative_path
    if page.startswith(f"{api_root.strip('/')}/{entry.package}/{name}"):
        return Resolution(SELF_REFERENCE, entry=entry, strategy=strategy)

    href = relative_url(page, entry.target_path)
    logger.debug("Linked %r on %s to %s via %s", text, page, href, strategy)
    return Resolution(
        LINKED,
        link=ResolvedLink(href=href, display_text=text),
        entry=entry,
        strategy=strategy,
    )
