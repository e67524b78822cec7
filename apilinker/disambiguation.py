"""Strategies for picking one entry when a symbol lives in several packages.

Each strategy is a pure function ``(entries, context) -> SymbolEntry | None``.
They are tried in order until one returns an entry.
"""

import re
from collections.abc import Callable, Sequence

from apilinker.render_context import RenderContext
from apilinker.symbol_entry import SymbolEntry

Strategy = Callable[[Sequence[SymbolEntry], RenderContext], SymbolEntry | None]

PACKAGE_SEPARATOR_RE = re.compile(r"[-_]")
MIN_KEYWORD_LENGTH = 4


def package_in_path(
    entries: Sequence[SymbolEntry], context: RenderContext
) -> SymbolEntry | None:
    """Pick the entry whose package name appears in the page path, if unique."""
    matches = [e for e in entries if e.package in context.relative_path]
    return matches[0] if len(matches) == 1 else None


def package_keyword_in_path(
    entries: Sequence[SymbolEntry], context: RenderContext
) -> SymbolEntry | None:
    """Pick the first entry with a package keyword (4+ chars) in the page path."""
    for entry in entries:
        keywords = PACKAGE_SEPARATOR_RE.split(entry.package)
        if any(
            len(kw) >= MIN_KEYWORD_LENGTH and kw in context.relative_path
            for kw in keywords
        ):
            return entry
    return None


def first_in_catalog_order(
    entries: Sequence[SymbolEntry], context: RenderContext
) -> SymbolEntry | None:
    """Pick the alphabetically first package."""
    return entries[0] if entries else None


DEFAULT_STRATEGIES: tuple[Strategy, ...] = (
    package_in_path,
    package_keyword_in_path,
    first_in_catalog_order,
)


def pick_entry(
    entries: Sequence[SymbolEntry],
    context: RenderContext,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
) -> tuple[SymbolEntry, str]:
    """Return the chosen entry and the name of the strategy that chose it."""
    if len(entries) == 1:
        return entries[0], "single"

    for strategy in strategies:
        chosen = strategy(entries, context)
        if chosen is not None:
            return chosen, strategy.__name__

    # Chain without a catch-all
    return entries[0], first_in_catalog_order.__name__
