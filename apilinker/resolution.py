"""Data models for the outcome of resolving one inline-code span."""

from dataclasses import dataclass

from markdown_it.common.utils import escapeHtml

from apilinker.symbol_entry import SymbolEntry

LINKED = "linked"
INSIDE_LINK = "inside_link"
NO_IDENTIFIER = "no_identifier"
IGNORED = "ignored"
UNKNOWN_SYMBOL = "unknown_symbol"
SELF_REFERENCE = "self_reference"


@dataclass(frozen=True)
class ResolvedLink:
    """A link to a symbol's reference page."""

    href: str
    display_text: str

    def to_html(self) -> str:
        """Render as an inline-code styled anchor."""
        return (
            f'<a href="{escapeHtml(self.href)}" class="api-link">'
            f"<code>{escapeHtml(self.display_text)}</code></a>"
        )


@dataclass(frozen=True)
class Resolution:
    """Represents the decision made for one occurrence."""

    outcome: str  # LINKED or a passthrough reason
    link: ResolvedLink | None = None
    entry: SymbolEntry | None = None
    strategy: str = ""

    @property
    def is_passthrough(self) -> bool:
        """Whether the span should be rendered unchanged."""
        return self.link is None
