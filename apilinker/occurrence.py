"""Data models for an inline-code span within a token stream."""

from collections.abc import Sequence
from dataclasses import dataclass

from markdown_it.token import Token


@dataclass(frozen=True)
class Occurrence:
    """An inline-code token and the sibling tokens around it."""

    tokens: Sequence[Token]
    index: int

    @property
    def content(self) -> str:
        """Return the span's literal text."""
        return self.tokens[self.index].content

    def is_inside_link(self) -> bool:
        """Check whether the span is the first content of an open link.

        Walks backward over whitespace-only text. Any other token ends the
        walk, so ``[see `Foo`](x)`` is not detected while ``[`Foo`](x)`` is.
        """
        for token in reversed(self.tokens[: self.index]):
            if token.type == "link_open":
                return True
            if token.type == "text" and not token.content.strip():
                continue
            return False
        return False
