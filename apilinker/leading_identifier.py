"""Utility for extracting the symbol name an inline-code span refers to."""

import re

# PascalCase head: Foo in Foo.bar(), Foo<T>, Foo
LEADING_IDENTIFIER_RE = re.compile(r"^([A-Z][A-Za-z0-9]*)")


def leading_identifier(text: str) -> str | None:
    """Return the leading PascalCase identifier of ``text``, if any.

    Lowercase-led text is treated as a local variable or member call.
    """
    m = LEADING_IDENTIFIER_RE.match(text.strip())
    return m.group(1) if m else None
