"""Data models for the page being rendered."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RenderContext:
    """Ambient data for resolving occurrences on one page."""

    relative_path: str  # Site-relative page path, e.g. guide/auth/setup.md
    inside_link: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, Any] | None) -> "RenderContext":
        """Build a context from a markdown-it render env."""
        path = (env or {}).get("relative_path") or ""
        # Site-relative: /guide/a.md and guide/a.md name the same page
        return cls(relative_path=str(path).replace("\\", "/").lstrip("/"))
