"""Data models for representing documented symbols."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SymbolEntry:
    """Represents one documented symbol's reference page."""

    name: str  # e.g. ModuleScope
    target_path: str  # Site path, e.g. api/core/ModuleScope.html
    package: str
