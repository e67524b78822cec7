"""Read-only mapping of symbol names to their reference pages."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from apilinker.symbol_entry import SymbolEntry


class SymbolCatalog:
    """Maps a symbol name to every package that documents it.

    Entries for a name are kept in ascending package order, which is also the
    tie-break order used when a page gives no hint about the package.
    """

    def __init__(
        self, entries: Mapping[str, tuple[SymbolEntry, ...]] | None = None
    ) -> None:
        """Initialize the catalog from a name -> entries mapping."""
        self._entries = MappingProxyType(
            {
                name: tuple(sorted(found, key=lambda e: e.package))
                for name, found in (entries or {}).items()
                if found
            }
        )

    @classmethod
    def from_entries(cls, entries: list[SymbolEntry]) -> "SymbolCatalog":
        """Group a flat list of entries by symbol name."""
        grouped: dict[str, list[SymbolEntry]] = {}
        for entry in entries:
            grouped.setdefault(entry.name, []).append(entry)
        return cls({name: tuple(found) for name, found in grouped.items()})

    def get(self, name: str) -> tuple[SymbolEntry, ...]:
        """Return the entries for a name, or an empty tuple."""
        return self._entries.get(name, ())

    def packages(self) -> list[str]:
        """Return the sorted names of all packages with at least one symbol."""
        return sorted({e.package for found in self._entries.values() for e in found})

    def entry_count(self) -> int:
        """Return the total number of (package, name) pairs."""
        return sum(len(found) for found in self._entries.values())

    def ambiguous_names(self) -> list[str]:
        """Return the names documented in more than one package."""
        return sorted(n for n, found in self._entries.items() if len(found) > 1)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
