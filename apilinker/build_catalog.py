"""Logic for scanning a reference-page tree into a symbol catalog."""

import logging
from pathlib import Path

from apilinker.symbol_catalog import SymbolCatalog
from apilinker.symbol_entry import SymbolEntry

logger = logging.getLogger(__name__)


def build_catalog(
    reference_dir: Path | str,
    *,
    api_root: str = "api",
    source_ext: str = ".md",
    published_ext: str = ".html",
    index_file: str = "index.md",
) -> SymbolCatalog:
    """Build the symbol catalog from ``<reference_dir>/<package>/<Name><source_ext>``.

    A missing directory yields an empty catalog, which turns auto-linking into
    a no-op instead of failing the build.
    """
    root = Path(reference_dir)
    if not root.is_dir():
        logger.info("Reference directory %s not found; auto-linking disabled", root)
        return SymbolCatalog()

    try:
        pkg_dirs = _package_dirs(root)
    except OSError:
        logger.warning(
            "Could not read reference directory %s; auto-linking disabled", root
        )
        return SymbolCatalog()

    api_root = api_root.strip("/")
    entries: list[SymbolEntry] = []
    for pkg_dir in pkg_dirs:
        entries.extend(
            _package_entries(pkg_dir, api_root, source_ext, published_ext, index_file)
        )

    catalog = SymbolCatalog.from_entries(entries)
    logger.info(
        "Catalog built: %d symbols across %d packages",
        len(catalog),
        len(catalog.packages()),
    )
    for name in catalog.ambiguous_names():
        logger.debug(
            "Symbol %s is documented in: %s",
            name,
            ", ".join(e.package for e in catalog.get(name)),
        )
    return catalog


def _package_dirs(root: Path) -> list[Path]:
    """Return the immediate package directories, sorted by name."""
    return sorted(
        (p for p in root.iterdir() if p.is_dir() and not p.name.startswith(".")),
        key=lambda p: p.name,
    )


def _package_entries(
    pkg_dir: Path,
    api_root: str,
    source_ext: str,
    published_ext: str,
    index_file: str,
) -> list[SymbolEntry]:
    """Collect one entry per reference page in a package, skipping its index."""
    package = pkg_dir.name
    try:
        files = sorted(pkg_dir.iterdir())
    except OSError:
        logger.warning("Could not read package directory %s; skipping", pkg_dir)
        return []

    entries = []
    for f in files:
        if not f.is_file() or f.suffix != source_ext or f.name == index_file:
            continue
        name = f.name[: -len(source_ext)]
        target_path = f"{api_root}/{package}/{name}{published_ext}"
        entries.append(SymbolEntry(name=name, target_path=target_path, package=package))
    return entries
