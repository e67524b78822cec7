"""Render a documentation tree to HTML with API references auto-linked.

Builds the symbol catalog from the generated reference pages once, then renders
every markdown page under the docs directory with the linker and embed plugins.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from apilinker.build_catalog import build_catalog
from apilinker.create_markdown import create_markdown
from apilinker.link_report import LinkReport
from apilinker.load_config import load_config

if TYPE_CHECKING:
    from markdown_it import MarkdownIt

logger = logging.getLogger(__name__)


def render_site(args: argparse.Namespace) -> int:
    """Execute the full rendering pipeline."""
    docs_dir: Path = args.docs_dir
    if not docs_dir.is_dir():
        msg = f"Docs directory not found: {docs_dir}"
        raise SystemExit(msg)

    config = load_config(args.config)
    api = config["api"]
    api_dir = args.api_dir or docs_dir / api["root"].strip("/")
    catalog = build_catalog(
        api_dir,
        api_root=api["root"],
        source_ext=api["source_ext"],
        published_ext=api["published_ext"],
        index_file=api["index_file"],
    )

    report = LinkReport(len(catalog))
    md = create_markdown(catalog, config, report)

    out_root = args.out_dir.resolve()
    written = _render_pages(md, docs_dir, out_root, config, dry_run=args.dry_run)

    if args.report:
        report.generate_report(args.report)
        logger.info("Link report written to %s", args.report)

    if args.dry_run:
        print(f"Dry run complete. Rendered {written} pages.")
    else:
        print(f"Generated {written} pages into: {out_root}")
    return 0


def _source_pages(docs_dir: Path, source_ext: str) -> list[Path]:
    """List markdown pages, skipping hidden directories such as .vitepress."""
    return [
        p
        for p in sorted(docs_dir.rglob(f"*{source_ext}"))
        if not any(part.startswith(".") for part in p.relative_to(docs_dir).parts)
    ]


def _render_pages(
    md: MarkdownIt,
    docs_dir: Path,
    out_root: Path,
    config: dict[str, Any],
    *,
    dry_run: bool,
) -> int:
    """Render all pages, writing them to ``out_root`` unless ``dry_run``."""
    api = config["api"]
    written = 0
    for page in _source_pages(docs_dir, api["source_ext"]):
        rel = page.relative_to(docs_dir).as_posix()
        html = md.render(page.read_text(encoding="utf-8"), {"relative_path": rel})
        written += 1
        if dry_run:
            continue
        out_file = out_root / Path(rel).with_suffix(api["published_ext"])
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(html, encoding="utf-8")
        logger.debug("Rendered %s", rel)
    return written


def main() -> int:
    """Run the rendering process."""
    ap = argparse.ArgumentParser(
        description="Render markdown docs to HTML, auto-linking API references.",
    )
    ap.add_argument(
        "docs_dir",
        type=Path,
        help="Documentation source directory (markdown pages)",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for rendered HTML pages",
    )
    ap.add_argument(
        "--api-dir",
        type=Path,
        help="Reference-page directory (default: <docs_dir>/<api root>)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON report of every link decision to this path",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Render pages without writing files",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log every link decision",
    )
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return render_site(args)


if __name__ == "__main__":
    raise SystemExit(main())
