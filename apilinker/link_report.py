"""Logic for generating reports on inline-code link resolution."""

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from apilinker.resolution import LINKED, Resolution


@dataclass(frozen=True)
class ReportRow:
    """One resolved occurrence as it appears in the report."""

    page: str
    text: str
    outcome: str
    strategy: str
    target: str | None  # Site path of the linked reference page


class LinkReport:
    """Collects and summarizes resolution decisions across a build."""

    def __init__(self, catalog_size: int) -> None:
        """Initialize the report with the catalog's symbol count."""
        self.catalog_size = catalog_size
        self.rows: list[ReportRow] = []
        self.start_time = time.time()

    def add_result(self, page: str, text: str, resolution: Resolution) -> None:
        """Record the decision made for a single occurrence."""
        linked = resolution.outcome == LINKED and resolution.entry is not None
        self.rows.append(
            ReportRow(
                page=page,
                text=text,
                outcome=resolution.outcome,
                strategy=resolution.strategy,
                target=resolution.entry.target_path if linked else None,
            )
        )

    def generate_report(self, path: str | Path) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "catalog_size": self.catalog_size,
                "total_occurrences": len(self.rows),
            },
            "results": [
                {
                    "page": r.page,
                    "text": r.text,
                    "outcome": r.outcome,
                    "strategy": r.strategy,
                    "target": r.target,
                }
                for r in self.rows
            ],
            "stats": self.compute_stats(),
        }
        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def compute_stats(self) -> dict[str, Any]:
        """Count occurrences per outcome, per winning strategy and per target."""
        outcome_counts: dict[str, int] = {}
        strategy_counts: dict[str, int] = {}
        target_counts: dict[str, int] = {}

        for r in self.rows:
            outcome_counts[r.outcome] = outcome_counts.get(r.outcome, 0) + 1
            if r.target:
                strategy_counts[r.strategy] = strategy_counts.get(r.strategy, 0) + 1
                target_counts[r.target] = target_counts.get(r.target, 0) + 1

        linked = outcome_counts.get(LINKED, 0)
        ambiguous = linked - strategy_counts.get("single", 0)
        return {
            "outcome_counts": outcome_counts,
            "strategy_counts": strategy_counts,
            "target_counts": target_counts,
            "metrics": {
                "link_rate": (linked / len(self.rows)) if self.rows else 0,
                "ambiguous_share": (ambiguous / linked) if linked else 0,
            },
        }
