"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from apilinker.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "api": {
        "root": "api",
        "source_ext": ".md",
        "published_ext": ".html",
        "index_file": "index.md",
    },
    "linker": {
        "ignore": [],
    },
    "embed": {
        "tag": "dartpad",
        "component": "DartPad",
        "language": "dart",
        "modes": ["dart", "flutter"],
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
