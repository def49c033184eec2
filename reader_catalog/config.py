"""
Runtime settings for the catalog service.

Every value has a default suitable for the public library mirrors and
can be overridden through an environment variable of the same name
prefixed with ``READER_``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.environ.get(name)
    if raw is None:
        return list(default)
    return [u.strip() for u in raw.split(",") if u.strip()]


def _env_flag(name: str) -> bool:
    return (os.environ.get(name) or "").strip().lower() in {"1", "true", "yes", "on"}


# Mirrors are tried in order; the first one that answers wins.
CATALOG_URLS: List[str] = _env_list(
    "READER_CATALOG_URLS",
    [
        "https://raw.githubusercontent.com/sparkreaderapp/sparkreader-library/main/catalog/catalog.json",
    ],
)
TAGS_URLS: List[str] = _env_list(
    "READER_TAGS_URLS",
    [
        "https://raw.githubusercontent.com/sparkreaderapp/sparkreader-library/main/catalog/tags.txt",
    ],
)

HTTP_TIMEOUT: float = float(os.environ.get("READER_HTTP_TIMEOUT") or 10)

# Skip the mirrors entirely and serve the bundled sample data.
OFFLINE: bool = _env_flag("READER_OFFLINE")

DATA_DIR = Path(__file__).resolve().parent / "data"
SAMPLE_CATALOG_FILE = DATA_DIR / "sample_catalog.json"
SAMPLE_TAGS_FILE = DATA_DIR / "sample_tags.txt"
