"""
Process-wide cache of the loaded catalog.

The first call to ``get_snapshot()`` loads the books and the tag
vocabulary and builds the taxonomy; later calls reuse the result until
``reset_cache()`` is called. The snapshot is read-only: request
handlers filter it but never modify it.

Loading order for the books is the configured mirrors, then the
bundled sample catalog. The vocabulary comes from the mirrors (or the
bundled sample file in offline mode); when it is unavailable the
taxonomy is extracted from the books instead.
"""

from __future__ import annotations

import logging
import threading
from typing import List, NamedTuple, Optional

from .. import config
from .schemas import Book, Taxonomy
from .sources import (
    fetch_catalog,
    fetch_vocabulary,
    load_local_catalog,
    load_local_vocabulary,
)
from .taxonomy import build_taxonomy

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class CatalogSnapshot(NamedTuple):
    books: List[Book]
    taxonomy: Taxonomy


_snapshot: Optional[CatalogSnapshot] = None
_lock = threading.Lock()


def _load_books() -> List[Book]:
    books = None if config.OFFLINE else fetch_catalog(config.CATALOG_URLS)
    if books is None:
        logger.info("Using bundled catalog %s", config.SAMPLE_CATALOG_FILE)
        books = load_local_catalog(config.SAMPLE_CATALOG_FILE)
    return books


def _load_vocabulary() -> Optional[List[str]]:
    if config.OFFLINE:
        return load_local_vocabulary(config.SAMPLE_TAGS_FILE)
    return fetch_vocabulary(config.TAGS_URLS)


def load_snapshot() -> CatalogSnapshot:
    """Load books and vocabulary and build a fresh snapshot (uncached)."""
    books = _load_books()
    taxonomy = build_taxonomy(_load_vocabulary(), books)
    logger.info(
        "Catalog ready: %d books, taxonomy from %s", len(books), taxonomy.source
    )
    return CatalogSnapshot(books=books, taxonomy=taxonomy)


def get_snapshot() -> CatalogSnapshot:
    global _snapshot
    with _lock:
        if _snapshot is None:
            _snapshot = load_snapshot()
        return _snapshot


def get_books() -> List[Book]:
    return get_snapshot().books


def get_taxonomy() -> Taxonomy:
    return get_snapshot().taxonomy


def reset_cache() -> None:
    global _snapshot
    with _lock:
        _snapshot = None
