"""
Retrieval of the raw catalog and tag vocabulary.

The catalog is a JSON array of book records and the vocabulary is a
plain text file with one tag expression per line. Both are published
on one or more mirrors; each fetch walks the mirror list in order and
returns the first successful answer. Only the Python standard library
is used for HTTP requests. Failures are logged and reported as
``None`` so that the store can fall back to bundled data or to a
taxonomy derived from the books themselves.
"""

from __future__ import annotations

import http.client
import json
import logging
import urllib.request
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import ValidationError

from .. import config
from .schemas import Book


logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

# A mirror failing in any of these ways is skipped in favour of the next one.
FETCH_ERRORS = (OSError, ValueError, http.client.HTTPException)


def _http_get(url: str) -> bytes:
    """Perform an HTTP GET and return the body.

    Raises on network errors and on non-200 responses; callers decide
    whether to try the next mirror.
    """
    request = urllib.request.Request(
        url,
        headers={
            'User-Agent': 'reader-catalog/1.0 (+https://github.com/sparkreaderapp)',
            'Accept': 'application/json, text/plain;q=0.9, */*;q=0.5',
        },
    )
    with urllib.request.urlopen(request, timeout=config.HTTP_TIMEOUT) as response:
        if response.status != 200:
            raise OSError(f"HTTP {response.status}: {response.reason}")
        return response.read()


def parse_catalog(raw: object) -> List[Book]:
    """Convert decoded catalog JSON into ``Book`` instances.

    Entries that are not objects or fail validation are skipped.
    """
    if not isinstance(raw, list):
        raise ValueError("catalog JSON must be a list of books")
    books: List[Book] = []
    for position, entry in enumerate(raw):
        if not isinstance(entry, dict):
            logger.warning("Skipping catalog entry %d: not an object", position)
            continue
        try:
            books.append(Book.model_validate(entry))
        except ValidationError as exc:
            logger.warning(
                "Skipping catalog entry %d: %s", position, exc.errors()[0].get("msg")
            )
    return books


def parse_vocabulary(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def fetch_catalog(urls: Iterable[str]) -> Optional[List[Book]]:
    """Fetch the catalog from the first mirror that answers.

    Parameters
    ----------
    urls : Iterable[str]
        Mirror URLs, tried in order.

    Returns
    -------
    Optional[List[Book]]
        The validated books, or ``None`` when every mirror failed.
    """
    for url in urls:
        try:
            logger.info("Attempting to load catalog from: %s", url)
            raw = json.loads(_http_get(url).decode("utf-8"))
            books = parse_catalog(raw)
        except FETCH_ERRORS as exc:
            logger.warning("Failed to load catalog from %s: %s", url, exc)
            continue
        logger.info("Successfully loaded %d books from catalog", len(books))
        return books
    logger.error("Failed to load catalog from all sources")
    return None


def fetch_vocabulary(urls: Iterable[str]) -> Optional[List[str]]:
    """Fetch the tag vocabulary from the first mirror that answers.

    Parameters
    ----------
    urls : Iterable[str]
        Mirror URLs, tried in order.

    Returns
    -------
    Optional[List[str]]
        Non-blank, trimmed tag expressions in file order, or ``None``
        when every mirror failed.
    """
    for url in urls:
        try:
            logger.info("Attempting to load tags from: %s", url)
            text = _http_get(url).decode("utf-8", errors="replace")
        except FETCH_ERRORS as exc:
            logger.warning("Failed to load tags from %s: %s", url, exc)
            continue
        logger.info("Successfully loaded tags from %s", url)
        return parse_vocabulary(text)
    logger.warning("Failed to load tags from all sources")
    return None


def load_local_catalog(path: Path) -> List[Book]:
    """Load the bundled catalog, or an empty list if it is missing or broken."""
    try:
        with path.open("r", encoding="utf-8") as f:
            return parse_catalog(json.load(f))
    except (OSError, ValueError) as exc:
        logger.error("Could not read local catalog %s: %s", path, exc)
        return []


def load_local_vocabulary(path: Path) -> Optional[List[str]]:
    try:
        return parse_vocabulary(path.read_text(encoding="utf-8"))
    except OSError as exc:
        logger.warning("Could not read local tags %s: %s", path, exc)
        return None
