"""
Taxonomy construction.

There are two ways to obtain the dimension -> values mapping and they
follow different rules, so each lives in its own function:

``build_from_vocabulary``
    Reads the authoritative tag vocabulary (one expression per line).
    Flat dimensions keep the first occurrence of each value in file
    order. Genre values are appended as they come, duplicates included.

``build_from_items``
    Scans the ``tags`` field of every book. All dimensions, genres
    included, are deduplicated and sorted.

``build_taxonomy`` picks between them.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set

from .schemas import DIMENSIONS, Book, Taxonomy
from .tags import parse_tag, split_tags

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def build_from_vocabulary(lines: Iterable[str]) -> Taxonomy:
    """Build a taxonomy from the authoritative tag vocabulary.

    Parameters
    ----------
    lines : Iterable[str]
        Tag expressions, one per entry. Blank and unparsable lines are
        skipped.

    Returns
    -------
    Taxonomy
        A ``"vocabulary"`` taxonomy. Flat dimensions hold each value once
        in first-seen order; genre lists keep every occurrence.
    """
    dimensions: Dict[str, List[str]] = {d: [] for d in DIMENSIONS}
    for line in lines:
        if not line or not line.strip():
            continue
        record = parse_tag(line)
        if record is None:
            continue
        values = dimensions[record.dimension]
        if record.subtype is not None:
            values.append(record.value)
        elif record.value not in values:
            values.append(record.value)
    return Taxonomy(source="vocabulary", dimensions=dimensions)


def build_from_vocabulary_text(text: Optional[str]) -> Taxonomy:
    """Build a vocabulary taxonomy from newline-delimited text."""
    return build_from_vocabulary((text or "").splitlines())


def build_from_items(items: Iterable[Book]) -> Taxonomy:
    """Build a taxonomy by scanning the ``tags`` field of every book.

    Parameters
    ----------
    items : Iterable[Book]
        The catalog snapshot.

    Returns
    -------
    Taxonomy
        An ``"items"`` taxonomy whose value lists are deduplicated and
        sorted ascending in every dimension.
    """
    found: Dict[str, Set[str]] = {d: set() for d in DIMENSIONS}
    for item in items:
        for tag in split_tags(item.tags):
            record = parse_tag(tag)
            if record is not None:
                found[record.dimension].add(record.value)
    return Taxonomy(
        source="items",
        dimensions={d: sorted(values) for d, values in found.items()},
    )


def build_taxonomy(
    vocabulary: Optional[Sequence[str]], items: Sequence[Book]
) -> Taxonomy:
    """Return the vocabulary taxonomy if it has any values, else scan ``items``."""
    if vocabulary is not None:
        taxonomy = build_from_vocabulary(vocabulary)
        if not taxonomy.is_empty():
            return taxonomy
        logger.info("Tag vocabulary yielded no usable tags, extracting from books")
    return build_from_items(items)
