"""
Parsing of raw tag expressions.

A tag expression is a slash-delimited path: ``dimension/value`` for
the flat dimensions (``temporal``, ``regional``, ``discipline``) and
``genre/<subtype>/value`` for genres, where the subtype splits genres
into fiction and non-fiction. Anything else is ignored rather than
reported, since tag data is hand-written and partially malformed
input should only lose the bad tag.

Two display strings are derived from the same expression and they
differ on purpose:

* the *search value* (``mystery``) is what free-text search and tag
  selection compare against;
* the *chip label* (``fiction/mystery``) is what a book card shows.
"""

from __future__ import annotations

from typing import List, Optional

from .schemas import TagChip, TagRecord

FLAT_DIMENSIONS = {"temporal", "regional", "discipline"}

GENRE_SUBTYPES = {
    "fiction": "genre-fiction",
    "nonfiction": "genre-nonfiction",
    "non-fiction": "genre-nonfiction",
}


def _segments(raw: Optional[str]) -> List[str]:
    return (raw or "").strip().split("/")


def parse_tag(raw: Optional[str]) -> Optional[TagRecord]:
    """Parse one tag expression into a ``TagRecord``.

    Returns ``None`` for expressions with fewer than two segments,
    unknown dimensions, unknown genre subtypes and empty values.
    """
    parts = _segments(raw)
    if len(parts) < 2:
        return None
    key = parts[0].lower()

    if key == "genre" and len(parts) >= 3:
        subtype = parts[1].lower()
        dimension = GENRE_SUBTYPES.get(subtype)
        value = parts[2]
        if dimension is None or not value:
            return None
        return TagRecord(dimension=dimension, value=value, subtype=subtype)

    if key in FLAT_DIMENSIONS and parts[1]:
        return TagRecord(dimension=key, value=parts[1])
    return None


def search_value(raw: Optional[str]) -> Optional[str]:
    """Return the value matched by search and tag selection.

    Genre tags yield their third segment; every other tag with at least
    two segments yields its second, whether or not its dimension is
    recognised.
    """
    parts = _segments(raw)
    if len(parts) >= 3 and parts[0].lower() == "genre":
        return parts[2] or None
    if len(parts) >= 2:
        return parts[1] or None
    return None


def chip_label(raw: Optional[str]) -> Optional[str]:
    """Return the label shown on a tag chip: everything after the dimension."""
    parts = _segments(raw)
    if len(parts) < 2:
        return None
    return "/".join(parts[1:]) or None


def split_tags(tags: Optional[str]) -> List[str]:
    """Split a comma-separated ``tags`` field into trimmed, non-blank tags."""
    if not tags:
        return []
    return [t.strip() for t in tags.split(",") if t.strip()]


def search_values(tags: Optional[str]) -> List[str]:
    """Search values of every tag in a ``tags`` field, in tag order."""
    values: List[str] = []
    for tag in split_tags(tags):
        value = search_value(tag)
        if value:
            values.append(value)
    return values


def tag_chips(tags: Optional[str]) -> List[TagChip]:
    """Chips for every tag in a ``tags`` field that has a label.

    Unrecognised dimensions still get a chip, with ``dimension`` set
    to ``None``.
    """
    chips: List[TagChip] = []
    for tag in split_tags(tags):
        label = chip_label(tag)
        if not label:
            continue
        record = parse_tag(tag)
        chips.append(
            TagChip(label=label, dimension=record.dimension if record else None)
        )
    return chips
