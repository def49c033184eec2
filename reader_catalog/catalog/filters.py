"""
Tag selection state and the catalog filter predicate.

Selection is keyed by the tag *value* alone (``mystery``, not
``genre-fiction/mystery``), so a value that exists in two dimensions
selects books carrying it in either.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Set, Union

from .schemas import Book, TagChip
from .tags import search_values, tag_chips


def _as_values(selected: object) -> List[str]:
    """Selected values as a list; a bare string counts as one value."""
    if not selected:
        return []
    if isinstance(selected, str):
        return [selected]
    return list(selected)


class FilterIndex:
    """The set of currently selected tag values."""

    def __init__(self) -> None:
        self._values: Set[str] = set()

    @classmethod
    def of(cls, values: Optional[Iterable[str]]) -> "FilterIndex":
        index = cls()
        for value in _as_values(values):
            index._values.add(value)
        return index

    def toggle(self, value: str) -> bool:
        """Select ``value`` if absent, deselect it otherwise.

        Returns whether the value is selected after the call.
        """
        if value in self._values:
            self._values.discard(value)
            return False
        self._values.add(value)
        return True

    def clear(self) -> None:
        self._values.clear()

    def has(self, value: str) -> bool:
        return value in self._values

    def size(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"FilterIndex({sorted(self._values)!r})"


Selection = Union[FilterIndex, Iterable[str], None]


def _searchable_text(book: Book, values: List[str]) -> str:
    return " ".join(
        [book.title, book.author, book.description or "", " ".join(values)]
    ).lower()


def matches(book: Book, query: str, selected: Sequence[str]) -> bool:
    """Return whether ``book`` passes both the text and the tag predicate.

    ``query`` must already be lower-cased; ``selected`` values are
    compared case-insensitively and all of them must be present.
    """
    values = search_values(book.tags)
    if query and query not in _searchable_text(book, values):
        return False
    if selected:
        lowered = {v.lower() for v in values}
        for wanted in selected:
            if wanted.lower() not in lowered:
                return False
    return True


def filter_catalog(
    items: Sequence[Book], query: Optional[str], selected: Selection
) -> List[Book]:
    """Return the books matching ``query`` and every selected tag, in input order."""
    nq = (query or "").lower()
    wanted = _as_values(selected)
    return [book for book in items if matches(book, nq, wanted)]


def display_tags(book: Book) -> List[TagChip]:
    """Chips to show on ``book``'s card, in tag order."""
    return tag_chips(book.tags)
