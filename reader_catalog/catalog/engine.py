"""
Explicit session state for interactive filtering.

An ``EngineState`` bundles the book snapshot, the search query, the
selected tag values and the taxonomy. Callers own the instance and
every mutation is followed by a full recomputation through
``results()``; nothing is cached between calls and nothing is shared
between instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .filters import FilterIndex, filter_catalog
from .schemas import Book, Taxonomy
from .stats import describe_active_filters, describe_results
from .taxonomy import build_taxonomy


@dataclass
class EngineState:
    items: List[Book]
    taxonomy: Taxonomy
    query: str = ""
    selected: FilterIndex = field(default_factory=FilterIndex)

    @classmethod
    def from_sources(
        cls, items: Sequence[Book], vocabulary: Optional[Sequence[str]] = None
    ) -> "EngineState":
        books = list(items)
        return cls(items=books, taxonomy=build_taxonomy(vocabulary, books))

    def set_query(self, text: Optional[str]) -> None:
        self.query = (text or "").lower()

    def clear_query(self) -> None:
        self.query = ""

    def toggle_tag(self, value: str) -> bool:
        return self.selected.toggle(value)

    def clear_filters(self) -> None:
        self.selected.clear()

    def results(self) -> List[Book]:
        return filter_catalog(self.items, self.query, self.selected)

    def summary(self) -> str:
        return describe_results(self.results())

    def filters_summary(self) -> str:
        return describe_active_filters(self.selected)
