"""
Pydantic schema definitions for the catalog module.

The ``Book`` model mirrors one entry of the raw catalog JSON: a title,
an author, optional description and date, and a single ``tags`` string
holding comma-separated tag expressions such as
``temporal/20th-century`` or ``genre/fiction/mystery``. Books are
frozen once loaded so that filtering can never alter the snapshot.

``Taxonomy`` is the dimension -> values mapping used to render the
selectable filters, and ``BookView``/``CatalogResults`` are the shapes
returned by the ``/api/catalog`` endpoints.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Literal

Dimension = Literal[
    "temporal",
    "regional",
    "discipline",
    "genre-fiction",
    "genre-nonfiction",
]

# Order used when rendering filter groups.
DIMENSIONS: tuple = (
    "temporal",
    "regional",
    "discipline",
    "genre-fiction",
    "genre-nonfiction",
)

TaxonomySource = Literal["vocabulary", "items"]


class Book(BaseModel):
    """A single catalog entry.

    Only ``title`` is required. ``description`` and ``date`` stay
    ``None`` when the source omits them; the filter engine treats them
    as empty strings. Some catalog dumps store the date as a bare year
    number and the tags as a JSON list, so both are normalised to
    strings on the way in.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    author: str = ""
    description: Optional[str] = None
    date: Optional[str] = None
    tags: str = ""

    @field_validator("author", "tags", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, list):
            return ",".join(str(v) for v in value)
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class TagRecord(BaseModel):
    """Structured form of one recognised tag expression."""

    dimension: Dimension
    value: str
    # Lower-cased genre subtype (``fiction``, ``nonfiction`` or
    # ``non-fiction``); ``None`` for non-genre tags.
    subtype: Optional[str] = None


class TagChip(BaseModel):
    """A tag as shown on a book card."""

    label: str
    dimension: Optional[Dimension] = None


class Taxonomy(BaseModel):
    """Known tag values per dimension.

    ``source`` names the construction strategy that produced the
    mapping: ``"vocabulary"`` keeps first-seen order, ``"items"`` is
    sorted. Reading a dimension that is absent yields an empty list.
    """

    source: TaxonomySource
    dimensions: Dict[Dimension, List[str]] = Field(default_factory=dict)

    def values(self, dimension: str) -> List[str]:
        return list(self.dimensions.get(dimension, []))

    def is_empty(self) -> bool:
        return not any(self.dimensions.get(d) for d in DIMENSIONS)


class BookView(BaseModel):
    """A book together with its derived display data."""

    title: str
    author: str = ""
    description: Optional[str] = None
    date: Optional[str] = None
    tags: str = ""
    byline: str = ""
    chips: List[TagChip] = Field(default_factory=list)


class CatalogResults(BaseModel):
    """Response of ``GET /api/catalog/books``."""

    query: str = ""
    selected: List[str] = Field(default_factory=list)
    count: int
    summary: str
    filters_summary: str = ""
    items: List[BookView]


class ParsedTag(BaseModel):
    """Response of ``GET /api/catalog/tags/parse``."""

    raw: str
    record: Optional[TagRecord] = None
    search_value: Optional[str] = None
    chip_label: Optional[str] = None
