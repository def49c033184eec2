"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET  /books          : books matching a text query and all selected tags
- GET  /taxonomy       : selectable tag values per dimension
- GET  /tags/parse     : how a single tag expression is interpreted
- GET  /debug/source   : what was loaded and from where
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from . import store
from .filters import FilterIndex, display_tags, filter_catalog
from .schemas import Book, BookView, CatalogResults, ParsedTag, Taxonomy
from .stats import describe_active_filters, describe_results
from .tags import chip_label, parse_tag, search_value

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def _byline(book: Book) -> str:
    byline = f"by {book.author}"
    if book.date:
        byline += f" ({book.date})"
    return byline


def _to_view(book: Book) -> BookView:
    return BookView(
        title=book.title,
        author=book.author,
        description=book.description,
        date=book.date,
        tags=book.tags,
        byline=_byline(book),
        chips=display_tags(book),
    )


@router.get("/books", response_model=CatalogResults)
def list_books(
    q: Optional[str] = Query(default=None, description="Text search (title, author, description, tags)"),
    tag: Optional[List[str]] = Query(default=None, description="Selected tag value; repeat for AND"),
) -> CatalogResults:
    """
    Returns every book matching the query and carrying all selected tags.

    The selection is rebuilt from the request on every call, so nothing
    is remembered between requests.
    """
    selected = FilterIndex.of(tag)
    query = (q or "").lower()
    results = filter_catalog(store.get_books(), query, selected)
    return CatalogResults(
        query=query,
        selected=sorted(selected),
        count=len(results),
        summary=describe_results(results),
        filters_summary=describe_active_filters(selected),
        items=[_to_view(b) for b in results],
    )


@router.get("/taxonomy", response_model=Taxonomy)
def get_taxonomy() -> Taxonomy:
    return store.get_taxonomy()


@router.get("/tags/parse", response_model=ParsedTag)
def parse_tag_expression(
    raw: str = Query(..., description="Tag expression, e.g. genre/fiction/mystery"),
) -> ParsedTag:
    if not raw.strip():
        raise HTTPException(status_code=400, detail="Empty tag expression")
    return ParsedTag(
        raw=raw,
        record=parse_tag(raw),
        search_value=search_value(raw),
        chip_label=chip_label(raw),
    )


@router.get("/debug/source")
def debug_source():
    """
    Debug endpoint to verify which data was loaded.
    Visit: http://127.0.0.1:8000/api/catalog/debug/source
    """
    snapshot = store.get_snapshot()
    return {
        "count": len(snapshot.books),
        "taxonomy_source": snapshot.taxonomy.source,
        "sample": [b.title for b in snapshot.books[:5]],
    }
