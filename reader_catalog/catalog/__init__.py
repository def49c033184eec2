"""
Catalog package for the reader library.

Books carry hierarchical tags such as ``temporal/20th-century`` or
``genre/fiction/mystery``. This package parses those tags into a
dimensioned taxonomy, filters the catalog by free-text search combined
with AND tag selection, and exposes the result through a small REST
router. The pure pieces (``tags``, ``taxonomy``, ``filters``,
``stats``, ``engine``) have no I/O; ``sources`` and ``store`` handle
loading the data.
"""

from .engine import EngineState  # noqa: F401
from .filters import FilterIndex, display_tags, filter_catalog  # noqa: F401
from .router import router as catalog_router  # noqa: F401
from .stats import describe_active_filters, describe_results  # noqa: F401
from .taxonomy import (  # noqa: F401
    build_from_items,
    build_from_vocabulary,
    build_from_vocabulary_text,
    build_taxonomy,
)
