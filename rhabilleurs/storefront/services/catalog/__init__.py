"""
Catalog services: static records, the read-only store and the filter engine.
"""

from .filters import (
    FilterCriteria,
    SortKey,
    apply_filters,
    parse_price_bound,
)
from .records import (
    Condition,
    GalleryCase,
    MovementType,
    RepairType,
    WatchListing,
)
from .store import CatalogStore, get_catalog

__all__ = [
    "FilterCriteria",
    "SortKey",
    "apply_filters",
    "parse_price_bound",
    "Condition",
    "GalleryCase",
    "MovementType",
    "RepairType",
    "WatchListing",
    "CatalogStore",
    "get_catalog",
]
