"""
Read-only access to the static catalog.
"""
from __future__ import annotations

import logging
from collections import Counter
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

from .records import GalleryCase, RepairType, WatchListing

logger = logging.getLogger(__name__)


def _ensure_unique_ids(records: Iterable, kind: str) -> None:
    seen = set()
    for record in records:
        if record.id in seen:
            raise ValueError(f"Duplicate {kind} id: {record.id!r}")
        seen.add(record.id)


class CatalogStore:
    """
    Immutable in-memory catalog shared by every request.

    Watches and gallery cases keep the order they were declared in; that order
    is the "input order" the filter engine preserves on ties.
    """

    def __init__(self, watches: Iterable[WatchListing] = (), gallery: Iterable[GalleryCase] = ()) -> None:
        self._watches: Tuple[WatchListing, ...] = tuple(watches)
        self._gallery: Tuple[GalleryCase, ...] = tuple(gallery)
        _ensure_unique_ids(self._watches, 'watch')
        _ensure_unique_ids(self._gallery, 'gallery case')
        self._watches_by_id: Dict[str, WatchListing] = {w.id: w for w in self._watches}

    @property
    def watches(self) -> Tuple[WatchListing, ...]:
        return self._watches

    @property
    def gallery(self) -> Tuple[GalleryCase, ...]:
        return self._gallery

    def get_watch(self, watch_id: str) -> Optional[WatchListing]:
        """Return the listing with this id, or ``None`` when it does not exist."""
        return self._watches_by_id.get(str(watch_id))

    def get_brands(self) -> List[str]:
        """Distinct brands in first-seen order."""
        return list(dict.fromkeys(w.brand for w in self._watches))

    def featured_watches(self, limit: int = 4) -> List[WatchListing]:
        return list(self._watches[:max(limit, 0)])

    def featured_gallery(self, limit: int = 3) -> List[GalleryCase]:
        return list(self._gallery[:max(limit, 0)])

    def gallery_by_type(self, repair_type: Optional[str] = None) -> List[GalleryCase]:
        """
        Gallery cases of one repair category, or all of them.

        Unknown categories yield an empty list rather than an error.
        """
        if not repair_type:
            return list(self._gallery)
        if repair_type not in RepairType.values:
            logger.debug("Unknown gallery repair type requested: %s", repair_type)
            return []
        return [case for case in self._gallery if case.repair_type == repair_type]

    def repair_type_counts(self) -> Dict[str, int]:
        counts = Counter(case.repair_type.value for case in self._gallery)
        return {value: counts.get(value, 0) for value in RepairType.values}


@lru_cache(maxsize=1)
def get_catalog() -> CatalogStore:
    """Catalog built from the bundled inventory."""
    from .inventory import GALLERY_CASES, WATCHES

    return CatalogStore(WATCHES, GALLERY_CASES)
