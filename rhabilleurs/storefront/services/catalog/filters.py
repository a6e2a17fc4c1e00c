"""
Filter and sort pipeline for the boutique page.

``apply_filters`` is a pure function: the source sequence is never mutated and
the same criteria always produce the same ordered list.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, FrozenSet, Iterable, List, Optional

from django.db import models
from django.utils.http import urlencode

from .records import WatchListing


class SortKey(models.TextChoices):
    NEWEST = 'newest', 'Plus récentes'
    PRICE_ASC = 'price_asc', 'Prix croissant'
    PRICE_DESC = 'price_desc', 'Prix décroissant'


@dataclass(frozen=True)
class FilterCriteria:
    """
    Active search/filter/sort parameters of a boutique view.

    Empty sets and an empty search mean "no constraint"; price bounds are
    either a ``Decimal`` or ``None``. ``min_price > max_price`` is allowed and
    simply matches nothing.
    """

    search: str = ''
    brands: FrozenSet[str] = field(default_factory=frozenset)
    movements: FrozenSet[str] = field(default_factory=frozenset)
    conditions: FrozenSet[str] = field(default_factory=frozenset)
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    sort: SortKey = SortKey.NEWEST

    def __post_init__(self):
        object.__setattr__(self, 'brands', frozenset(self.brands))
        object.__setattr__(self, 'movements', frozenset(self.movements))
        object.__setattr__(self, 'conditions', frozenset(self.conditions))
        object.__setattr__(self, 'sort', SortKey(self.sort))

    @property
    def has_active_filters(self) -> bool:
        return bool(
            self.search.strip()
            or self.brands
            or self.movements
            or self.conditions
            or self.min_price is not None
            or self.max_price is not None
        )

    def to_query(self) -> str:
        """Query string that reproduces these criteria on ``/boutique/``."""
        params = {}
        if self.search:
            params['q'] = self.search
        if self.brands:
            params['brand'] = sorted(self.brands)
        if self.movements:
            params['movement'] = sorted(self.movements)
        if self.conditions:
            params['condition'] = sorted(self.conditions)
        if self.min_price is not None:
            params['min_price'] = str(self.min_price)
        if self.max_price is not None:
            params['max_price'] = str(self.max_price)
        if self.sort != SortKey.NEWEST:
            params['sort'] = self.sort.value
        return urlencode(params, doseq=True)


def parse_price_bound(raw: Any) -> Optional[Decimal]:
    """
    Convert a raw price bound to ``Decimal``.

    Blank or non-numeric values (``"abc"``, ``"NaN"``, ``"inf"``) return ``None``.
    """
    if raw is None:
        return None
    if isinstance(raw, Decimal):
        return raw if raw.is_finite() else None
    text = str(raw).strip().replace("'", '').replace(' ', '')
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def _sort(listings: List[WatchListing], sort: SortKey) -> List[WatchListing]:
    # sorted() is stable, including with reverse=True
    if sort == SortKey.PRICE_ASC:
        return sorted(listings, key=lambda w: w.price)
    if sort == SortKey.PRICE_DESC:
        return sorted(listings, key=lambda w: w.price, reverse=True)
    return sorted(listings, key=lambda w: w.year, reverse=True)


def apply_filters(catalog: Iterable[WatchListing], criteria: FilterCriteria) -> List[WatchListing]:
    """
    Filter ``catalog`` by ``criteria`` then sort it.

    Text comparisons are case-insensitive. Sorting is always the last stage.
    """
    result = list(catalog)

    query = criteria.search.strip().casefold()
    if query:
        result = [
            w for w in result
            if query in w.brand.casefold() or query in w.model.casefold()
        ]

    if criteria.brands:
        brands = {b.casefold() for b in criteria.brands}
        result = [w for w in result if w.brand.casefold() in brands]

    if criteria.movements:
        movements = {m.casefold() for m in criteria.movements}
        result = [w for w in result if w.movement.value in movements]

    if criteria.conditions:
        conditions = {c.casefold() for c in criteria.conditions}
        result = [w for w in result if w.condition.value in conditions]

    if criteria.min_price is not None:
        result = [w for w in result if w.price >= criteria.min_price]

    if criteria.max_price is not None:
        result = [w for w in result if w.price <= criteria.max_price]

    return _sort(result, criteria.sort)
