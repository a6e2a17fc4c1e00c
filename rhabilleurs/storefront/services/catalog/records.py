"""
Immutable catalog records: watches for sale and before/after gallery cases.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from django.db import models


class MovementType(models.TextChoices):
    MECANIQUE = 'mecanique', 'Mécanique'
    AUTOMATIQUE = 'automatique', 'Automatique'
    QUARTZ = 'quartz', 'Quartz'


class Condition(models.TextChoices):
    EXCELLENT = 'excellent', 'Excellent'
    TRES_BON = 'tres_bon', 'Très bon'
    BON = 'bon', 'Bon'


class RepairType(models.TextChoices):
    REVISION_COMPLETE = 'revision_complete', 'Révision complète'
    REPARATION = 'reparation', 'Réparation'
    RESTAURATION = 'restauration', 'Restauration'
    POLISSAGE = 'polissage', 'Polissage'
    ETANCHEITE = 'etancheite', 'Étanchéité'


@dataclass(frozen=True)
class WatchListing:
    """
    A watch offered in the boutique.

    Attributes:
        id: Unique identifier, used in the detail URL.
        price: Price in CHF, never negative.
        photos: Image URLs, the first one is the primary photo.
        warranty_months: Workshop warranty after revision.
    """

    id: str
    brand: str
    model: str
    year: int
    movement: MovementType
    condition: Condition
    description: str
    price: Decimal
    photos: Tuple[str, ...]
    is_rare: bool = False
    revision_details: str = ''
    warranty_months: int = 0

    def __post_init__(self):
        if not self.id:
            raise ValueError("WatchListing requires an id")
        # Raw inventory values (lists, plain strings, ints) are normalised once here.
        object.__setattr__(self, 'price', Decimal(str(self.price)))
        object.__setattr__(self, 'photos', tuple(self.photos))
        object.__setattr__(self, 'movement', MovementType(self.movement))
        object.__setattr__(self, 'condition', Condition(self.condition))
        if self.price < 0:
            raise ValueError(f"Negative price for watch {self.id!r}: {self.price}")
        if self.warranty_months < 0:
            raise ValueError(f"Negative warranty for watch {self.id!r}: {self.warranty_months}")
        if not self.photos:
            raise ValueError(f"Watch {self.id!r} has no photo")

    @property
    def title(self) -> str:
        return f"{self.brand} {self.model}"

    @property
    def primary_photo(self) -> str:
        return self.photos[0]

    @property
    def movement_label(self) -> str:
        return self.movement.label

    @property
    def condition_label(self) -> str:
        return self.condition.label


@dataclass(frozen=True)
class GalleryCase:
    """A before/after restoration showcase."""

    id: str
    title: str
    watch_brand: str
    watch_model: str
    description: str
    photo_before: str
    photo_after: str
    repair_type: RepairType

    def __post_init__(self):
        if not self.id:
            raise ValueError("GalleryCase requires an id")
        if not self.photo_before or not self.photo_after:
            raise ValueError(f"Gallery case {self.id!r} needs both before and after photos")
        object.__setattr__(self, 'repair_type', RepairType(self.repair_type))

    @property
    def repair_type_label(self) -> str:
        return self.repair_type.label
