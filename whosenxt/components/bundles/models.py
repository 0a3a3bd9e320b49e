"""
Bundle pricing models.

A bundle groups services from different verticals (delivery, gigs,
marketplace, wellness) and earns a discount based on how many it holds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal

ServiceType = Literal["delivery", "gig", "marketplace", "wellness"]


@dataclass(frozen=True)
class BundleItem:
    """One service in a bundle."""

    service_type: ServiceType
    price: Decimal
    service_id: str | None = None


@dataclass(frozen=True)
class BundleTotals:
    """Priced bundle."""

    item_count: int
    subtotal: Decimal
    discount_percentage: int
    discount_amount: Decimal
    total: Decimal


@dataclass(frozen=True)
class DiscountTier:
    """Discount earned at or above a number of items."""

    min_items: int
    percentage: int


@dataclass(frozen=True)
class BundleConfig:
    """Bundle configuration from rules."""

    tiers: tuple[DiscountTier, ...] = field(
        default_factory=lambda: (
            DiscountTier(min_items=3, percentage=15),
            DiscountTier(min_items=2, percentage=10),
        )
    )


@dataclass(frozen=True)
class BundleInput:
    """Input for pricing a bundle."""

    items: tuple[BundleItem, ...]
