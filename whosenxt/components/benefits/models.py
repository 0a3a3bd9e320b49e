"""
Benefits component models.

Subscription tiers, the benefits profile each tier grants, and the inputs and
outputs of discount calculation.

Invariants:
- Every (subscribed, tier) pair maps to exactly one BenefitsProfile
- Unknown or unsubscribed state maps to ZERO_BENEFITS
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal

# --- Tiers ---

SubscriptionTier = Literal["pro", "elite", "veteran"]
SupportTier = Literal["standard", "priority", "vip"]
GigNotificationPriority = Literal["basic", "priority", "instant"]


@dataclass(frozen=True)
class SubscriptionSnapshot:
    """
    Subscription state as read from the external user record.

    `tier` is kept as a plain string: the record may carry values this
    library does not know about.
    """

    subscribed: bool = False
    tier: str | None = None


# --- Benefits ---


@dataclass(frozen=True)
class BenefitsProfile:
    """Resolved bundle of perks for a subscription state."""

    discount_percentage: int = 0
    free_delivery_days_per_week: int = 0
    support_tier: SupportTier = "standard"
    has_early_gig_access: bool = False
    has_store_tools: bool = False
    has_analytics: bool = False
    # No tier grants this yet.
    has_account_manager: bool = False
    gig_notification_priority: GigNotificationPriority = "basic"


ZERO_BENEFITS = BenefitsProfile()

TIER_BENEFITS: dict[SubscriptionTier, BenefitsProfile] = {
    "pro": BenefitsProfile(
        discount_percentage=10,
        free_delivery_days_per_week=2,
        support_tier="standard",
        has_early_gig_access=False,
        has_store_tools=False,
        has_analytics=False,
        has_account_manager=False,
        gig_notification_priority="basic",
    ),
    "elite": BenefitsProfile(
        discount_percentage=20,
        free_delivery_days_per_week=4,
        support_tier="priority",
        has_early_gig_access=True,
        has_store_tools=True,
        has_analytics=False,
        has_account_manager=False,
        gig_notification_priority="priority",
    ),
    "veteran": BenefitsProfile(
        discount_percentage=30,
        free_delivery_days_per_week=7,
        support_tier="vip",
        has_early_gig_access=True,
        has_store_tools=True,
        has_analytics=True,
        has_account_manager=False,
        gig_notification_priority="instant",
    ),
}


# --- Discounts ---


@dataclass(frozen=True)
class PricedItem:
    """A price with an optional product category."""

    price: Decimal
    category: str | None = None


@dataclass(frozen=True)
class DiscountQuote:
    """Discount applied to a single priced item."""

    original_price: Decimal
    discounted_price: Decimal
    savings: Decimal
    discount_percentage: int
    eligible: bool


# --- Inputs ---


@dataclass(frozen=True)
class ResolveBenefitsInput:
    """Input for resolving a benefits profile."""

    snapshot: SubscriptionSnapshot


@dataclass(frozen=True)
class DiscountInput:
    """Input for quoting a discount on one item."""

    item: PricedItem
    snapshot: SubscriptionSnapshot


# --- Configuration ---


@dataclass(frozen=True)
class DiscountConfig:
    """Discount configuration from rules."""

    eligible_categories: tuple[str, ...] = field(
        default_factory=lambda: ("clothing", "accessories", "fashion")
    )
