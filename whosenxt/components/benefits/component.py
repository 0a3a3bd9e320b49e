"""
Benefits component.

Pure functions mapping subscription state to a benefits profile, and
applying the member discount to category-eligible prices.

Invariants:
- resolve_benefits is total: unknown tiers resolve to ZERO_BENEFITS
- apply_discount(p, c) + calculate_savings(p, c) == p for eligible items
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from .models import (
    TIER_BENEFITS,
    ZERO_BENEFITS,
    BenefitsProfile,
    DiscountConfig,
    DiscountInput,
    DiscountQuote,
    PricedItem,
    ResolveBenefitsInput,
)

logger = logging.getLogger(__name__)

_HUNDRED = Decimal(100)


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a price to Decimal without picking up float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


# --- Pure Functions ---


def resolve_benefits(subscribed: bool, tier: str | None) -> BenefitsProfile:
    """
    Resolve the benefits profile for a subscription state.

    Args:
        subscribed: Whether the user has an active subscription
        tier: Tier name from the subscription record, may be None or unknown

    Returns:
        The tier's BenefitsProfile, or ZERO_BENEFITS
    """
    if not subscribed or not tier:
        return ZERO_BENEFITS

    profile = TIER_BENEFITS.get(tier)  # type: ignore[call-overload]
    if profile is None:
        logger.debug("Unknown subscription tier %r, using zero benefits", tier)
        return ZERO_BENEFITS

    return profile


def is_discount_eligible(
    category: str | None,
    config: DiscountConfig | None = None,
) -> bool:
    """Check if a category qualifies for the member discount."""
    if not category:
        return False

    config = config or DiscountConfig()
    lowered = category.lower()
    return any(eligible in lowered for eligible in config.eligible_categories)


def calculate_savings(
    price: Decimal | int | float | str,
    category: str | None,
    benefits: BenefitsProfile,
    config: DiscountConfig | None = None,
) -> Decimal:
    """
    Calculate the amount saved on a price.

    Args:
        price: Item price
        category: Item category (None is never eligible)
        benefits: Resolved benefits profile
        config: Discount configuration

    Returns:
        price * discount_percentage / 100, or 0 if ineligible
    """
    amount = to_decimal(price)
    if not is_discount_eligible(category, config):
        return Decimal(0)

    return amount * Decimal(benefits.discount_percentage) / _HUNDRED


def apply_discount(
    price: Decimal | int | float | str,
    category: str | None,
    benefits: BenefitsProfile,
    config: DiscountConfig | None = None,
) -> Decimal:
    """
    Apply the member discount to a price.

    Full precision, no rounding; rounding is a display concern.

    Returns:
        Discounted price, or the original price if ineligible
    """
    amount = to_decimal(price)
    return amount - calculate_savings(amount, category, benefits, config)


def quote_item(
    item: PricedItem,
    benefits: BenefitsProfile,
    config: DiscountConfig | None = None,
) -> DiscountQuote:
    """Quote original price, discounted price and savings for one item."""
    eligible = is_discount_eligible(item.category, config)
    savings = calculate_savings(item.price, item.category, benefits, config)
    price = to_decimal(item.price)

    return DiscountQuote(
        original_price=price,
        discounted_price=price - savings,
        savings=savings,
        discount_percentage=benefits.discount_percentage if eligible else 0,
        eligible=eligible,
    )


# --- Run Function (Atomic Component Pattern) ---


def run(
    input_data: ResolveBenefitsInput | DiscountInput,
    config: DiscountConfig | None = None,
) -> BenefitsProfile | DiscountQuote:
    """
    Run a benefits operation based on input type.

    Args:
        input_data: One of the input types
        config: Discount configuration

    Returns:
        BenefitsProfile or DiscountQuote
    """
    if isinstance(input_data, ResolveBenefitsInput):
        snapshot = input_data.snapshot
        return resolve_benefits(snapshot.subscribed, snapshot.tier)

    if isinstance(input_data, DiscountInput):
        snapshot = input_data.snapshot
        benefits = resolve_benefits(snapshot.subscribed, snapshot.tier)
        return quote_item(input_data.item, benefits, config)

    raise TypeError(f"Unknown input type: {type(input_data)}")


# --- Configuration Loader ---


def load_config_from_rules(rules: dict[str, Any]) -> DiscountConfig:
    """
    Load DiscountConfig from whosenxt_rules.yaml.

    Args:
        rules: Parsed rules dictionary

    Returns:
        DiscountConfig instance
    """
    discount = rules.get("benefits", {}).get("discount", {})
    categories = discount.get("eligible_categories")

    if not categories:
        return DiscountConfig()

    return DiscountConfig(
        eligible_categories=tuple(str(c).lower() for c in categories),
    )
