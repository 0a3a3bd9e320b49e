"""
Bundle pricing component.

Pure functions pricing a multi-service bundle.

Invariants:
- total + discount_amount == subtotal
- The highest tier whose min_items is met wins
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from whosenxt.components.benefits import to_decimal

from .models import BundleConfig, BundleInput, BundleItem, BundleTotals, DiscountTier


def calculate_bundle_discount(item_count: int, config: BundleConfig | None = None) -> int:
    """
    Discount percentage for a bundle of `item_count` services.

    Returns 0 when no tier applies.
    """
    config = config or BundleConfig()

    best = 0
    best_threshold = -1
    for tier in config.tiers:
        if item_count >= tier.min_items and tier.min_items > best_threshold:
            best = tier.percentage
            best_threshold = tier.min_items

    return best


def calculate_bundle_totals(
    items: Iterable[BundleItem],
    config: BundleConfig | None = None,
) -> BundleTotals:
    """
    Price a bundle.

    Args:
        items: Services in the bundle
        config: Bundle configuration

    Returns:
        BundleTotals with subtotal, discount and total
    """
    items = list(items)
    subtotal = sum((to_decimal(item.price) for item in items), Decimal(0))
    percentage = calculate_bundle_discount(len(items), config)
    discount_amount = subtotal * Decimal(percentage) / Decimal(100)

    return BundleTotals(
        item_count=len(items),
        subtotal=subtotal,
        discount_percentage=percentage,
        discount_amount=discount_amount,
        total=subtotal - discount_amount,
    )


def run(input_data: BundleInput, config: BundleConfig | None = None) -> BundleTotals:
    """Run bundle pricing (atomic component pattern)."""
    if isinstance(input_data, BundleInput):
        return calculate_bundle_totals(input_data.items, config)

    raise TypeError(f"Unknown input type: {type(input_data)}")


def load_config_from_rules(rules: dict[str, Any]) -> BundleConfig:
    """
    Load BundleConfig from whosenxt_rules.yaml.

    Args:
        rules: Parsed rules dictionary

    Returns:
        BundleConfig instance
    """
    tiers = rules.get("bundles", {}).get("discount_tiers")
    if not tiers:
        return BundleConfig()

    return BundleConfig(
        tiers=tuple(
            DiscountTier(min_items=int(t["min_items"]), percentage=int(t["percentage"]))
            for t in tiers
        )
    )
