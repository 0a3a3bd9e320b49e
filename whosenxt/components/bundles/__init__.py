"""
Bundle pricing component.

Public API for multi-service bundle discounts.
"""

from .component import (
    calculate_bundle_discount,
    calculate_bundle_totals,
    load_config_from_rules,
    run,
)
from .models import (
    BundleConfig,
    BundleInput,
    BundleItem,
    BundleTotals,
    DiscountTier,
    ServiceType,
)

__all__ = [
    "calculate_bundle_discount",
    "calculate_bundle_totals",
    "load_config_from_rules",
    "run",
    "BundleConfig",
    "BundleInput",
    "BundleItem",
    "BundleTotals",
    "DiscountTier",
    "ServiceType",
]
