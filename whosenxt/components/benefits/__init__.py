"""
Benefits component.

Public API for subscription benefits and member discounts.
"""

from .component import (
    apply_discount,
    calculate_savings,
    is_discount_eligible,
    load_config_from_rules,
    quote_item,
    resolve_benefits,
    run,
    to_decimal,
)
from .models import (
    TIER_BENEFITS,
    ZERO_BENEFITS,
    BenefitsProfile,
    DiscountConfig,
    DiscountInput,
    DiscountQuote,
    GigNotificationPriority,
    PricedItem,
    ResolveBenefitsInput,
    SubscriptionSnapshot,
    SubscriptionTier,
    SupportTier,
)
from .ports import SubscriptionPort

__all__ = [
    # Functions
    "apply_discount",
    "calculate_savings",
    "is_discount_eligible",
    "load_config_from_rules",
    "quote_item",
    "resolve_benefits",
    "run",
    "to_decimal",
    # Models
    "BenefitsProfile",
    "DiscountConfig",
    "DiscountInput",
    "DiscountQuote",
    "GigNotificationPriority",
    "PricedItem",
    "ResolveBenefitsInput",
    "SubscriptionSnapshot",
    "SubscriptionTier",
    "SupportTier",
    "TIER_BENEFITS",
    "ZERO_BENEFITS",
    # Ports
    "SubscriptionPort",
]
