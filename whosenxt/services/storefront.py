"""
Storefront listing service.

Loads business and subscription records through ports, runs them through
the availability and benefits components, and returns render-ready rows.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from whosenxt.components.availability import (
    AvailabilityConfig,
    AvailabilityStatus,
    BadgeTone,
    BusinessRepoPort,
    TimePort,
    WeeklySchedule,
    format_weekly_schedule,
    is_store_open,
    status_badge,
)
from whosenxt.components.availability import (
    load_config_from_rules as load_availability_config,
)
from whosenxt.components.benefits import (
    BenefitsProfile,
    DiscountConfig,
    DiscountQuote,
    PricedItem,
    SubscriptionPort,
    quote_item,
    resolve_benefits,
    to_decimal,
)
from whosenxt.components.benefits import load_config_from_rules as load_discount_config
from whosenxt.components.bundles import (
    BundleConfig,
    BundleItem,
    BundleTotals,
    calculate_bundle_totals,
)
from whosenxt.components.bundles import load_config_from_rules as load_bundle_config
from whosenxt.rules.models import Rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StorefrontConfig:
    """Component configs the storefront needs."""

    discount: DiscountConfig = field(default_factory=DiscountConfig)
    availability: AvailabilityConfig = field(default_factory=AvailabilityConfig)
    bundles: BundleConfig = field(default_factory=BundleConfig)

    @classmethod
    def from_rules(cls, rules: Rules) -> StorefrontConfig:
        data = rules.as_dict()
        return cls(
            discount=load_discount_config(data),
            availability=load_availability_config(data),
            bundles=load_bundle_config(data),
        )


@dataclass(frozen=True)
class StoreListing:
    """One business card in a marketplace listing."""

    business_id: str
    name: str
    category: str | None
    availability: AvailabilityStatus
    hours_lines: list[str]
    badge: BadgeTone


@dataclass(frozen=True)
class ProductOffer:
    """A product with the viewer's member price."""

    product_id: str
    name: str
    quote: DiscountQuote


class StorefrontService:
    def __init__(
        self,
        business_repo: BusinessRepoPort,
        subscriptions: SubscriptionPort,
        time: TimePort,
        config: StorefrontConfig | None = None,
    ):
        self.business_repo = business_repo
        self.subscriptions = subscriptions
        self.time = time
        self.config = config or StorefrontConfig()

    def _listing(self, record: Mapping[str, Any]) -> StoreListing:
        schedule = WeeklySchedule.from_record(record)
        availability = is_store_open(schedule, self.time.now_local(), self.config.availability)
        return StoreListing(
            business_id=str(record["id"]),
            name=record.get("business_name") or record.get("name") or "",
            category=record.get("category"),
            availability=availability,
            hours_lines=format_weekly_schedule(schedule),
            badge=status_badge(availability.is_open, is_closed=schedule.temporary_closure),
        )

    def store_status(self, business_id: str) -> StoreListing:
        """Status card for one business. Raises LookupError if unknown."""
        record = self.business_repo.get_business(business_id)
        if record is None:
            raise LookupError(f"Business not found: {business_id}")
        return self._listing(record)

    def list_stores(
        self,
        category: str | None = None,
        open_first: bool = False,
    ) -> list[StoreListing]:
        """
        List approved businesses with their current status.

        Records that cannot be turned into a listing are skipped and logged.
        """
        listings: list[StoreListing] = []
        for record in self.business_repo.list_businesses(category):
            try:
                listings.append(self._listing(record))
            except (KeyError, ValueError, TypeError, AttributeError):
                logger.warning("Skipping business record %r", record.get("id"), exc_info=True)

        if open_first:
            # Stable sort keeps repository order within each group
            listings.sort(key=lambda listing: not listing.availability.is_open)

        logger.info("Listed %d stores (category=%s)", len(listings), category)
        return listings

    def benefits_for(self, user_id: str | None) -> BenefitsProfile:
        snapshot = self.subscriptions.get_subscription(user_id)
        return resolve_benefits(snapshot.subscribed, snapshot.tier)

    def price_products(
        self,
        products: Iterable[Mapping[str, Any]],
        user_id: str | None,
    ) -> list[ProductOffer]:
        """Quote member prices for product rows (`id`, `name`, `price`, `category`)."""
        benefits = self.benefits_for(user_id)
        offers = []
        for product in products:
            item = PricedItem(price=to_decimal(product["price"]), category=product.get("category"))
            offers.append(
                ProductOffer(
                    product_id=str(product["id"]),
                    name=product.get("name", ""),
                    quote=quote_item(item, benefits, self.config.discount),
                )
            )
        return offers

    def price_bundle(self, items: Iterable[BundleItem]) -> BundleTotals:
        return calculate_bundle_totals(items, self.config.bundles)
