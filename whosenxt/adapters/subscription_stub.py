"""
Subscription stub adapter (dev/tests).

Stands in for the hosted subscription lookup. Users are unsubscribed
unless a tier is assigned to them, or a default tier is set for everyone.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from whosenxt.components.benefits import SubscriptionSnapshot

logger = logging.getLogger(__name__)


class SubscriptionStubAdapter:
    """SubscriptionPort backed by an in-memory tier assignment."""

    def __init__(
        self,
        user_tiers: Mapping[str, str | None] | None = None,
        default_tier: str | None = None,
    ) -> None:
        self._user_tiers: dict[str, str | None] = dict(user_tiers or {})
        self._default_tier = default_tier

    def get_subscription(self, user_id: str | None = None) -> SubscriptionSnapshot:
        # A per-user entry wins, even when it is None (lapsed subscription)
        if user_id is not None and user_id in self._user_tiers:
            tier = self._user_tiers[user_id]
        else:
            tier = self._default_tier

        logger.debug("Subscription lookup for %s: tier=%s", user_id, tier)
        return SubscriptionSnapshot(subscribed=tier is not None, tier=tier)

    def set_override_tier(self, tier: str | None) -> None:
        """Tier for every user without an entry of their own."""
        self._default_tier = tier

    def set_user_tier(self, user_id: str, tier: str | None) -> None:
        self._user_tiers[user_id] = tier

    def clear_overrides(self) -> None:
        self._user_tiers.clear()
        self._default_tier = None
