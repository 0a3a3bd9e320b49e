"""
Benefits component ports.

External interfaces for reading subscription state.
"""

from __future__ import annotations

from typing import Protocol

from .models import SubscriptionSnapshot


class SubscriptionPort(Protocol):
    """
    Port for reading a user's subscription record.

    Implementations:
    - SubscriptionStubAdapter: in-memory overrides (dev/tests)
    """

    def get_subscription(self, user_id: str | None) -> SubscriptionSnapshot:
        """
        Get the subscription snapshot for a user.

        Args:
            user_id: Optional user identifier (None for anonymous visitors)

        Returns:
            SubscriptionSnapshot, unsubscribed for unknown users
        """
        ...
