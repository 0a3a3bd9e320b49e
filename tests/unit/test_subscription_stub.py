"""
Unit tests for the subscription stub adapter.
"""

from whosenxt.adapters.subscription_stub import SubscriptionStubAdapter
from whosenxt.components.benefits import SubscriptionPort, SubscriptionSnapshot


class TestSubscriptionStubAdapter:
    def test_satisfies_subscription_port_protocol(self) -> None:
        adapter: SubscriptionPort = SubscriptionStubAdapter()
        assert isinstance(adapter, SubscriptionStubAdapter)

    def test_unsubscribed_by_default(self) -> None:
        """Everyone is unsubscribed until an override is set."""
        snapshot = SubscriptionStubAdapter().get_subscription("user-123")
        assert snapshot == SubscriptionSnapshot(subscribed=False, tier=None)

    def test_anonymous_user(self) -> None:
        assert SubscriptionStubAdapter().get_subscription(None).subscribed is False

    def test_global_override(self) -> None:
        adapter = SubscriptionStubAdapter()
        adapter.set_override_tier("elite")
        snapshot = adapter.get_subscription("anyone")
        assert snapshot.subscribed is True
        assert snapshot.tier == "elite"

    def test_user_override_beats_global(self) -> None:
        adapter = SubscriptionStubAdapter()
        adapter.set_override_tier("pro")
        adapter.set_user_tier("vet-1", "veteran")
        adapter.set_user_tier("lapsed", None)

        assert adapter.get_subscription("vet-1").tier == "veteran"
        assert adapter.get_subscription("lapsed").subscribed is False
        assert adapter.get_subscription("someone-else").tier == "pro"

    def test_seeded_from_constructor(self) -> None:
        adapter = SubscriptionStubAdapter(user_tiers={"vet-1": "veteran"}, default_tier="pro")
        assert adapter.get_subscription("vet-1").tier == "veteran"
        assert adapter.get_subscription(None).tier == "pro"

    def test_clear_overrides(self) -> None:
        adapter = SubscriptionStubAdapter()
        adapter.set_override_tier("pro")
        adapter.set_user_tier("vet-1", "veteran")
        adapter.clear_overrides()

        assert adapter.get_subscription("vet-1").subscribed is False
        assert adapter.get_subscription(None).subscribed is False
