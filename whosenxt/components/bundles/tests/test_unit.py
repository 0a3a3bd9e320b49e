"""
Unit tests for bundle pricing.
"""

from decimal import Decimal

import pytest

from whosenxt.components.bundles import (
    BundleConfig,
    BundleInput,
    BundleItem,
    DiscountTier,
    calculate_bundle_discount,
    calculate_bundle_totals,
    load_config_from_rules,
    run,
)


@pytest.fixture
def three_items() -> list[BundleItem]:
    return [
        BundleItem(service_type="delivery", price=Decimal("12.50")),
        BundleItem(service_type="gig", price=Decimal("40.00")),
        BundleItem(service_type="wellness", price=Decimal("25.00")),
    ]


class TestBundleDiscount:
    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, 0), (1, 0), (2, 10), (3, 15), (7, 15)],
    )
    def test_default_tiers(self, count: int, expected: int) -> None:
        assert calculate_bundle_discount(count) == expected

    def test_tier_order_does_not_matter(self) -> None:
        """The highest threshold met wins even if listed first."""
        config = BundleConfig(
            tiers=(
                DiscountTier(min_items=2, percentage=10),
                DiscountTier(min_items=4, percentage=25),
            )
        )
        assert calculate_bundle_discount(5, config) == 25
        assert calculate_bundle_discount(3, config) == 10


class TestBundleTotals:
    def test_three_items(self, three_items: list[BundleItem]) -> None:
        totals = calculate_bundle_totals(three_items)
        assert totals.item_count == 3
        assert totals.subtotal == Decimal("77.50")
        assert totals.discount_percentage == 15
        assert totals.discount_amount == Decimal("11.625")
        assert totals.total == Decimal("65.875")

    def test_total_plus_discount_is_subtotal(self, three_items: list[BundleItem]) -> None:
        for n in range(len(three_items) + 1):
            totals = calculate_bundle_totals(three_items[:n])
            assert totals.total + totals.discount_amount == totals.subtotal

    def test_empty_bundle(self) -> None:
        totals = calculate_bundle_totals([])
        assert totals.subtotal == 0
        assert totals.total == 0
        assert totals.discount_percentage == 0

    def test_run(self, three_items: list[BundleItem]) -> None:
        totals = run(BundleInput(items=tuple(three_items[:2])))
        assert totals.discount_percentage == 10

    def test_run_unknown_input(self) -> None:
        with pytest.raises(TypeError):
            run([])  # type: ignore[arg-type]


class TestLoadConfig:
    def test_defaults(self) -> None:
        assert load_config_from_rules({}) == BundleConfig()

    def test_from_rules(self) -> None:
        config = load_config_from_rules(
            {"bundles": {"discount_tiers": [{"min_items": 4, "percentage": 20}]}}
        )
        assert config.tiers == (DiscountTier(min_items=4, percentage=20),)
