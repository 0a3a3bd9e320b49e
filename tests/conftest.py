from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from whosenxt.adapters.memory_business import InMemoryBusinessRepo
from whosenxt.adapters.subscription_stub import SubscriptionStubAdapter
from whosenxt.adapters.zone_time import FrozenTimeAdapter
from whosenxt.rules.loader import load_rules
from whosenxt.rules.models import Rules
from whosenxt.services.storefront import StorefrontConfig, StorefrontService

# Monday 2026-10-19 14:00 UTC is 10:00 EDT in New York
MONDAY_MORNING_UTC = datetime(2026, 10, 19, 14, 0, tzinfo=UTC)


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).parent.parent


@pytest.fixture
def rules(project_root: Path) -> Rules:
    """Rules loaded from the shipped rules file."""
    return load_rules(project_root / "whosenxt_rules.yaml")


@pytest.fixture
def frozen_time() -> FrozenTimeAdapter:
    return FrozenTimeAdapter(MONDAY_MORNING_UTC)


def business_record(business_id: str, name: str, **overrides: Any) -> dict[str, Any]:
    """Flat business row with weekday 09:00-17:00 hours and closed weekends."""
    record: dict[str, Any] = {
        "id": business_id,
        "business_name": name,
        "category": "Clothing",
        "status": "approved",
        "is_24_7": False,
        "temporary_closure": False,
    }
    for day in ("monday", "tuesday", "wednesday", "thursday", "friday"):
        record[f"{day}_open"] = "09:00"
        record[f"{day}_close"] = "17:00"
    record.update(overrides)
    return record


@pytest.fixture
def make_business():
    return business_record


@pytest.fixture
def businesses() -> list[dict[str, Any]]:
    return [
        business_record("b-late", "Late Starters", monday_open="12:00", monday_close="20:00"),
        business_record("b-open", "Threads & Co"),
        business_record("b-allday", "Corner Mart", category="Grocery", is_24_7=True),
        business_record(
            "b-closed",
            "Seasonal Boutique",
            temporary_closure=True,
            closure_message="Back in spring",
        ),
        business_record("b-pending", "Not Yet Approved", status="pending"),
    ]


@pytest.fixture
def subscriptions() -> SubscriptionStubAdapter:
    return SubscriptionStubAdapter()


@pytest.fixture
def storefront(
    businesses: list[dict[str, Any]],
    subscriptions: SubscriptionStubAdapter,
    frozen_time: FrozenTimeAdapter,
    rules: Rules,
) -> StorefrontService:
    return StorefrontService(
        business_repo=InMemoryBusinessRepo(businesses),
        subscriptions=subscriptions,
        time=frozen_time,
        config=StorefrontConfig.from_rules(rules),
    )
