from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from whosenxt.adapters.memory_business import InMemoryBusinessRepo
from whosenxt.adapters.subscription_stub import SubscriptionStubAdapter
from whosenxt.adapters.zone_time import ZoneTimeAdapter
from whosenxt.components.availability import BusinessRepoPort, TimePort
from whosenxt.components.benefits import SubscriptionPort
from whosenxt.components.onboarding import UploadConfig
from whosenxt.components.onboarding import load_config_from_rules as load_upload_config
from whosenxt.rules.loader import load_rules
from whosenxt.rules.models import Rules
from whosenxt.services.storefront import StorefrontConfig, StorefrontService

logger = logging.getLogger(__name__)


@dataclass
class ServiceContext:
    storefront: StorefrontService
    business_repo: BusinessRepoPort
    subscriptions: SubscriptionPort
    time: TimePort
    uploads: UploadConfig
    rules: Rules

    @classmethod
    def create(
        cls,
        rules: Rules,
        businesses: Iterable[Mapping[str, Any]] = (),
        subscriptions: SubscriptionPort | None = None,
        time: TimePort | None = None,
    ) -> ServiceContext:
        # Adapters
        business_repo = InMemoryBusinessRepo(businesses)
        subscriptions = subscriptions or SubscriptionStubAdapter()
        time = time or ZoneTimeAdapter(rules.availability.default_timezone)

        # Services
        storefront = StorefrontService(
            business_repo=business_repo,
            subscriptions=subscriptions,
            time=time,
            config=StorefrontConfig.from_rules(rules),
        )

        logger.info(
            "Service context ready (rules %s, timezone %s)",
            rules.project.rules_version,
            time.timezone_name,
        )

        return cls(
            storefront=storefront,
            business_repo=business_repo,
            subscriptions=subscriptions,
            time=time,
            uploads=load_upload_config(rules.as_dict()),
            rules=rules,
        )

    @classmethod
    def from_rules_file(cls, path: str | Path | None = None, **kwargs: Any) -> ServiceContext:
        return cls.create(load_rules(path), **kwargs)
