"""
In-memory business repository (dev/tests).

Implements BusinessRepoPort over a dict of flat business records, shaped
like the hosted `businesses` table rows.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


class InMemoryBusinessRepo:
    """Business records keyed by id."""

    def __init__(self, records: Iterable[Mapping[str, Any]] = ()) -> None:
        self._records: dict[str, dict[str, Any]] = {}
        for record in records:
            self.add(record)

    def add(self, record: Mapping[str, Any]) -> None:
        self._records[str(record["id"])] = dict(record)

    def get_business(self, business_id: str) -> Mapping[str, Any] | None:
        return self._records.get(business_id)

    def list_businesses(self, category: str | None = None) -> list[Mapping[str, Any]]:
        results = []
        for record in self._records.values():
            if record.get("status", "approved") != "approved":
                continue
            if category and (record.get("category") or "").lower() != category.lower():
                continue
            results.append(record)
        return results
