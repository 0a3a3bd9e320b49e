from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class DiscountRules(BaseModel):
    eligible_categories: list[str] = Field(
        default_factory=lambda: ["clothing", "accessories", "fashion"]
    )

class BenefitsRules(BaseModel):
    discount: DiscountRules = Field(default_factory=DiscountRules)

class AvailabilityRules(BaseModel):
    # Off: compare posted hours against the caller's wall clock
    use_store_timezone: bool = False
    default_timezone: str = "America/New_York"

    @field_validator("default_timezone")
    @classmethod
    def known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

class BundleTierRule(BaseModel):
    min_items: int = Field(ge=1)
    percentage: int = Field(ge=0, le=100)

class BundlesRules(BaseModel):
    discount_tiers: list[BundleTierRule] = Field(
        default_factory=lambda: [
            BundleTierRule(min_items=3, percentage=15),
            BundleTierRule(min_items=2, percentage=10),
        ]
    )

class UploadsRules(BaseModel):
    max_upload_bytes: int = Field(default=5 * 1024 * 1024, gt=0)
    max_filename_length: int = Field(default=255, gt=0)
    allowlist_mime_types: list[str] = Field(
        default_factory=lambda: [
            "image/jpeg",
            "image/jpg",
            "image/png",
            "image/webp",
            "application/pdf",
        ]
    )

class Rules(BaseModel):
    project: ProjectRules
    benefits: BenefitsRules = Field(default_factory=BenefitsRules)
    availability: AvailabilityRules = Field(default_factory=AvailabilityRules)
    bundles: BundlesRules = Field(default_factory=BundlesRules)
    uploads: UploadsRules = Field(default_factory=UploadsRules)

    def as_dict(self) -> dict:
        """Plain dict form consumed by component config loaders."""
        return self.model_dump()
