"""
Onboarding component models.

Driver applications, business registrations, upload limits and the
validation results returned for them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    HttpUrl,
    StringConstraints,
    ValidationInfo,
    field_validator,
)

# --- Validation Results ---


@dataclass(frozen=True)
class OnboardingValidationError:
    """Validation error with actionable message."""

    code: str
    message: str
    field: str


@dataclass(frozen=True)
class ValidationOutput:
    """Result of validating one submission."""

    errors: list[OnboardingValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def messages_for(self, field_name: str) -> list[str]:
        return [e.message for e in self.errors if e.field == field_name]


# --- Field Types ---

NAME_PATTERN = r"^[a-zA-Z\s'-]+$"
PHONE_PATTERN = r"^\+?[\d\s\-\(\)]{10,15}$"
ZIP_PATTERN = r"^\d{5}(-\d{4})?$"
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
PLATE_PATTERN = r"^[A-Za-z0-9\s-]+$"
TIME_OF_DAY = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

PersonName = Annotated[str, StringConstraints(min_length=1, max_length=50, pattern=NAME_PATTERN)]
LongName = Annotated[str, StringConstraints(min_length=1, max_length=100, pattern=NAME_PATTERN)]
Email = Annotated[str, StringConstraints(max_length=255, pattern=EMAIL_PATTERN)]
Phone = Annotated[str, StringConstraints(pattern=PHONE_PATTERN)]
Address = Annotated[str, StringConstraints(min_length=5, max_length=200)]
ShortText = Annotated[str, StringConstraints(min_length=1, max_length=50)]
MediumText = Annotated[str, StringConstraints(min_length=1, max_length=100)]

# Form messages keyed by field, then by pydantic error type ("*" matches any type)
_REQUIRED = ("missing", "string_too_short")
_CHARSET = "can only contain letters, spaces, hyphens, and apostrophes"


def _messages(
    required: str | None = None,
    too_long: str | None = None,
    pattern: str | None = None,
    **other: str,
) -> dict[str, str]:
    messages = dict(other)
    if required:
        messages.update(dict.fromkeys(_REQUIRED, required))
    if too_long:
        messages["string_too_long"] = too_long
    if pattern:
        messages["string_pattern_mismatch"] = pattern
    return messages


_EMAIL_MESSAGES = _messages(
    required="Invalid email address",
    too_long="Email must be less than 255 characters",
    pattern="Invalid email address",
)
_PHONE_MESSAGES = _messages(
    required="Invalid phone number format",
    pattern="Invalid phone number format",
)
_ADDRESS_MESSAGES = _messages(
    required="Address is required and must be at least 5 characters",
    too_long="Address must be less than 200 characters",
)

FORM_MESSAGES: dict[str, dict[str, str]] = {
    # Driver application
    "first_name": _messages(
        "First name is required",
        "First name must be less than 50 characters",
        f"First name {_CHARSET}",
    ),
    "last_name": _messages(
        "Last name is required",
        "Last name must be less than 50 characters",
        f"Last name {_CHARSET}",
    ),
    "email": _EMAIL_MESSAGES,
    "phone": _PHONE_MESSAGES,
    "address": _ADDRESS_MESSAGES,
    "city": _messages(
        "City is required",
        "City must be less than 100 characters",
        f"City {_CHARSET}",
    ),
    "state": _messages("State is required", "State must be less than 50 characters"),
    "zip_code": _messages("Invalid ZIP code format", pattern="Invalid ZIP code format"),
    "vehicle_type": _messages(
        "Vehicle type is required", "Vehicle type must be less than 50 characters"
    ),
    "vehicle_make": _messages(
        "Vehicle make is required", "Vehicle make must be less than 50 characters"
    ),
    "vehicle_model": _messages(
        "Vehicle model is required", "Vehicle model must be less than 50 characters"
    ),
    "vehicle_year": _messages("Invalid year format", pattern="Invalid year format"),
    "license_plate": _messages(
        "License plate is required",
        "License plate must be less than 20 characters",
        "Invalid license plate format",
    ),
    "insurance_provider": _messages(
        "Insurance provider is required",
        "Insurance provider must be less than 100 characters",
    ),
    "emergency_contact": _messages(
        "Emergency contact name is required",
        "Emergency contact name must be less than 100 characters",
    ),
    "emergency_phone": _messages(
        "Invalid emergency phone number format",
        pattern="Invalid emergency phone number format",
    ),
    "experience": _messages(
        too_long="Experience description must be less than 1000 characters"
    ),
    "agreed_to_terms": _messages("You must agree to the terms and conditions"),
    # Business registration
    "business_name": _messages(
        "Business name is required", "Business name must be less than 100 characters"
    ),
    "business_type": _messages("Business type is required"),
    "description": _messages(
        "Description must be at least 10 characters",
        "Description must be less than 2000 characters",
    ),
    "contact_email": _EMAIL_MESSAGES,
    "contact_phone": _PHONE_MESSAGES,
    "owner_name": _messages(
        "Owner/Manager name is required",
        "Name must be less than 100 characters",
        f"Name {_CHARSET}",
    ),
    "website": {"*": "Invalid website URL"},
    "business_license": _messages(too_long="Business license must be less than 50 characters"),
}


def form_message(field_name: str, error_type: str) -> str | None:
    """Form message for a field's pydantic error type, if one is defined."""
    messages = FORM_MESSAGES.get(field_name, {})
    return messages.get(error_type) or messages.get("*")


MIN_DRIVER_AGE = 18
MAX_DRIVER_AGE = 100
MIN_VEHICLE_YEAR = 1990


def _today(info: ValidationInfo) -> date:
    context = info.context or {}
    today = context.get("today")
    return today if isinstance(today, date) else date.today()


# --- Submissions ---


class DriverApplication(BaseModel):
    """
    Delivery driver application form.

    Date of birth and vehicle year are checked against the `today` date
    passed in the validation context (falls back to date.today()).
    """

    model_config = ConfigDict(str_strip_whitespace=True, regex_engine="python-re")

    first_name: PersonName
    last_name: PersonName
    email: Email
    phone: Phone
    address: Address
    city: LongName
    state: Annotated[str, StringConstraints(min_length=2, max_length=50)]
    zip_code: Annotated[str, StringConstraints(pattern=ZIP_PATTERN)]
    date_of_birth: date
    vehicle_type: ShortText
    vehicle_make: ShortText
    vehicle_model: ShortText
    vehicle_year: Annotated[str, StringConstraints(pattern=r"^\d{4}$")]
    license_plate: Annotated[
        str, StringConstraints(min_length=1, max_length=20, pattern=PLATE_PATTERN)
    ]
    insurance_provider: MediumText
    emergency_contact: MediumText
    emergency_phone: Phone
    experience: Annotated[str, StringConstraints(max_length=1000)] = ""
    agreed_to_terms: bool

    @field_validator("date_of_birth")
    @classmethod
    def driver_age_in_range(cls, v: date, info: ValidationInfo) -> date:
        # Calendar-year difference, not exact age
        age = _today(info).year - v.year
        if not MIN_DRIVER_AGE <= age <= MAX_DRIVER_AGE:
            raise ValueError("Must be at least 18 years old")
        return v

    @field_validator("vehicle_year")
    @classmethod
    def vehicle_year_in_range(cls, v: str, info: ValidationInfo) -> str:
        latest = _today(info).year + 1
        if not MIN_VEHICLE_YEAR <= int(v) <= latest:
            raise ValueError("Vehicle year must be between 1990 and current year")
        return v

    @field_validator("agreed_to_terms")
    @classmethod
    def terms_accepted(cls, v: bool) -> bool:
        if v is not True:
            raise ValueError("You must agree to the terms and conditions")
        return v


class BusinessRegistration(BaseModel):
    """Business onboarding form."""

    model_config = ConfigDict(str_strip_whitespace=True, regex_engine="python-re")

    business_name: MediumText
    business_type: Annotated[str, StringConstraints(min_length=1)]
    description: Annotated[str, StringConstraints(min_length=10, max_length=2000)]
    contact_email: Email
    contact_phone: Phone
    address: Address
    owner_name: LongName
    website: HttpUrl | None = None
    business_license: Annotated[str, StringConstraints(max_length=50)] | None = None

    @field_validator("website", mode="before")
    @classmethod
    def empty_website_is_none(cls, v: object) -> object:
        """An empty website field means no website."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


# --- Configuration ---


@dataclass(frozen=True)
class UploadConfig:
    """Upload limits from rules."""

    allowed_mime_types: tuple[str, ...] = (
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/webp",
        "application/pdf",
    )
    max_upload_bytes: int = 5 * 1024 * 1024
    max_filename_length: int = 255
