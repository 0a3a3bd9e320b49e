"""
Onboarding component.

Validation for driver applications, business registrations, document
uploads and posted store hours. Validators return error lists; invalid user
data never raises.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ValidationError

from whosenxt.components.availability import Weekday

from .models import (
    TIME_OF_DAY,
    BusinessRegistration,
    DriverApplication,
    OnboardingValidationError,
    UploadConfig,
    ValidationOutput,
    form_message,
)

_HTML_BRACKETS = re.compile(r"[<>]")
_JS_SCHEME = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER = re.compile(r"on\w+=", re.IGNORECASE)


def _errors_from_pydantic(exc: ValidationError) -> list[OnboardingValidationError]:
    errors: list[OnboardingValidationError] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "__root__"
        # Messages raised from our own validators come prefixed
        message = form_message(loc, err["type"]) or err["msg"].removeprefix("Value error, ")
        errors.append(OnboardingValidationError(code=err["type"], message=message, field=loc))
    return errors


def _validate_model(
    model: type[BaseModel],
    data: Mapping[str, Any],
    context: dict[str, Any] | None = None,
) -> ValidationOutput:
    try:
        model.model_validate(dict(data), context=context)
    except ValidationError as e:
        return ValidationOutput(errors=_errors_from_pydantic(e))
    return ValidationOutput()


# --- Forms ---


def validate_driver_application(
    data: Mapping[str, Any],
    today: date | None = None,
) -> ValidationOutput:
    """
    Validate a driver application form.

    Args:
        data: Submitted form fields
        today: Reference date for age and vehicle year checks

    Returns:
        ValidationOutput with per-field errors
    """
    return _validate_model(DriverApplication, data, context={"today": today or date.today()})


def validate_business_registration(data: Mapping[str, Any]) -> ValidationOutput:
    """Validate a business registration form."""
    return _validate_model(BusinessRegistration, data)


# --- Uploads ---


def validate_file_upload(
    content_type: str,
    size_bytes: int,
    filename: str,
    config: UploadConfig | None = None,
) -> ValidationOutput:
    """
    Validate an uploaded document (licence, insurance card, logo).

    The first failing check is reported.
    """
    config = config or UploadConfig()

    if content_type not in config.allowed_mime_types:
        return ValidationOutput(
            errors=[
                OnboardingValidationError(
                    code="invalid_mime_type",
                    message="File type not allowed. Please upload JPG, PNG, WEBP, or PDF files only.",
                    field="content_type",
                )
            ]
        )

    if size_bytes > config.max_upload_bytes:
        max_mb = round(config.max_upload_bytes / 1024 / 1024)
        return ValidationOutput(
            errors=[
                OnboardingValidationError(
                    code="file_too_large",
                    message=f"File size too large. Maximum size is {max_mb}MB.",
                    field="file",
                )
            ]
        )

    if len(filename) > config.max_filename_length:
        return ValidationOutput(
            errors=[
                OnboardingValidationError(
                    code="filename_too_long",
                    message=(
                        f"Filename too long. Maximum {config.max_filename_length} characters."
                    ),
                    field="filename",
                )
            ]
        )

    return ValidationOutput()


def sanitize_input(text: str) -> str:
    """Strip angle brackets, javascript: and inline handlers from display text."""
    cleaned = _HTML_BRACKETS.sub("", text.strip())
    cleaned = _JS_SCHEME.sub("", cleaned)
    return _EVENT_HANDLER.sub("", cleaned)


# --- Store Hours ---


def validate_store_hours(record: Mapping[str, Any]) -> ValidationOutput:
    """
    Validate posted hours before they reach the availability resolver.

    Checks every non-null `{day}_open` / `{day}_close` is HH:MM (24h), that
    both bounds are set together, that close is after open, and that the
    timezone is a known IANA name.
    """
    errors: list[OnboardingValidationError] = []

    for day in Weekday:
        open_key = f"{day.record_key}_open"
        close_key = f"{day.record_key}_close"
        open_time = record.get(open_key) or None
        close_time = record.get(close_key) or None

        bad_format = False
        for key, value in ((open_key, open_time), (close_key, close_time)):
            if value is not None and not (isinstance(value, str) and TIME_OF_DAY.match(value)):
                bad_format = True
                errors.append(
                    OnboardingValidationError(
                        code="invalid_time",
                        message=f"{day.display_name} time must be HH:MM (24-hour)",
                        field=key,
                    )
                )

        if bad_format:
            continue

        if (open_time is None) != (close_time is None):
            errors.append(
                OnboardingValidationError(
                    code="incomplete_day",
                    message=f"{day.display_name} needs both an opening and a closing time",
                    field=open_key if open_time is None else close_key,
                )
            )
        elif open_time is not None and close_time is not None and close_time <= open_time:
            errors.append(
                OnboardingValidationError(
                    code="close_before_open",
                    message=f"{day.display_name} closing time must be after opening time",
                    field=close_key,
                )
            )

    timezone = record.get("timezone")
    if timezone:
        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(
                OnboardingValidationError(
                    code="unknown_timezone",
                    message=f"Unknown timezone: {timezone}",
                    field="timezone",
                )
            )

    return ValidationOutput(errors=errors)


# --- Configuration Loader ---


def load_config_from_rules(rules: dict[str, Any]) -> UploadConfig:
    """
    Load UploadConfig from whosenxt_rules.yaml.

    Args:
        rules: Parsed rules dictionary

    Returns:
        UploadConfig instance
    """
    uploads = rules.get("uploads", {})
    defaults = UploadConfig()

    mime_types = uploads.get("allowlist_mime_types")
    return UploadConfig(
        allowed_mime_types=tuple(mime_types) if mime_types else defaults.allowed_mime_types,
        max_upload_bytes=uploads.get("max_upload_bytes", defaults.max_upload_bytes),
        max_filename_length=uploads.get("max_filename_length", defaults.max_filename_length),
    )
