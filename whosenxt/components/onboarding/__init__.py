"""
Onboarding component.

Public API for driver/business onboarding validation and store hours checks.
"""

from .component import (
    load_config_from_rules,
    sanitize_input,
    validate_business_registration,
    validate_driver_application,
    validate_file_upload,
    validate_store_hours,
)
from .models import (
    BusinessRegistration,
    DriverApplication,
    OnboardingValidationError,
    UploadConfig,
    ValidationOutput,
)

__all__ = [
    # Functions
    "load_config_from_rules",
    "sanitize_input",
    "validate_business_registration",
    "validate_driver_application",
    "validate_file_upload",
    "validate_store_hours",
    # Models
    "BusinessRegistration",
    "DriverApplication",
    "OnboardingValidationError",
    "UploadConfig",
    "ValidationOutput",
]
