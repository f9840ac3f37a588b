"""Input validation shared by the service layer."""

from typing import Optional

import pytz

from dtrack.core.exceptions import AuthorizationError, ValidationError
from dtrack.domain.models import (
    ANONYMOUS_IDENTITY,
    MAX_LABEL_LENGTH,
    MAX_U64,
    IdentityKey,
    UserPreferences,
)


def validate_label(value: str, field: str = "label") -> str:
    """
    Trim a label-like value and check its length.

    Returns the trimmed value. Empty (after trimming) or longer than
    MAX_LABEL_LENGTH characters is rejected.
    """
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{field.capitalize()} must not be empty")
    if len(trimmed) > MAX_LABEL_LENGTH:
        raise ValidationError(
            f"{field.capitalize()} must be at most {MAX_LABEL_LENGTH} characters, got {len(trimmed)}"
        )
    return trimmed


def validate_optional_label(value: Optional[str], field: str) -> Optional[str]:
    """Like validate_label, but blank or missing values become None."""
    if value is None or not value.strip():
        return None
    return validate_label(value, field)


def validate_u64(value: int, field: str) -> int:
    if value < 0 or value > MAX_U64:
        raise ValidationError(f"{field} must be between 0 and {MAX_U64}")
    return value


def validate_identity(identity: Optional[str]) -> IdentityKey:
    """Reject missing, blank and anonymous callers."""
    if identity is None or not identity.strip():
        raise AuthorizationError("Caller identity is required")
    identity = identity.strip()
    if identity == ANONYMOUS_IDENTITY:
        raise AuthorizationError("Anonymous callers cannot own data")
    return IdentityKey(identity)


def validate_preferences(prefs: UserPreferences) -> UserPreferences:
    try:
        pytz.timezone(prefs.timezone)
    except pytz.UnknownTimeZoneError:
        raise ValidationError(f"Unknown timezone: {prefs.timezone}")
    if prefs.polling_interval_seconds < 1:
        raise ValidationError("polling_interval_seconds must be at least 1")
    return prefs
