"""Pydantic schemas for labels, products and preferences."""

from pydantic import BaseModel, Field

from dtrack.domain.models import Currency, Theme, UserPreferences


class LabelRequest(BaseModel):
    label: str


class ProductRequest(BaseModel):
    product: str


class PreferencesSchema(BaseModel):
    """Request and response schema for user preferences."""

    default_currency: Currency = Currency.USD
    timezone: str = "UTC"
    notification_enabled: bool = True
    polling_interval_seconds: int = Field(default=60, ge=1)
    theme: Theme = Theme.LIGHT

    def to_domain(self) -> UserPreferences:
        return UserPreferences(**self.model_dump())

    @classmethod
    def from_domain(cls, prefs: UserPreferences) -> "PreferencesSchema":
        return cls(
            default_currency=prefs.default_currency,
            timezone=prefs.timezone,
            notification_enabled=prefs.notification_enabled,
            polling_interval_seconds=prefs.polling_interval_seconds,
            theme=prefs.theme,
        )
