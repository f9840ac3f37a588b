"""Per-owner user preferences."""

from dataclasses import dataclass

from dtrack.domain.models.enums import Currency, Theme


@dataclass
class UserPreferences:
    """Display and polling preferences for one owner."""

    default_currency: Currency = Currency.USD
    timezone: str = "UTC"
    notification_enabled: bool = True
    polling_interval_seconds: int = 60
    theme: Theme = Theme.LIGHT

    def __post_init__(self) -> None:
        if isinstance(self.default_currency, str):
            self.default_currency = Currency(self.default_currency)
        if isinstance(self.theme, str):
            self.theme = Theme(self.theme)
