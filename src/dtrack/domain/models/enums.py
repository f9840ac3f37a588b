"""Enumerations for domain models."""

from enum import Enum


class AccountKind(str, Enum):
    """Variant tags of an AccountIdentifier."""

    ONCHAIN = "onchain"
    OFFCHAIN = "offchain"


class Theme(str, Enum):
    """UI themes a user may pick."""

    LIGHT = "light"
    DARK = "dark"


class Currency(str, Enum):
    """Currencies accepted as a display default."""

    USD = "USD"
    EUR = "EUR"
    ICP = "ICP"
