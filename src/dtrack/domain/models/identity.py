"""Caller identity used to partition owner-scoped data."""

from typing import NewType

# Opaque, totally ordered key supplied by the caller context.
IdentityKey = NewType("IdentityKey", str)

# Textual form of the anonymous principal; never owns data.
ANONYMOUS_IDENTITY = IdentityKey("2vxsx-fae")
