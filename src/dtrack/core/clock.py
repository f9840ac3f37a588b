"""Clock helpers for time-derived identifiers."""

import time
from typing import Callable

# Returns nanoseconds since the Unix epoch.
Clock = Callable[[], int]

NANOS_PER_SECOND = 1_000_000_000


def now_ns() -> int:
    """Return the current wall-clock time in epoch nanoseconds."""
    return time.time_ns()


def epoch_seconds(nanos: int) -> int:
    """Truncate epoch nanoseconds to whole seconds."""
    return nanos // NANOS_PER_SECOND
