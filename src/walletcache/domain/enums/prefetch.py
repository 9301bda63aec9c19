from enum import Enum


class PrefetchStatus(str, Enum):
    """Outcome of a single prefetch run."""

    SKIPPED_FRESH = "SKIPPED_FRESH"
    NO_STORAGE = "NO_STORAGE"
    NOT_CONFIGURED = "NOT_CONFIGURED"
    CACHED = "CACHED"
    FAILED = "FAILED"
