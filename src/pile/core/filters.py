"""Age-based eligibility filters."""

from __future__ import annotations

import os
from dataclasses import dataclass

SECONDS_PER_DAY = 86400


def passes(now: float, min_seconds: int, timestamp: float) -> bool:
    """Check whether *timestamp* lies more than *min_seconds* before *now*.

    A threshold of 0 disables the check. Timestamps in the future never pass,
    since their age cannot be computed. Ages are compared in whole seconds.
    """
    if min_seconds == 0:
        return True
    elapsed = now - timestamp
    if elapsed < 0:
        return False
    return int(elapsed) > min_seconds


def created_time(st: os.stat_result) -> float:
    """Return the creation time, falling back to st_ctime where unsupported."""
    return getattr(st, "st_birthtime", st.st_ctime)


@dataclass(frozen=True, slots=True)
class AgeFilter:
    """Minimum ages (in seconds) for the created/modified/accessed times."""

    min_created: int = 0
    min_modified: int = 0
    min_accessed: int = 0

    @classmethod
    def from_days(cls, created: int = 0, modified: int = 0, accessed: int = 0) -> AgeFilter:
        return cls(
            min_created=created * SECONDS_PER_DAY,
            min_modified=modified * SECONDS_PER_DAY,
            min_accessed=accessed * SECONDS_PER_DAY,
        )

    @property
    def active(self) -> dict[str, int]:
        """Enabled dimensions mapped to their threshold in whole days."""
        dims = {
            "created": self.min_created,
            "modified": self.min_modified,
            "accessed": self.min_accessed,
        }
        return {name: secs // SECONDS_PER_DAY for name, secs in dims.items() if secs > 0}

    def matches(self, st: os.stat_result, now: float) -> bool:
        """Check all three dimensions against a stat result."""
        return (
            passes(now, self.min_created, created_time(st))
            and passes(now, self.min_modified, st.st_mtime)
            and passes(now, self.min_accessed, st.st_atime)
        )
