"""Scan result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CandidateFile:
    """Regular file that passed every active age filter.

    The size is read once during the scan. Deleting the file later does not
    touch this record; the session tracks deletions separately.
    """

    path: Path
    size_bytes: int

    @property
    def name(self) -> str:
        return self.path.name or str(self.path)


@dataclass(slots=True)
class ScanResult:
    """Result of scanning a directory tree.

    ``total_bytes`` counts every regular file seen, including the ones the age
    filters rejected, so it is usually larger than the sum of the candidates.
    """

    root: Path
    total_bytes: int = 0
    candidates: list[CandidateFile] = field(default_factory=list)
    files_seen: int = 0
    skipped: int = 0

    @property
    def candidate_bytes(self) -> int:
        return sum(c.size_bytes for c in self.candidates)
