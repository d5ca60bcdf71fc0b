"""Directory scanning and ranking."""

from __future__ import annotations

import logging
import os
import stat
import time
from pathlib import Path

from pile.core.filters import AgeFilter
from pile.models.candidate import CandidateFile, ScanResult
from pile.utils import format_elapsed

log = logging.getLogger(__name__)


class ScanError(Exception):
    """Raised when the scan root cannot be opened."""


def scan(
    root: Path | str,
    min_created: int = 0,
    min_modified: int = 0,
    min_accessed: int = 0,
    *,
    now: float | None = None,
) -> ScanResult:
    """Walk *root* recursively and collect files eligible for deletion.

    Thresholds are in seconds; 0 disables a dimension. Every regular file
    counts towards ``total_bytes`` whether or not it passes the filters.
    Unreadable entries below the root are logged and skipped.

    Returns:
        ScanResult with candidates sorted by size, largest first. The order
        of equally sized files is unspecified.

    Raises:
        ScanError: If the root itself cannot be read.
    """
    root = Path(root)
    age_filter = AgeFilter(min_created, min_modified, min_accessed)
    if now is None:
        now = time.time()
    started = time.monotonic()

    try:
        root_stat = root.stat()
    except OSError as e:
        raise ScanError(f"Cannot open {root}: {e}") from e

    result = ScanResult(root=root)
    if stat.S_ISDIR(root_stat.st_mode):
        try:
            with os.scandir(root) as it:
                first_level = list(it)
        except OSError as e:
            raise ScanError(f"Cannot open {root}: {e}") from e
        _walk(first_level, age_filter, now, result)
    else:
        _visit(root, root_stat, age_filter, now, result)

    result.candidates.sort(key=lambda c: c.size_bytes, reverse=True)

    log.info(
        "Scanned %d files in %s: %d candidates, %d skipped",
        result.files_seen,
        format_elapsed(time.monotonic() - started),
        len(result.candidates),
        result.skipped,
    )
    return result


def _walk(entries: list[os.DirEntry], age_filter: AgeFilter, now: float, result: ScanResult) -> None:
    """Visit entries depth-first with an explicit stack."""
    stack: list[os.DirEntry] = list(reversed(entries))
    while stack:
        entry = stack.pop()
        try:
            st = entry.stat(follow_symlinks=False)
        except OSError as e:
            _skip(result, e)
            continue

        if stat.S_ISDIR(st.st_mode):
            try:
                with os.scandir(entry.path) as it:
                    children = list(it)
            except OSError as e:
                _skip(result, e)
                continue
            stack.extend(reversed(children))
        else:
            _visit(Path(entry.path), st, age_filter, now, result)


def _visit(path: Path, st: os.stat_result, age_filter: AgeFilter, now: float, result: ScanResult) -> None:
    if not stat.S_ISREG(st.st_mode):
        return
    result.files_seen += 1
    result.total_bytes += st.st_size
    if age_filter.matches(st, now):
        result.candidates.append(CandidateFile(path=path, size_bytes=st.st_size))


def _skip(result: ScanResult, error: OSError) -> None:
    result.skipped += 1
    log.warning("%s. Skipping...", error)
