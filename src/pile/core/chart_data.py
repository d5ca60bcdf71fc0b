"""Builds pie chart slices from the current session state."""

from __future__ import annotations

from collections.abc import Collection, Sequence

from pile.models.candidate import CandidateFile
from pile.models.chart_slice import ChartSlice
from pile.utils import format_size

FILE_FILL = "•"
OTHER_FILL = "-"
OTHER_COLOR = (100, 100, 100)


def page_slots(candidates: Sequence[CandidateFile], offset: int, page_size: int) -> list[CandidateFile]:
    """Return the candidates shown on the page starting at *offset*."""
    return list(candidates[offset:offset + page_size])


def file_label(slot: int, candidate: CandidateFile) -> str:
    return f"({slot}) {format_size(candidate.size_bytes):>11} -- {candidate.name}"


def build_slices(
    candidates: Sequence[CandidateFile],
    offset: int,
    live_total: int,
    deleted: Collection[int],
    page_size: int,
) -> list[ChartSlice]:
    """Create one slice per surviving file on the page plus an "Other" slice.

    Slot numbers are 1-based positions on the page and do not shift when
    an earlier slot has been deleted. *deleted* holds 0-based slot indices.

    Raises:
        ValueError: If *live_total* is not positive.
    """
    if live_total <= 0:
        raise ValueError(f"live total must be positive, got {live_total}")

    slices: list[ChartSlice] = []
    shown = 0
    for index, candidate in enumerate(page_slots(candidates, offset, page_size)):
        if index in deleted:
            continue
        slot = index + 1
        slices.append(
            ChartSlice(
                label=file_label(slot, candidate),
                value=candidate.size_bytes / live_total,
                color=slot,
                fill=FILE_FILL,
            )
        )
        shown += candidate.size_bytes

    other = live_total - shown
    slices.append(
        ChartSlice(
            label=f"Other: {format_size(other)}",
            value=other / live_total,
            color=OTHER_COLOR,
            fill=OTHER_FILL,
        )
    )
    return slices
