"""Tests for chart slice construction."""

from __future__ import annotations

from pathlib import Path

import pytest

from pile.core.chart_data import OTHER_COLOR, build_slices, file_label
from pile.models.candidate import CandidateFile


def _candidates(*sizes: int) -> list[CandidateFile]:
    return [CandidateFile(path=Path(f"/data/f{i}.bin"), size_bytes=s) for i, s in enumerate(sizes)]


class TestBuildSlices:
    def test_page_files_then_other(self):
        slices = build_slices(_candidates(100, 20, 10, 5), 0, 135, set(), 5)
        assert len(slices) == 5
        assert [s.value for s in slices[:4]] == [100 / 135, 20 / 135, 10 / 135, 5 / 135]
        other = slices[-1]
        assert other.label == "Other: 0.00 Byte"
        assert other.value == 0
        assert other.color == OTHER_COLOR
        assert other.fill == "-"

    def test_labels(self):
        slices = build_slices(_candidates(100, 2048), 0, 5000, set(), 5)
        assert slices[0].label == "(1) 100.00 Byte -- f0.bin"
        assert slices[1].label == "(2)    2.00 KiB -- f1.bin"
        assert slices[0].fill == "•"
        assert slices[0].color == 1

    def test_only_one_page(self):
        candidates = _candidates(60, 50, 40, 30, 20, 10)
        slices = build_slices(candidates, 0, 300, set(), 5)
        assert len(slices) == 6
        assert slices[-1].label == "Other: 100.00 Byte"
        assert slices[-1].value == pytest.approx(100 / 300)

    def test_second_page_numbering_restarts(self):
        candidates = _candidates(60, 50, 40, 30, 20, 10)
        slices = build_slices(candidates, 5, 300, set(), 5)
        assert [s.label for s in slices] == [file_label(1, candidates[5]), "Other: 290.00 Byte"]

    def test_deleted_slots_keep_numbers(self):
        candidates = _candidates(50, 40, 30)
        slices = build_slices(candidates, 0, 200, {1}, 5)
        assert [s.label[:3] for s in slices[:-1]] == ["(1)", "(3)"]
        assert [s.color for s in slices[:-1]] == [1, 3]
        assert slices[-1].label == "Other: 120.00 Byte"

    def test_all_deleted_leaves_only_other(self):
        slices = build_slices(_candidates(50, 40), 0, 110, {0, 1}, 5)
        assert len(slices) == 1
        assert slices[0].value == 1.0

    def test_other_uses_live_total(self):
        candidates = _candidates(100, 20, 10, 5)
        slices = build_slices(candidates, 0, 35, {0}, 5)
        assert [s.value for s in slices[:-1]] == [20 / 35, 10 / 35, 5 / 35]
        assert slices[-1].value == 0

    def test_values_sum_to_one(self):
        slices = build_slices(_candidates(70, 20, 9), 0, 1000, {1}, 5)
        assert sum(s.value for s in slices) == pytest.approx(1.0)

    def test_idempotent(self):
        candidates = _candidates(70, 20, 9)
        assert build_slices(candidates, 0, 500, {2}, 5) == build_slices(candidates, 0, 500, {2}, 5)

    @pytest.mark.parametrize("total", [0, -5])
    def test_requires_positive_total(self, total):
        with pytest.raises(ValueError):
            build_slices(_candidates(1), 0, total, set(), 5)
