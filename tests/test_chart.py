"""Tests for the terminal pie chart."""

from __future__ import annotations

import click

from pile.chart import draw, render, slice_at
from pile.models.chart_slice import ChartSlice


def _plain(lines: list[str]) -> list[str]:
    return [click.unstyle(line) for line in lines]


HALVES = [
    ChartSlice(label="first", value=0.5, color=1, fill="a"),
    ChartSlice(label="second", value=0.5, color=(100, 100, 100), fill="b"),
]


class TestSliceAt:
    def test_picks_by_cumulative_value(self):
        assert slice_at(HALVES, 0.1).label == "first"
        assert slice_at(HALVES, 0.6).label == "second"

    def test_rounding_falls_back_to_last(self):
        slices = [ChartSlice(label="only", value=0.999, color=1, fill="x")]
        assert slice_at(slices, 0.9995).label == "only"


class TestRender:
    def test_full_circle_shape(self):
        lines = _plain(render([ChartSlice(label="all", value=1.0, color=2, fill="#")], legend=False))
        assert len(lines) == 13
        assert lines[0] == " " * 18 + "#" + " " * 18
        assert lines[6] == "#" * 37

    def test_halves_split_left_and_right(self):
        lines = _plain(render(HALVES, legend=False))
        assert lines[6] == "b" * 18 + "a" * 19

    def test_legend_is_centered(self):
        lines = _plain(render(HALVES))
        assert lines[5].endswith("   a first")
        assert lines[6].endswith("   b second")

    def test_legend_longer_than_chart(self):
        slices = [ChartSlice(label=str(i), value=0.05, color=i, fill="x") for i in range(20)]
        lines = _plain(render(slices, radius=2, aspect_ratio=1))
        assert len(lines) == 20

    def test_empty(self):
        assert render([]) == []


def test_draw_echoes(capsys):
    draw(HALVES)
    out = click.unstyle(capsys.readouterr().out)
    assert "a first" in out
    assert "b second" in out
