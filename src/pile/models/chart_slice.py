"""Pie chart slice dataclass."""

from __future__ import annotations

from dataclasses import dataclass

# Either a 256-color palette index or an RGB triple, as understood by click.style
Color = int | tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class ChartSlice:
    """One entry handed to the pie chart renderer."""

    label: str
    value: float
    color: Color
    fill: str
