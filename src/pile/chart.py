"""Terminal pie chart rendering."""

from __future__ import annotations

import math

import click

from pile.models.chart_slice import ChartSlice

RADIUS = 6
ASPECT_RATIO = 3


def slice_at(slices: list[ChartSlice], fraction: float) -> ChartSlice:
    """Return the slice covering *fraction* of the way round the pie."""
    cumulative = 0.0
    for item in slices:
        cumulative += item.value
        if fraction < cumulative:
            return item
    return slices[-1]


def render(
    slices: list[ChartSlice],
    radius: int = RADIUS,
    aspect_ratio: int = ASPECT_RATIO,
    legend: bool = True,
) -> list[str]:
    """Render *slices* as styled text lines, starting at 12 o'clock and going clockwise.

    Characters are roughly twice as tall as they are wide, so each row is
    stretched horizontally by *aspect_ratio*.
    """
    if not slices:
        return []

    width = 2 * radius * aspect_ratio + 1
    lines: list[str] = []
    for row in range(-radius, radius + 1):
        cells: list[str] = []
        for col in range(-radius * aspect_ratio, radius * aspect_ratio + 1):
            x = col / aspect_ratio
            if x * x + row * row > radius * radius:
                cells.append(" ")
                continue
            angle = math.atan2(x, -row) % math.tau
            item = slice_at(slices, angle / math.tau)
            cells.append(click.style(item.fill, fg=item.color))
        lines.append("".join(cells))

    if legend:
        entries = [click.style(f"{item.fill} {item.label}", fg=item.color) for item in slices]
        while len(lines) < len(entries):
            lines.append(" " * width)
        start = (len(lines) - len(entries)) // 2
        for i, entry in enumerate(entries):
            lines[start + i] = f"{lines[start + i]}   {entry}"

    return lines


def draw(slices: list[ChartSlice]) -> None:
    """Print the pie chart with its legend."""
    click.echo()
    for line in render(slices):
        click.echo(line.rstrip())
