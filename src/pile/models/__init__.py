"""Pile data models."""

from pile.models.candidate import CandidateFile, ScanResult
from pile.models.chart_slice import ChartSlice

__all__ = [
    "CandidateFile",
    "ChartSlice",
    "ScanResult",
]
