"""Shared utility functions."""

from __future__ import annotations

import os
from pathlib import Path

_SIZE_BASE = 1024
_SIZE_UNITS = ("Byte", "KiB", "MiB", "GiB", "TiB")


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def size_exponent(size_bytes: int) -> int:
    """Return the power of 1024 used to display *size_bytes*.

    Zero is treated as one byte. Sizes beyond the TiB range stay in TiB.
    """
    # 1024 == 2 ** 10, so the exponent falls out of the bit length exactly
    exponent = (max(size_bytes, 1).bit_length() - 1) // 10
    return min(exponent, len(_SIZE_UNITS) - 1)


def format_size(size_bytes: int) -> str:
    """Convert a byte count to a string like ``'1.50 MiB'``."""
    exponent = size_exponent(size_bytes)
    value = size_bytes / _SIZE_BASE**exponent
    # 1023.999 KiB would print as "1024.00 KiB"
    if round(value, 2) >= _SIZE_BASE and exponent < len(_SIZE_UNITS) - 1:
        exponent += 1
        value = size_bytes / _SIZE_BASE**exponent
    return f"{value:.2f} {_SIZE_UNITS[exponent]}"


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"
