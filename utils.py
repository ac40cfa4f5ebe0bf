# utils.py
"""General utility functions."""

import datetime
from typing import Optional

SIZE_UNITS = [
    ("EB", 1024 ** 6),
    ("PB", 1024 ** 5),
    ("TB", 1024 ** 4),
    ("GB", 1024 ** 3),
    ("MB", 1024 ** 2),
    ("KB", 1024),
]


def format_size(num_bytes: int) -> str:
    """Human readable binary size, e.g. 10485760 -> '10.0MB', 512 -> '512B'."""
    for suffix, factor in SIZE_UNITS:
        if num_bytes >= factor:
            return f"{num_bytes / factor:.1f}{suffix}"
    return f"{num_bytes}B"


def format_stamp(value: Optional[datetime.datetime]) -> str:
    """Short timestamp in the 'Jan _2 15:04:05' layout (day padded with a space)."""
    if value is None:
        return ""
    return f"{value:%b} {value.day:2d} {value:%H:%M:%S}"
