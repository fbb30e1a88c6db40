"""
Utils package initialization.
"""

from neudebri.utils.ids import generate_id
from neudebri.utils.dates import (
    utc_now,
    to_iso,
    parse_iso,
    parse_iso_or_none,
    start_of_day,
    start_of_week,
    in_window,
)

__all__ = [
    "generate_id",
    "utc_now",
    "to_iso",
    "parse_iso",
    "parse_iso_or_none",
    "start_of_day",
    "start_of_week",
    "in_window",
]
