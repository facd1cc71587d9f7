"""
Date parsing helpers shared by the filter engine, the validator and sorting.
"""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd


def parse_match_date(value: Any, to_utc: bool = True) -> Optional[pd.Timestamp]:
    """
    Parse a calendar date string into a pandas Timestamp.

    Accepts the flexible formats understood by ``pandas.to_datetime``
    ("2023-06-01", "2023-06-01T18:30:00+02:00", "June 1, 2023", ...).

    Parameters
    ----------
    value : Any
        Raw value; anything other than a non-empty string yields None.
    to_utc : bool
        If True, timezone-aware values are converted to UTC and made naive so
        that any two parsed dates can be compared. If False, the wall-clock
        time is kept as written.

    Returns
    -------
    Optional[pd.Timestamp]
        The parsed timestamp, or None if it cannot be parsed.
    """
    if not isinstance(value, str) or not value.strip():
        return None

    try:
        ts = pd.to_datetime(value.strip(), errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None

    if ts is None or pd.isna(ts):
        return None

    if to_utc and ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts
