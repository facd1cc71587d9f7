"""
Factory helpers for building match records in tests.
"""

from footystats.data.schema import Match


def make_match(
    home="Arsenal",
    away="Chelsea",
    home_goals=None,
    away_goals=None,
    date="2024-01-01",
    **extra,
) -> Match:
    """
    Create a match; the score is only attached when a goal count is given.
    """
    record = {"home_team": home, "away_team": away, "date": date, **extra}
    if home_goals is not None or away_goals is not None:
        record["score"] = {"home": home_goals, "away": away_goals}
    return Match.model_validate(record)
