# path: src/footystats/features/outcomes.py
"""
Per-match features used by the statistics and prediction engines.

- Case-insensitive team matching (involvement, head-to-head pairing).
- Outcome labels (home_win / draw / away_win) from the home side's view.
- Results and league points (3/1/0) from a given team's perspective.
"""

from __future__ import annotations

from typing import Optional

from footystats.data.schema import Match

POINTS = {"win": 3, "draw": 1, "loss": 0}


def same_team(name: Optional[str], team: str) -> bool:
    """Case-insensitive team name comparison; an absent name never matches."""
    return name is not None and name.lower() == team.lower()


def involves_team(match: Match, team: str) -> bool:
    """True if ``team`` played in ``match`` on either side."""
    return same_team(match.home_team, team) or same_team(match.away_team, team)


def is_head_to_head(match: Match, team_a: str, team_b: str) -> bool:
    """True if ``match`` was played between the two teams, in either order."""
    return (
        same_team(match.home_team, team_a) and same_team(match.away_team, team_b)
    ) or (
        same_team(match.home_team, team_b) and same_team(match.away_team, team_a)
    )


def compute_outcome_label(
    home_goals: int,
    away_goals: int,
) -> str:
    """
    Compute the match outcome from the home team's perspective.

    Parameters
    ----------
    home_goals : int
        Goals scored by the home team.
    away_goals : int
        Goals scored by the away team.

    Returns
    -------
    str
        One of 'home_win', 'draw', 'away_win'.
    """
    if home_goals > away_goals:
        return "home_win"
    if home_goals < away_goals:
        return "away_win"
    return "draw"


def team_result(match: Match, team: str) -> Optional[str]:
    """
    Result of ``match`` from ``team``'s perspective.

    Returns
    -------
    str | None
        'win', 'draw' or 'loss'; None if either team name or either score is
        missing.
    """
    if match.home_team is None or match.away_team is None or not match.has_result:
        return None

    outcome = compute_outcome_label(match.home_goals, match.away_goals)
    if outcome == "draw":
        return "draw"

    is_home = same_team(match.home_team, team)
    won = outcome == "home_win" if is_home else outcome == "away_win"
    return "win" if won else "loss"


def team_points(match: Match, team: str) -> int:
    """League points ``team`` earned in ``match``; 0 when there is no result."""
    result = team_result(match, team)
    return POINTS[result] if result is not None else 0


def goals_scored_by(match: Match, team: str) -> Optional[int]:
    """Goals ``team`` scored in ``match`` (home goals if it was the home side)."""
    if same_team(match.home_team, team):
        return match.home_goals
    return match.away_goals
