# path: src/footystats/analysis/statistics.py
"""
Descriptive statistics over match collections.

All functions are pure: they take a sequence of matches and return plain
numbers or result models. Matches without a full score are left out of any
figure that needs both scores; they never raise.
"""

from __future__ import annotations

from typing import List, Sequence

from footystats.analysis.results import AverageGoals, HeadToHeadStats, MatchStatistics
from footystats.config import RECENT_FORM_WINDOW
from footystats.data.schema import Match
from footystats.features.outcomes import (
    POINTS,
    compute_outcome_label,
    involves_team,
    team_points,
)
from footystats.models.metrics import mean, percentage
from footystats.utils.logging_utils import get_logger

logger = get_logger(__name__)


def _with_result(matches: Sequence[Match]) -> List[Match]:
    return [m for m in matches if m.has_result]


def _both_scored(match: Match) -> bool:
    return match.has_result and match.home_goals > 0 and match.away_goals > 0


def both_teams_scored_percentage(matches: Sequence[Match]) -> float:
    """
    Share of matches in which both teams scored.

    The denominator is every match passed in, including those without a
    result.
    """
    both_scored = sum(1 for m in matches if _both_scored(m))
    return percentage(both_scored, len(matches))


def both_teams_to_score_probability(matches: Sequence[Match]) -> float:
    """
    Share of completed matches in which both teams scored.

    Unlike ``both_teams_scored_percentage`` the denominator only counts
    matches with both scores recorded.
    """
    completed = _with_result(matches)
    both_scored = sum(1 for m in completed if _both_scored(m))
    return percentage(both_scored, len(completed))


def average_goals(matches: Sequence[Match]) -> AverageGoals:
    """
    Average total, home and away goals per match.

    Missing score fields count as zero goals; every match counts towards the
    denominator.
    """
    if not matches:
        return AverageGoals()

    home = sum(m.home_goals or 0 for m in matches)
    away = sum(m.away_goals or 0 for m in matches)
    count = len(matches)

    return AverageGoals(
        average_total_goals=mean(home + away, count),
        average_home_goals=mean(home, count),
        average_away_goals=mean(away, count),
    )


def form_index(
    matches: Sequence[Match],
    team: str,
    recent_games: int = RECENT_FORM_WINDOW,
) -> float:
    """
    Recent form of ``team`` as a percentage of the maximum available points.

    Takes the first ``recent_games`` matches involving the team in the order
    given (callers sort beforehand if they want the most recent ones) and
    awards 3 points per win, 1 per draw and 0 per loss or missing result.

    Parameters
    ----------
    matches : Sequence[Match]
        Matches to search, already in the desired order.
    team : str
        Team name, compared case-insensitively.
    recent_games : int
        Window size.

    Returns
    -------
    float
        ``points / (3 * considered) * 100`` rounded to two places; 0.0 if the
        team is empty or has no matches.
    """
    if not team:
        return 0.0

    team_matches = [m for m in matches if involves_team(m, team)]
    recent = team_matches[: max(recent_games, 0)]
    if not recent:
        return 0.0

    points = sum(team_points(m, team) for m in recent)
    return percentage(points, POINTS["win"] * len(recent))


def head_to_head_stats(matches: Sequence[Match]) -> HeadToHeadStats:
    """
    Home win / away win / draw breakdown over matches with a full score.

    Percentages are relative to the number of completed matches and sum to
    roughly 100 whenever there is at least one.
    """
    completed = _with_result(matches)
    if not completed:
        return HeadToHeadStats()

    counts = {"home_win": 0, "away_win": 0, "draw": 0}
    for m in completed:
        counts[compute_outcome_label(m.home_goals, m.away_goals)] += 1

    total = len(completed)
    return HeadToHeadStats(
        home_wins=counts["home_win"],
        away_wins=counts["away_win"],
        draws=counts["draw"],
        home_win_percentage=percentage(counts["home_win"], total),
        away_win_percentage=percentage(counts["away_win"], total),
        draw_percentage=percentage(counts["draw"], total),
    )


def calculate_match_statistics(matches: Sequence[Match]) -> MatchStatistics:
    """Combined statistics block reported alongside a list of matches."""
    if not matches:
        return MatchStatistics()

    stats = MatchStatistics(
        both_teams_scored_percentage=both_teams_scored_percentage(matches),
        average_goals=average_goals(matches),
        head_to_head=head_to_head_stats(matches),
    )
    logger.debug(
        "Statistics over %d matches: btts=%s avg_total=%s",
        len(matches),
        stats.both_teams_scored_percentage,
        stats.average_goals.average_total_goals,
    )
    return stats
