# path: src/footystats/models/predictor.py
"""
Rule-based head-to-head predictor for FootyStats.

There is no trained model here: the predicted outcome is simply the most
frequent historical result between the two teams, and the accompanying
figures (expected goals, form, both-teams-to-score) are descriptive
statistics over past matches.
"""

from __future__ import annotations

from typing import List, Sequence

from footystats.analysis.results import (
    ExpectedGoals,
    FormAnalysis,
    HeadToHeadStats,
    PredictionReport,
    PredictionResult,
)
from footystats.analysis.statistics import (
    both_teams_to_score_probability,
    form_index,
    head_to_head_stats,
)
from footystats.config import CONFIDENCE_THRESHOLDS, OUTCOME_LABELS
from footystats.data.schema import Match
from footystats.features.outcomes import goals_scored_by, involves_team, is_head_to_head
from footystats.models.metrics import mean
from footystats.utils.logging_utils import get_logger

logger = get_logger(__name__)

INSUFFICIENT_DATA = "insufficient_data"
UNCERTAIN = "uncertain"
DRAW = "draw"


def head_to_head_matches(
    matches: Sequence[Match],
    team_a: str,
    team_b: str,
) -> List[Match]:
    """Matches played between ``team_a`` and ``team_b`` in either home/away order."""
    return [m for m in matches if is_head_to_head(m, team_a, team_b)]


def _outcome_percentages(stats: HeadToHeadStats) -> dict[str, float]:
    return {
        "home_win": stats.home_win_percentage,
        "away_win": stats.away_win_percentage,
        "draw": stats.draw_percentage,
    }


def _format_percentage(value: float) -> str:
    return f"{value:g}"


def build_reasoning(winner: str, percentage: float, match_count: int) -> str:
    """
    Human-readable explanation of a prediction.

    Parameters
    ----------
    winner : str
        Predicted winner label (team name, "draw" or "uncertain").
    percentage : float
        Historical percentage of the predicted outcome.
    match_count : int
        Number of head-to-head matches the prediction is based on.
    """
    if match_count == 0:
        return "No historical matches available between these teams"

    reasoning = f"Based on {match_count} historical match"
    if match_count > 1:
        reasoning += "es"

    if winner == DRAW:
        reasoning += (
            f", draws are most common ({_format_percentage(percentage)}% of matches)"
        )
    elif winner != UNCERTAIN:
        reasoning += (
            f", {winner} has won {_format_percentage(percentage)}% "
            "of previous encounters"
        )

    return reasoning


def predict_winner(
    home_team: str,
    away_team: str,
    head_to_head: Sequence[Match],
) -> PredictionResult:
    """
    Predict the winner of a fixture from the teams' head-to-head history.

    The outcome (home win, away win, draw) with the highest historical
    percentage wins; exact ties go to the earlier outcome in
    ``OUTCOME_LABELS`` order. The confidence is that percentage.

    Parameters
    ----------
    home_team, away_team : str
        Team names as supplied by the caller; used as winner labels.
    head_to_head : Sequence[Match]
        Previous matches between the two teams.

    Returns
    -------
    PredictionResult
    """
    if not head_to_head:
        return PredictionResult(
            predicted_winner=INSUFFICIENT_DATA,
            confidence=0.0,
            reasoning="No historical data available for these teams",
        )

    percentages = _outcome_percentages(head_to_head_stats(head_to_head))
    # max() keeps the first of equal values, so label order is the tie-break.
    outcome = max(OUTCOME_LABELS, key=lambda label: percentages[label])
    confidence = percentages[outcome]

    winner = {"home_win": home_team, "away_win": away_team, "draw": DRAW}.get(
        outcome, UNCERTAIN
    )

    return PredictionResult(
        predicted_winner=winner,
        confidence=confidence,
        reasoning=build_reasoning(winner, confidence, len(head_to_head)),
    )


def expected_goals(team: str, matches: Sequence[Match]) -> float:
    """
    Average goals scored by ``team`` per match.

    Counts the team's home goals when it played at home and its away goals
    otherwise, over matches where that side of the score is recorded.
    Returns 0.0 if the team is empty or no such match exists.
    """
    if not team:
        return 0.0

    goals = []
    for match in matches:
        if not involves_team(match, team):
            continue
        scored = goals_scored_by(match, team)
        if scored is not None:
            goals.append(scored)
    return mean(sum(goals), len(goals))


def confidence_level(match_count: int) -> float:
    """Coarse confidence bucket based only on the number of head-to-head matches."""
    for minimum, level in CONFIDENCE_THRESHOLDS:
        if match_count >= minimum:
            return level
    return 0.0


def run_prediction(
    home_team: str,
    away_team: str,
    matches: Sequence[Match],
) -> PredictionReport:
    """
    Build the full prediction bundle for ``home_team`` vs ``away_team``.

    The head-to-head subset drives the winner prediction, the
    both-teams-to-score probability and the confidence level; expected goals
    and form are computed over every match passed in.

    Parameters
    ----------
    home_team, away_team : str
        Fixture to predict.
    matches : Sequence[Match]
        The complete match history (not pre-filtered to the fixture).

    Returns
    -------
    PredictionReport
    """
    h2h = head_to_head_matches(matches, home_team, away_team)
    logger.info(
        "Running prediction for %s vs %s over %d head-to-head matches",
        home_team,
        away_team,
        len(h2h),
    )

    return PredictionReport(
        winner_prediction=predict_winner(home_team, away_team, h2h),
        expected_goals=ExpectedGoals(
            home=expected_goals(home_team, matches),
            away=expected_goals(away_team, matches),
        ),
        both_teams_to_score_probability=both_teams_to_score_probability(h2h),
        form_analysis=FormAnalysis(
            home_form=form_index(matches, home_team),
            away_form=form_index(matches, away_team),
        ),
        head_to_head_stats=head_to_head_stats(h2h),
        confidence_level=confidence_level(len(h2h)),
    )
