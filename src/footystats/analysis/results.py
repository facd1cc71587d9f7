"""
Result models produced by the statistics and prediction engines.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class HeadToHeadStats(BaseModel):
    home_wins: int = 0
    away_wins: int = 0
    draws: int = 0
    home_win_percentage: float = 0.0
    away_win_percentage: float = 0.0
    draw_percentage: float = 0.0


class AverageGoals(BaseModel):
    average_total_goals: float = 0.0
    average_home_goals: float = 0.0
    average_away_goals: float = 0.0


class MatchStatistics(BaseModel):
    """Aggregate statistics over a (filtered) match collection."""

    both_teams_scored_percentage: float = 0.0
    average_goals: AverageGoals = Field(default_factory=AverageGoals)
    head_to_head: HeadToHeadStats = Field(default_factory=HeadToHeadStats)


class PredictionResult(BaseModel):
    """
    Predicted outcome of a fixture.

    ``predicted_winner`` is a team name, "draw", "uncertain" or
    "insufficient_data"; ``confidence`` is the winning outcome's historical
    percentage.
    """

    predicted_winner: str
    confidence: float
    reasoning: str


class ExpectedGoals(BaseModel):
    home: float = 0.0
    away: float = 0.0


class FormAnalysis(BaseModel):
    home_form: float = 0.0
    away_form: float = 0.0


class PredictionReport(BaseModel):
    """Full prediction bundle for a home/away pairing."""

    winner_prediction: PredictionResult
    expected_goals: ExpectedGoals
    both_teams_to_score_probability: float
    form_analysis: FormAnalysis
    head_to_head_stats: HeadToHeadStats
    confidence_level: float
