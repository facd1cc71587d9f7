"""
Match access on top of the Match Store.
"""

from __future__ import annotations

from typing import Dict, List, Mapping

from footystats.analysis.filters import filter_matches
from footystats.data.match_store import MatchStore
from footystats.data.schema import Match
from footystats.features.outcomes import involves_team
from footystats.models.predictor import head_to_head_matches


class MatchService:
    """Filtering and lookups over the matches held by a ``MatchStore``."""

    def __init__(self, store: MatchStore):
        self.store = store

    def get_all_matches(self) -> List[Match]:
        return self.store.get_all()

    def get_filtered_matches(self, criteria: Mapping[str, str]) -> List[Match]:
        return filter_matches(self.store.get_all(), criteria)

    def get_team_matches(self, team: str) -> List[Match]:
        return [m for m in self.store.get_all() if involves_team(m, team)]

    def get_head_to_head_matches(self, home_team: str, away_team: str) -> List[Match]:
        return head_to_head_matches(self.store.get_all(), home_team, away_team)

    def get_available_teams(self) -> List[str]:
        """
        Every team appearing in the dataset, in order of first appearance.

        Names are de-duplicated case-insensitively, keeping the first spelling
        seen.
        """
        teams: Dict[str, str] = {}
        for match in self.store.get_all():
            for name in (match.home_team, match.away_team):
                if name and name.lower() not in teams:
                    teams[name.lower()] = name
        return list(teams.values())
