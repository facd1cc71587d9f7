# path: src/footystats/analysis/filters.py
"""
Predicate-based match filtering.

Each criterion key maps onto a predicate in ``PREDICATES``. Keys starting with
``score_`` compare a score component, and any other key falls back to a
case-insensitive comparison against the match field of the same name. A match
is kept only if it satisfies every criterion.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from footystats.data.schema import Match
from footystats.features.outcomes import involves_team, same_team
from footystats.utils.dates import parse_match_date

Predicate = Callable[[Match, str, str], bool]

SCORE_PREFIX = "score_"
TRUE_VALUES = {"true", "1", "yes"}
FALSE_VALUES = {"false", "0", "no"}


def parse_bool(value: str) -> Optional[bool]:
    """Parse 'true'/'1'/'yes' and 'false'/'0'/'no'; anything else gives None."""
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    return None


def _as_text(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


def _matches_team(match: Match, key: str, value: str) -> bool:
    if match.home_team is None or match.away_team is None:
        return False
    return involves_team(match, value)


def _matches_home_team(match: Match, key: str, value: str) -> bool:
    return same_team(match.home_team, value)


def _matches_away_team(match: Match, key: str, value: str) -> bool:
    return same_team(match.away_team, value)


def _matches_date(match: Match, key: str, value: str) -> bool:
    # Lower bound, not equality: keeps matches played on or after the date.
    match_date = parse_match_date(match.date)
    since = parse_match_date(value)
    if match_date is None or since is None:
        return False
    return match_date >= since


def _matches_both_teams_scored(match: Match, key: str, value: str) -> bool:
    if not match.has_result:
        return False
    expected = parse_bool(value)
    if expected is None:
        return False
    both_scored = match.home_goals > 0 and match.away_goals > 0
    return both_scored == expected


def _matches_score(match: Match, key: str, value: str) -> bool:
    if match.score is None:
        return False
    component = _as_text(match.score.lookup(key[len(SCORE_PREFIX):]))
    return component is not None and component == value


def _matches_default(match: Match, key: str, value: str) -> bool:
    field_value = _as_text(match.lookup(key))
    return field_value is not None and field_value.lower() == value.lower()


def _always(match: Match, key: str, value: str) -> bool:
    return True


PREDICATES: Dict[str, Predicate] = {
    "team": _matches_team,
    "home_team": _matches_home_team,
    "away_team": _matches_away_team,
    "date": _matches_date,
    "both_teams_scored": _matches_both_teams_scored,
    # Pagination is applied after filtering.
    "page": _always,
    "page_size": _always,
}


def resolve_predicate(key: str) -> Predicate:
    """Return the predicate that evaluates criterion ``key``."""
    if key in PREDICATES:
        return PREDICATES[key]
    if key.startswith(SCORE_PREFIX):
        return _matches_score
    return _matches_default


def matches_criteria(match: Match, criteria: Mapping[str, str]) -> bool:
    """True if ``match`` satisfies every criterion."""
    return all(
        resolve_predicate(key)(match, key, value) for key, value in criteria.items()
    )


def filter_matches(
    matches: Sequence[Match],
    criteria: Mapping[str, str],
) -> List[Match]:
    """
    Return the matches that satisfy all criteria, in their original order.

    Parameters
    ----------
    matches : Sequence[Match]
        Candidate matches.
    criteria : Mapping[str, str]
        Predicate name -> value. Empty criteria keep every match.

    Returns
    -------
    List[Match]
    """
    if not criteria:
        return list(matches)

    return [match for match in matches if matches_criteria(match, criteria)]
