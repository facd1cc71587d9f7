"""
Response envelope helpers.

Successful responses look like ``{"success": true, "data": ..., "timestamp":
...}``; failures like ``{"success": false, "error": {"message", "code",
"timestamp"}}``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from footystats.data.schema import Match


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def success_response(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data, "timestamp": _timestamp()}


def error_response(
    message: str,
    code: int = 400,
    validation_errors: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    error: Dict[str, Any] = {
        "message": message,
        "code": code,
        "timestamp": _timestamp(),
    }
    if validation_errors:
        error["validation_errors"] = validation_errors
    return {"success": False, "error": error}


def format_match(match: Match) -> Dict[str, Any]:
    """Public shape of a match: every field present, absent ones as None."""
    return {
        "id": match.id,
        "date": match.date,
        "home_team": match.home_team,
        "away_team": match.away_team,
        "score": {"home": match.home_goals, "away": match.away_goals},
        "competition": match.competition,
        "season": match.season,
    }


def format_matches(matches: Iterable[Match]) -> List[Dict[str, Any]]:
    return [format_match(m) for m in matches]
