"""
Request orchestration: filter -> sort -> paginate -> statistics/prediction.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Sequence

import pandas as pd

from footystats.analysis.statistics import calculate_match_statistics
from footystats.api.params import PaginationParams
from footystats.api.responses import format_matches
from footystats.data.schema import Match
from footystats.models.predictor import run_prediction
from footystats.services.match_service import MatchService
from footystats.utils.dates import parse_match_date
from footystats.utils.logging_utils import get_logger

logger = get_logger(__name__)

_EPOCH = pd.Timestamp(0)


def sort_matches_by_date(matches: Sequence[Match]) -> List[Match]:
    """
    Sort matches newest first.

    Missing or unparsable dates sort as the Unix epoch; equal dates keep their
    original relative order.
    """

    def _key(match: Match) -> pd.Timestamp:
        parsed = parse_match_date(match.date)
        return parsed if parsed is not None else _EPOCH

    return sorted(matches, key=_key, reverse=True)


def get_pagination_info(
    page: int, page_size: int, total_matches: int
) -> Dict[str, Any]:
    total_pages = math.ceil(total_matches / page_size)
    return {
        "current_page": page,
        "page_size": page_size,
        "total_pages": total_pages,
        "total_matches": total_matches,
        "has_next_page": page < total_pages,
        "has_previous_page": page > 1,
    }


def apply_pagination(
    matches: Sequence[Match], pagination: Mapping[str, Any]
) -> List[Match]:
    offset = (pagination["current_page"] - 1) * pagination["page_size"]
    return list(matches[offset: offset + pagination["page_size"]])


def build_match_report(
    service: MatchService,
    criteria: Mapping[str, str],
    pagination: PaginationParams,
) -> Dict[str, Any]:
    """
    Build the ``data`` block of the match listing response.

    Statistics cover every filtered match, not just the returned page. The
    prediction block is only present when both ``home_team`` and
    ``away_team`` are part of the criteria; it is computed over the complete
    dataset, newest matches first.

    Parameters
    ----------
    service : MatchService
        Source of matches.
    criteria : Mapping[str, str]
        Sanitized filter criteria.
    pagination : PaginationParams
        Validated page and page size.

    Returns
    -------
    dict
        ``matches``, ``pagination``, ``statistics``, ``available_teams`` and
        optionally ``prediction``.
    """
    filtered = service.get_filtered_matches(criteria)
    ordered = sort_matches_by_date(filtered)

    page_info = get_pagination_info(pagination.page, pagination.page_size, len(ordered))
    page = apply_pagination(ordered, page_info)

    data: Dict[str, Any] = {
        "matches": format_matches(page),
        "pagination": page_info,
        "statistics": calculate_match_statistics(filtered).model_dump(),
        "available_teams": service.get_available_teams(),
    }

    home_team = criteria.get("home_team")
    away_team = criteria.get("away_team")
    if home_team and away_team:
        history = sort_matches_by_date(service.get_all_matches())
        data["prediction"] = run_prediction(home_team, away_team, history).model_dump()

    logger.info(
        "Served %d of %d matches (page %d/%d) for criteria %s",
        len(page),
        len(filtered),
        page_info["current_page"],
        page_info["total_pages"],
        dict(criteria),
    )
    return data
