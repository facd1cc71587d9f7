# path: src/footystats/api/main.py
"""
FastAPI app exposing FootyStats match data, statistics and predictions.

Endpoints:
- GET  /health                 -> simple health check
- GET  /  and  GET /matches    -> filtered, paginated matches + statistics
                                  (+ prediction when home_team and away_team
                                  are both given)
- GET  /teams                  -> every team in the dataset
- GET  /teams/{team}/matches   -> all matches of one team, newest first
- GET  /prediction             -> prediction bundle for home_team vs away_team
- POST /reload                 -> re-read the dataset from disk

Run from project root:

    uvicorn footystats.api.main:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from footystats.api.params import (
    sanitize_string,
    validate_and_sanitize_params,
    validate_pagination,
)
from footystats.api.responses import error_response, format_matches, success_response
from footystats.data.match_store import MatchStore
from footystats.errors import (
    DataUnavailableError,
    FootballAPIError,
    ValidationFailureError,
)
from footystats.models.predictor import run_prediction
from footystats.services.match_service import MatchService
from footystats.services.report import build_match_report, sort_matches_by_date
from footystats.utils.logging_utils import get_logger

logger = get_logger(__name__)

router = APIRouter()


def get_match_store(request: Request) -> MatchStore:
    return request.app.state.match_store


def get_match_service(store: MatchStore = Depends(get_match_store)) -> MatchService:
    return MatchService(store)


@router.get("/health")
def health() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/")
@router.get("/matches")
def list_matches(
    request: Request,
    service: MatchService = Depends(get_match_service),
) -> Dict[str, Any]:
    """
    Return filtered matches with pagination, statistics and available teams.

    Query parameters: team, home_team, away_team, date (matches on or after),
    score_home, score_away, both_teams_scored, season, competition, page,
    page_size.
    """
    raw = dict(request.query_params)
    criteria = validate_and_sanitize_params(raw)
    pagination = validate_pagination(raw)
    return success_response(build_match_report(service, criteria, pagination))


@router.get("/teams")
def list_teams(service: MatchService = Depends(get_match_service)) -> Dict[str, Any]:
    teams = service.get_available_teams()
    return success_response({"teams": teams, "count": len(teams)})


@router.get("/teams/{team}/matches")
def team_matches(
    team: str,
    service: MatchService = Depends(get_match_service),
) -> Dict[str, Any]:
    matches = sort_matches_by_date(service.get_team_matches(team))
    return success_response(
        {"team": team, "count": len(matches), "matches": format_matches(matches)}
    )


@router.get("/prediction")
def prediction(
    home_team: str = "",
    away_team: str = "",
    service: MatchService = Depends(get_match_service),
) -> Dict[str, Any]:
    """Prediction bundle for ``home_team`` vs ``away_team`` over the full dataset."""
    home = sanitize_string(home_team)
    away = sanitize_string(away_team)

    failure = ValidationFailureError("Both teams are required")
    if home is None:
        failure.add_error("home_team", "home_team is required")
    if away is None:
        failure.add_error("away_team", "away_team is required")
    if failure.has_errors():
        raise failure

    history = sort_matches_by_date(service.get_all_matches())
    return success_response(run_prediction(home, away, history).model_dump())


@router.post("/reload")
def reload_matches(store: MatchStore = Depends(get_match_store)) -> Dict[str, Any]:
    """Reload the match dataset from disk into memory."""
    count = store.reload()
    return success_response({"status": "reloaded", "total_matches": count})


async def _handle_api_error(request: Request, exc: FootballAPIError) -> JSONResponse:
    if isinstance(exc, DataUnavailableError):
        logger.error("Match data unavailable: %s", exc.message)
    else:
        logger.warning("Rejected request to %s: %s", request.url.path, exc.user_message)

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(**exc.to_dict()),
    )


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error while serving %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_response("An unexpected error occurred", 500),
    )


def create_app(store: MatchStore | None = None) -> FastAPI:
    """
    Build the FastAPI application around a Match Store.

    Parameters
    ----------
    store : MatchStore | None
        Store to serve. If None, a store over the configured dataset path is
        created.
    """
    match_store = store if store is not None else MatchStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Warm the match cache at startup; failures surface on first request."""
        try:
            app.state.match_store.get_all()
        except DataUnavailableError as exc:
            logger.error("Failed to load match data on startup: %s", exc.message)
        yield

    app = FastAPI(
        title="FootyStats API",
        version="0.1.0",
        description="Football match data, statistics and head-to-head predictions",
        lifespan=lifespan,
    )
    app.state.match_store = match_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(FootballAPIError, _handle_api_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)
    app.include_router(router)
    return app


app = create_app()
