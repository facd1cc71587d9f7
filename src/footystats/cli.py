"""
Command-line entry point for FootyStats.

Usage (from project root, with the virtualenv activated):

    footystats serve --port 8000
    footystats predict --home Arsenal --away Chelsea
    footystats --data path/to/combined_matches.json stats --team Arsenal
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Optional

from footystats.analysis.statistics import calculate_match_statistics
from footystats.config import API_HOST, API_PORT
from footystats.data.match_store import MatchStore
from footystats.errors import FootballAPIError
from footystats.models.predictor import run_prediction
from footystats.services.match_service import MatchService
from footystats.services.report import sort_matches_by_date
from footystats.utils.logging_utils import get_logger

logger = get_logger(__name__)


def _store(data: Optional[str]) -> MatchStore:
    return MatchStore(Path(data).resolve() if data else None)


def run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from footystats.api.main import create_app

    logger.info("Starting FootyStats API on %s:%d", args.host, args.port)
    uvicorn.run(create_app(_store(args.data)), host=args.host, port=args.port)
    return 0


def run_predict(args: argparse.Namespace) -> int:
    matches = sort_matches_by_date(_store(args.data).get_all())
    report = run_prediction(args.home, args.away, matches)
    print(report.model_dump_json(indent=2))
    return 0


def run_stats(args: argparse.Namespace) -> int:
    service = MatchService(_store(args.data))
    criteria = {"team": args.team} if args.team else {}
    stats = calculate_match_statistics(service.get_filtered_matches(criteria))
    print(json.dumps(stats.model_dump(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="footystats",
        description="Football match statistics and head-to-head predictions.",
    )
    parser.add_argument(
        "--data",
        default=None,
        help="Path to the matches JSON file. "
        "If not provided, uses FOOTYSTATS_DATA_FILE or data/combined_matches.json.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default=API_HOST)
    serve.add_argument("--port", type=int, default=API_PORT)
    serve.set_defaults(handler=run_serve)

    predict = subparsers.add_parser("predict", help="Predict a fixture.")
    predict.add_argument("--home", required=True, help="Home team name.")
    predict.add_argument("--away", required=True, help="Away team name.")
    predict.set_defaults(handler=run_predict)

    stats = subparsers.add_parser("stats", help="Print aggregate statistics.")
    stats.add_argument("--team", default=None, help="Restrict to one team's matches.")
    stats.set_defaults(handler=run_stats)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except FootballAPIError as exc:
        logger.error("%s", exc.message or exc.user_message)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
