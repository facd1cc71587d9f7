"""
Global configuration for the FootyStats project.

This module centralizes paths and key parameters (page sizes, form window,
confidence thresholds), so you can tweak them in one place.
"""

import os
from pathlib import Path

# Project root = folder that contains "src", "data", "tests", etc.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]

# Data directory and default match dataset
DATA_DIR: Path = PROJECT_ROOT / "data"
MATCHES_FILENAME: str = "combined_matches.json"

# Overrides the dataset location when set (absolute or relative path)
DATA_FILE_ENV_VAR: str = "FOOTYSTATS_DATA_FILE"

# Pagination
DEFAULT_PAGE_SIZE: int = 100
MAX_PAGE_SIZE: int = 500

# Number of most recent matches used by the form index
RECENT_FORM_WINDOW: int = 5

# (minimum head-to-head matches, confidence level), checked top-down
CONFIDENCE_THRESHOLDS = [
    (10, 85.0),
    (5, 70.0),
    (3, 50.0),
    (1, 30.0),
]

# Outcome order doubles as the tie-break priority for predictions
OUTCOME_LABELS = ["home_win", "away_win", "draw"]

# Query parameters accepted by the API
ALLOWED_PARAMS = [
    "team",
    "home_team",
    "away_team",
    "date",
    "score_home",
    "score_away",
    "both_teams_scored",
    "page",
    "page_size",
    "season",
    "competition",
]

# Logging
LOG_LEVEL: str = os.environ.get("FOOTYSTATS_LOG_LEVEL", "INFO").upper()

# HTTP server defaults (used by the CLI)
API_HOST: str = os.environ.get("HOST", "0.0.0.0")
API_PORT: int = int(os.environ.get("PORT", "8000"))
