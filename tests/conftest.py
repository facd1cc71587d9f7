import json
from pathlib import Path

import pytest

SAMPLE_RECORDS = [
    {
        "id": 1,
        "date": "2023-01-01",
        "home_team": "Arsenal",
        "away_team": "Chelsea",
        "score": {"home": 2, "away": 1},
        "competition": "Premier League",
        "season": "2022-2023",
    },
    {
        "id": 2,
        "date": "2023-06-01",
        "home_team": "Chelsea",
        "away_team": "Arsenal",
        "score": {"home": 1, "away": 1},
        "competition": "Premier League",
        "season": "2022-2023",
    },
    {
        "id": 3,
        "date": "2024-01-01",
        "home_team": "arsenal",
        "away_team": "Liverpool",
        "score": {"home": 0, "away": 2},
        "competition": "FA Cup",
        "season": "2023-2024",
    },
    {
        "id": 4,
        "date": "2024-03-01",
        "home_team": "Liverpool",
        "away_team": "Chelsea",
        "competition": "Premier League",
        "season": "2023-2024",
    },
]


@pytest.fixture
def write_dataset(tmp_path: Path):
    """Write a matches JSON file into tmp_path and return its path."""

    def _write(records=None, raw=None, name="matches.json") -> Path:
        path = tmp_path / name
        if raw is None:
            raw = json.dumps(
                {"matches": SAMPLE_RECORDS if records is None else records}
            )
        path.write_text(raw, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def dataset_path(write_dataset) -> Path:
    return write_dataset()
