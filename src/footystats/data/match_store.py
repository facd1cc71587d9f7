"""
Read-only, in-memory store for the match dataset.

The dataset is a JSON document with a top-level ``matches`` list. It is loaded
lazily on first access and cached for the lifetime of the store; reloading is
an explicit operation.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import List, Optional

from footystats.data.schema import Match, validate_matches
from footystats.errors import DataUnavailableError
from footystats.utils.logging_utils import get_logger
from footystats.utils.paths import PathLike, get_matches_data_path

logger = get_logger(__name__)


class MatchStore:
    """
    Holds an immutable snapshot of all matches.

    Loading is guarded by a lock, so concurrent first access triggers exactly
    one read of the source file.

    Parameters
    ----------
    path : str | Path | None
        Location of the JSON dataset. If None, uses the configured default
        (see ``footystats.utils.paths.get_matches_data_path``).
    """

    def __init__(self, path: Optional[PathLike] = None):
        self.path: Path = (
            Path(path) if path is not None else get_matches_data_path()
        )
        self._lock = threading.Lock()
        self._matches: tuple[Match, ...] = ()
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def get_all(self) -> List[Match]:
        """Return every match in source order, loading the dataset if needed."""
        if not self._loaded:
            with self._lock:
                if not self._loaded:
                    self._matches = self._read()
                    self._loaded = True
        return list(self._matches)

    def match_count(self) -> int:
        return len(self.get_all())

    def reload(self) -> int:
        """
        Re-read the dataset from disk and swap in the new snapshot.

        The previous snapshot stays active if the reload fails.

        Returns
        -------
        int
            Number of matches in the new snapshot.
        """
        with self._lock:
            matches = self._read()
            self._matches = matches
            self._loaded = True
        logger.info("Reloaded %d matches from %s", len(matches), self.path)
        return len(matches)

    def _read(self) -> tuple[Match, ...]:
        if not self.path.is_file():
            raise DataUnavailableError(f"Match data file not found: {self.path}")

        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DataUnavailableError(
                f"Failed to read match data file {self.path}: {exc}"
            ) from exc

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DataUnavailableError(
                f"Invalid JSON data in match file {self.path}: {exc}"
            ) from exc

        if not isinstance(document, dict):
            raise DataUnavailableError(
                f"Match data file {self.path} must contain a JSON object"
            )

        records = document.get("matches")
        if records is None:
            records = []
        if not isinstance(records, list):
            raise DataUnavailableError(
                f"'matches' in {self.path} must be a list, "
                f"got {type(records).__name__}"
            )

        try:
            matches = validate_matches(records)
        except ValueError as exc:
            raise DataUnavailableError(str(exc)) from exc

        logger.info("Loaded %d matches from %s", len(matches), self.path)
        return tuple(matches)
