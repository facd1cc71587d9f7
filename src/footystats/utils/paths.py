"""
Helper functions for file and directory paths used in FootyStats.
"""

import os
from pathlib import Path
from typing import Union

from footystats.config import DATA_DIR, DATA_FILE_ENV_VAR, MATCHES_FILENAME


PathLike = Union[str, Path]


def get_matches_data_path(filename: PathLike | None = None) -> Path:
    """
    Return the path to the match dataset.

    Resolution order: explicit ``filename``, then the ``FOOTYSTATS_DATA_FILE``
    environment variable, then ``data/combined_matches.json``. Relative
    filenames are resolved against the data directory.

    Parameters
    ----------
    filename : str | Path | None
        Specific file, or None for the configured default.

    Returns
    -------
    Path
        Full path to the match dataset.
    """
    if filename is None:
        filename = os.environ.get(DATA_FILE_ENV_VAR) or MATCHES_FILENAME

    path = Path(filename)
    if path.is_absolute():
        return path
    return DATA_DIR / path
