"""
Validation and sanitization of request query parameters.

Filter parameters are lenient: unknown keys, empty values and values that do
not sanitize are dropped. Pagination is strict: a malformed page or page size
is reported back to the client as a validation failure.
"""

from __future__ import annotations

import re
import warnings
from typing import Callable, Dict, Mapping, Optional

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from pydantic import BaseModel, Field, ValidationError

from footystats.analysis.filters import parse_bool
from footystats.config import ALLOWED_PARAMS, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from footystats.errors import ValidationFailureError
from footystats.utils.dates import parse_match_date

_INTEGER_RE = re.compile(r"\+?\d+")


class PaginationParams(BaseModel):
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)


def strip_markup(value: str) -> str:
    """Remove HTML tags and decode entities, leaving the visible text."""
    if "<" not in value and "&" not in value:
        return value
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        return BeautifulSoup(value, "html.parser").get_text()


def sanitize_integer(value: str) -> Optional[str]:
    """Canonical non-negative integer string, or None."""
    value = value.strip()
    if not _INTEGER_RE.fullmatch(value):
        return None
    return str(int(value))


def sanitize_date(value: str) -> Optional[str]:
    """Date normalized to YYYY-MM-DD, or None if unparsable."""
    # Keep the calendar day the caller wrote, whatever its offset.
    parsed = parse_match_date(value, to_utc=False)
    return parsed.strftime("%Y-%m-%d") if parsed is not None else None


def sanitize_boolean(value: str) -> Optional[str]:
    parsed = parse_bool(value)
    if parsed is None:
        return None
    return "true" if parsed else "false"


def sanitize_string(value: str) -> Optional[str]:
    cleaned = strip_markup(value.strip()).strip()
    return cleaned or None


SANITIZERS: Dict[str, Callable[[str], Optional[str]]] = {
    "page": sanitize_integer,
    "page_size": sanitize_integer,
    "score_home": sanitize_integer,
    "score_away": sanitize_integer,
    "date": sanitize_date,
    "both_teams_scored": sanitize_boolean,
}


def validate_and_sanitize_params(params: Mapping[str, str]) -> Dict[str, str]:
    """
    Restrict ``params`` to the allowed keys and sanitize their values.

    Parameters
    ----------
    params : Mapping[str, str]
        Raw query parameters, one value per key.

    Returns
    -------
    Dict[str, str]
        Filter criteria ready for ``filter_matches``.
    """
    sanitized: Dict[str, str] = {}
    for key, value in params.items():
        if value is None or value == "" or key not in ALLOWED_PARAMS:
            continue
        cleaned = SANITIZERS.get(key, sanitize_string)(str(value))
        if cleaned is not None:
            sanitized[key] = cleaned
    return sanitized


def validate_pagination(params: Mapping[str, str]) -> PaginationParams:
    """
    Parse ``page`` and ``page_size`` from the raw parameters.

    Missing or empty values fall back to the defaults.

    Raises
    ------
    ValidationFailureError
        If either value is not an integer or is out of range.
    """
    raw = {
        key: params[key].strip()
        for key in ("page", "page_size")
        if (params.get(key) or "").strip()
    }
    try:
        return PaginationParams.model_validate(raw)
    except ValidationError as exc:
        failure = ValidationFailureError("Pagination validation failed")
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "pagination"
            failure.add_error(field, f"{field}: {error['msg']}")
        raise failure from exc
