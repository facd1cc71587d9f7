"""
Schema and validation utilities for match records.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from footystats.utils.logging_utils import get_logger

logger = get_logger(__name__)


class Score(BaseModel):
    """Final score; either side may be missing for unplayed matches."""

    model_config = ConfigDict(frozen=True, extra="allow")

    home: Optional[int] = None
    away: Optional[int] = None

    def lookup(self, field: str) -> Any:
        """Return a score component (declared or extra), or None if absent."""
        if field in type(self).model_fields:
            return getattr(self, field)
        return (self.model_extra or {}).get(field)


class Match(BaseModel):
    """
    A single match record as stored in the dataset.

    Every field is optional: records are filtered on whatever they carry.
    Keys outside the declared fields are kept as extras so they can still be
    matched by name.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: Optional[Union[int, str]] = None
    date: Optional[str] = None
    home_team: Optional[str] = None
    away_team: Optional[str] = None
    score: Optional[Score] = None
    competition: Optional[str] = None
    season: Optional[Union[str, int]] = None

    @field_validator("home_team", "away_team", "competition", mode="before")
    @classmethod
    def _numbers_as_text(cls, value: Any) -> Any:
        # Club names such as "1860" are sometimes exported as numbers.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def home_goals(self) -> Optional[int]:
        return self.score.home if self.score is not None else None

    @property
    def away_goals(self) -> Optional[int]:
        return self.score.away if self.score is not None else None

    @property
    def has_result(self) -> bool:
        """True when both sides of the score are recorded."""
        return self.home_goals is not None and self.away_goals is not None

    def lookup(self, field: str) -> Any:
        """Return a top-level field (declared or extra), or None if absent."""
        if field in type(self).model_fields:
            return getattr(self, field)
        return (self.model_extra or {}).get(field)


def validate_matches(records: Iterable[Any]) -> List[Match]:
    """
    Validate raw match records and convert them into ``Match`` models.

    Parameters
    ----------
    records : Iterable
        Raw records, typically the ``matches`` list of the JSON document.

    Returns
    -------
    List[Match]
        Validated matches in source order.

    Raises
    ------
    ValueError
        If any record is not an object or has fields of the wrong type.
    """
    matches: List[Match] = []
    for position, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(
                f"Match record #{position} is not an object: {type(record).__name__}"
            )
        try:
            matches.append(Match.model_validate(record))
        except ValidationError as exc:
            raise ValueError(f"Match record #{position} is invalid: {exc}") from exc

    unplayed = sum(1 for m in matches if not m.has_result)
    if unplayed:
        logger.info("%d of %d matches have no full result.", unplayed, len(matches))

    return matches
