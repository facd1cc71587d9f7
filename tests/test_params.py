import pytest

from footystats.api.params import (
    PaginationParams,
    strip_markup,
    validate_and_sanitize_params,
    validate_pagination,
)
from footystats.errors import ValidationFailureError


def test_unknown_and_empty_params_are_dropped():
    params = {
        "team": "Arsenal",
        "referee": "Someone",
        "season": "",
        "competition": "FA Cup",
    }
    assert validate_and_sanitize_params(params) == {
        "team": "Arsenal",
        "competition": "FA Cup",
    }


def test_integer_params():
    params = {"score_home": "3", "score_away": "-1", "page": "abc", "page_size": "+20"}
    assert validate_and_sanitize_params(params) == {
        "score_home": "3",
        "page_size": "20",
    }


def test_date_is_normalized():
    sanitized = validate_and_sanitize_params({"date": "2024-01-05T10:00:00"})
    assert sanitized == {"date": "2024-01-05"}
    assert validate_and_sanitize_params({"date": "not a date"}) == {}


@pytest.mark.parametrize(
    "value",
    ["2024-01-05T23:30:00-05:00", "2024-01-05T00:30:00+09:00", "2024-01-05"],
)
def test_date_keeps_calendar_day_as_written(value):
    assert validate_and_sanitize_params({"date": value}) == {"date": "2024-01-05"}


@pytest.mark.parametrize(
    "value, expected",
    [
        ("YES", {"both_teams_scored": "true"}),
        ("0", {"both_teams_scored": "false"}),
        ("maybe", {}),
    ],
)
def test_boolean_is_normalized(value, expected):
    assert validate_and_sanitize_params({"both_teams_scored": value}) == expected


def test_strings_are_trimmed_and_stripped_of_markup():
    params = {
        "team": "  <b>Arsenal</b> ",
        "home_team": "Brighton & Hove Albion",
        "away_team": "<i></i>",
    }
    assert validate_and_sanitize_params(params) == {
        "team": "Arsenal",
        "home_team": "Brighton & Hove Albion",
    }
    assert strip_markup("Chelsea") == "Chelsea"


def test_pagination_defaults():
    assert validate_pagination({}) == PaginationParams(page=1, page_size=100)
    assert validate_pagination({"page": " ", "page_size": ""}) == PaginationParams()


def test_pagination_accepts_valid_values():
    pagination = validate_pagination({"page": "3", "page_size": "500"})
    assert (pagination.page, pagination.page_size) == (3, 500)


@pytest.mark.parametrize(
    "params, fields",
    [
        ({"page": "0"}, {"page"}),
        ({"page_size": "501"}, {"page_size"}),
        ({"page": "abc", "page_size": "0"}, {"page", "page_size"}),
    ],
)
def test_invalid_pagination_is_itemized(params, fields):
    with pytest.raises(ValidationFailureError) as excinfo:
        validate_pagination(params)

    error = excinfo.value
    assert error.status_code == 422
    assert set(error.errors) == fields
    assert error.to_dict()["validation_errors"] == error.errors
