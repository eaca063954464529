"""SearchParams tests — normalization of paging, sorting and filtering input.

Tests cover:
    - Defaults when nothing is supplied
    - page / per_page coercion (booleans, NaN, <= 0, fractions, numeric strings)
    - sort / filter: None and "" become None, other values stringified
    - sort_dir: None without sort, case-insensitive asc/desc, "asc" fallback
    - from_input accepts camelCase keys
"""

import pytest

from userbase.core.domain_types import SortDirection
from userbase.core.search_params import SearchParams


def test_defaults():
    params = SearchParams()
    assert params.page == 1
    assert params.per_page == 15
    assert params.sort is None
    assert params.sort_dir is None
    assert params.filter is None


# --- page ---------------------------------------------------------------------

@pytest.mark.parametrize("value, expected", [
    (None, 1), ("", 1), ("fake", 1), (0, 1), (-1, 1), (5.5, 1),
    (True, 1), (False, 1), ({}, 1), (float("nan"), 1), (float("inf"), 1),
    (10**400, 1), ("1e400", 1),
    (1, 1), (2, 2), ("2", 2), (2.0, 2),
])
def test_page_coercion(value, expected):
    assert SearchParams(page=value).page == expected


# --- per_page -----------------------------------------------------------------

@pytest.mark.parametrize("value, expected", [
    (None, 15), ("", 15), ("fake", 15), (0, 15), (-1, 15), (5.5, 15),
    (True, 15), (False, 15), ({}, 15), (float("nan"), 15),
    (10**400, 15),
    (1, 1), (2, 2), ("25", 25), (10.0, 10),
])
def test_per_page_coercion(value, expected):
    assert SearchParams(per_page=value).per_page == expected


# --- sort ---------------------------------------------------------------------

@pytest.mark.parametrize("value, expected", [
    (None, None), ("", None), ("field", "field"), (0, "0"), (-1, "-1"), (5.5, "5.5"),
])
def test_sort_normalization(value, expected):
    assert SearchParams(sort=value).sort == expected


# --- sort_dir -----------------------------------------------------------------

@pytest.mark.parametrize("value", [None, "", "asc", "desc", "DESC", 0])
def test_sort_dir_is_none_without_sort(value):
    assert SearchParams(sort_dir=value).sort_dir is None


@pytest.mark.parametrize("value, expected", [
    (None, "asc"), ("", "asc"), ("fake", "asc"), (0, "asc"),
    ("asc", "asc"), ("ASC", "asc"), ("desc", "desc"), ("DESC", "desc"),
    ("Desc", "desc"), (SortDirection.DESC, "desc"),
])
def test_sort_dir_with_sort(value, expected):
    params = SearchParams(sort="field", sort_dir=value)
    assert params.sort_dir == expected


def test_sort_dir_is_a_sort_direction():
    assert SearchParams(sort="field", sort_dir="desc").sort_dir is SortDirection.DESC


# --- filter -------------------------------------------------------------------

@pytest.mark.parametrize("value, expected", [
    (None, None), ("", None), ("test", "test"), (0, "0"), (5.5, "5.5"),
])
def test_filter_normalization(value, expected):
    assert SearchParams(filter=value).filter == expected


# --- from_input ---------------------------------------------------------------

def test_from_input_accepts_camel_case_keys():
    params = SearchParams.from_input(
        {"page": "2", "perPage": "5", "sort": "name", "sortDir": "DESC", "filter": "x"},
    )
    assert params == SearchParams(page=2, per_page=5, sort="name", sort_dir="desc", filter="x")


def test_from_input_ignores_unknown_keys():
    assert SearchParams.from_input({"limit": 3}) == SearchParams()


def test_from_input_none_gives_defaults():
    assert SearchParams.from_input(None) == SearchParams()
