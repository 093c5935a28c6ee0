"""Tests for Overpass QL query construction"""

from itertools import combinations

import pytest

from app.config.place_types import ACTIVITY_CATEGORIES, get_tag_for_category
from app.services.map.overpass_query import (
    build_category_clause,
    build_overpass_query,
    format_number,
)

PREFIX = "[out:json][timeout:25];("
SUFFIX = ");out body;"


def _all_subsets():
    for size in range(1, len(ACTIVITY_CATEGORIES) + 1):
        yield from combinations(ACTIVITY_CATEGORIES, size)


def test_single_category_query():
    query = build_overpass_query(1, 2, 500, ["park"], timeout=25)
    assert query == "[out:json][timeout:25];(node[leisure=park](around:500,1,2););out body;"


@pytest.mark.parametrize("categories", list(_all_subsets()))
def test_one_clause_per_category_in_input_order(categories):
    query = build_overpass_query(51.5, -0.12, 1000, categories, timeout=25)

    assert query.startswith(PREFIX)
    assert query.endswith(SUFFIX)

    body = query[len(PREFIX):-len(SUFFIX)]
    expected = "".join(
        "node[{}={}](around:1000,51.5,-0.12);".format(*get_tag_for_category(c))
        for c in categories
    )
    assert body == expected
    assert body.count("node[") == len(categories)


def test_reversed_order_is_preserved():
    query = build_overpass_query(0, 0, 10, ["museum", "playground"], timeout=25)
    assert query.index("tourism=museum") < query.index("leisure=playground")


def test_unknown_category_contributes_nothing():
    assert build_category_clause("aquarium", 1, 2, 500) == ""
    assert build_overpass_query(1, 2, 500, ["aquarium"], timeout=25) == PREFIX + SUFFIX
    assert build_overpass_query(1, 2, 500, ["park", "aquarium"], timeout=25) == (
        build_overpass_query(1, 2, 500, ["park"], timeout=25)
    )


def test_length_grows_with_recognized_categories():
    categories = ["bogus"]
    previous = len(build_overpass_query(1, 2, 500, categories, timeout=25))
    for category in ACTIVITY_CATEGORIES:
        categories.append(category)
        categories.append("still-bogus")
        current = len(build_overpass_query(1, 2, 500, categories, timeout=25))
        assert current > previous
        previous = current


def test_query_is_deterministic():
    args = (48.8566, 2.3522, 2500.5, ["zoo", "park"])
    assert build_overpass_query(*args, timeout=25) == build_overpass_query(*args, timeout=25)


def test_timeout_defaults_to_settings():
    assert build_overpass_query(1, 2, 3, ["zoo"]).startswith(PREFIX)


@pytest.mark.parametrize(
    "value, expected",
    [(500, "500"), (500.0, "500"), (2500.5, "2500.5"), (-0.0, "0"), (-33.8688, "-33.8688")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected
