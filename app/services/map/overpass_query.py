"""Overpass QL query construction for activity searches."""
from typing import Iterable, Optional

from app.config import settings
from app.config.place_types import get_tag_for_category


def format_number(value: float) -> str:
    """Render a number the way the Overpass examples do: 500, not 500.0."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def build_category_clause(category: str, lat: float, lon: float, radius: float) -> str:
    """One node filter for a category, or "" when the category is unknown."""
    tag = get_tag_for_category(category)
    if tag is None:
        return ""

    key, value = tag
    return (
        f"node[{key}={value}]"
        f"(around:{format_number(radius)},{format_number(lat)},{format_number(lon)});"
    )


def build_overpass_query(
    lat: float,
    lon: float,
    radius: float,
    categories: Iterable[str],
    timeout: Optional[int] = None,
) -> str:
    """Build the union query for all requested categories, in input order."""
    timeout = timeout if timeout is not None else settings.overpass_timeout_seconds
    clauses = "".join(
        build_category_clause(category, lat, lon, radius) for category in categories
    )
    return f"[out:json][timeout:{timeout}];({clauses});out body;"
