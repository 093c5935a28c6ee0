"""
Activity Category Configuration
Maps OpenStreetMap tags to the activity categories the API exposes.
"""

from typing import Dict, List, Optional, Tuple


UNKNOWN_CATEGORY = "unknown"

# Category -> (tag key, tag value). Order is the inference priority.
CATEGORY_TAGS: Dict[str, Tuple[str, str]] = {
    "playground": ("leisure", "playground"),
    "park": ("leisure", "park"),
    "theme_park": ("tourism", "theme_park"),
    "zoo": ("tourism", "zoo"),
    "museum": ("tourism", "museum"),
    "water_park": ("leisure", "water_park"),
}

ACTIVITY_CATEGORIES: List[str] = list(CATEGORY_TAGS)


def is_known_category(category: str) -> bool:
    """Check if a category can be turned into an Overpass filter."""
    return category in CATEGORY_TAGS


def get_tag_for_category(category: str) -> Optional[Tuple[str, str]]:
    """Get the OSM (key, value) tag pair for a category, or None."""
    return CATEGORY_TAGS.get(category)


def get_category_for_tags(tags: Optional[Dict[str, str]]) -> str:
    """Infer the category of an element from its OSM tags.

    The first rule in CATEGORY_TAGS order wins, so an element tagged both
    leisure=park and tourism=zoo is a park.
    """
    if not tags:
        return UNKNOWN_CATEGORY

    for category, (key, value) in CATEGORY_TAGS.items():
        if tags.get(key) == value:
            return category

    return UNKNOWN_CATEGORY
