"""
Activity search service
Validates incoming queries and delegates lookups to the map service
"""

from typing import Optional

from app.config import settings
from app.config.place_types import is_known_category
from app.models.request import ActivityQuery
from app.models.response import ActivitiesResponse, Coordinate
from app.services.map.map_service import MapService
from app.services.map.osm_map_service import OSMMapService


class UnknownCategoryError(ValueError):
    """A requested category has no OSM tag mapping."""


class ActivityService:
    """
    Entry point for the API layer

    Geocoding: place name → coordinate
    Search: query → Overpass filter → normalized activities
    """

    def __init__(
        self,
        map_service: Optional[MapService] = None,
        strict_categories: Optional[bool] = None,
    ):
        self.map_service = map_service or OSMMapService()
        self.strict_categories = (
            settings.strict_categories
            if strict_categories is None
            else strict_categories
        )

    async def locate(self, city: str) -> Coordinate:
        return await self.map_service.geocode(city)

    async def search(self, query: ActivityQuery) -> ActivitiesResponse:
        if self.strict_categories:
            unknown = [c for c in query.categories if not is_known_category(c)]
            if unknown:
                raise UnknownCategoryError(f"Unknown categories: {', '.join(unknown)}")

        activities = await self.map_service.find_nearby_activities(
            (query.lat, query.lon), query.radius, query.categories
        )
        return ActivitiesResponse(results=activities)
