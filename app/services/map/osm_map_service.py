from typing import Any, Dict, List, Optional, Tuple

from app.config import settings
from app.config.logging_config import get_logger
from app.config.place_types import get_category_for_tags
from app.models.response import Activity, Coordinate
from app.services.map.errors import GeocodeNotFoundError, ParseError
from app.services.map.json_fetcher import JsonFetcher
from app.services.map.map_service import MapService
from app.services.map.overpass_query import build_overpass_query

logger = get_logger(__name__)

UNNAMED_PLACEHOLDER = "(unnamed)"


class OSMMapService(MapService):
    """OpenStreetMap implementation: Nominatim for geocoding, Overpass for activities"""

    def __init__(
        self,
        fetcher: Optional[JsonFetcher] = None,
        *,
        nominatim_url: Optional[str] = None,
        overpass_url: Optional[str] = None,
        overpass_timeout: Optional[int] = None,
    ):
        self.fetcher = fetcher or JsonFetcher()
        self.nominatim_url = nominatim_url or settings.nominatim_url
        self.overpass_url = overpass_url or settings.overpass_url
        self.overpass_timeout = overpass_timeout or settings.overpass_timeout_seconds

    async def geocode(self, place_name: str) -> Coordinate:
        """Look up the best Nominatim match for a place name"""
        results = await self.fetcher.get_json(
            self.nominatim_url,
            params={"q": place_name, "format": "json", "limit": 1},
        )

        if not isinstance(results, list) or not results:
            logger.info("No geocoding result for %r", place_name)
            raise GeocodeNotFoundError()

        first = results[0]
        try:
            return Coordinate(lat=float(first["lat"]), lon=float(first["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(f"Malformed geocoding result: {e}") from e

    async def find_nearby_activities(
        self, center: Tuple[float, float], radius_m: float, categories: List[str]
    ) -> List[Activity]:
        """Query Overpass for the requested categories around center"""
        lat, lon = center
        query = build_overpass_query(
            lat, lon, radius_m, categories, timeout=self.overpass_timeout
        )

        data = await self.fetcher.get_json(self.overpass_url, params={"data": query})

        elements = data.get("elements") if isinstance(data, dict) else None
        activities = self._convert_elements_to_activities(elements or [])
        logger.info(
            "Overpass returned %d activities for %s within %sm",
            len(activities),
            ",".join(categories),
            radius_m,
        )
        return activities

    def _convert_elements_to_activities(
        self, elements: List[Dict[str, Any]]
    ) -> List[Activity]:
        """Convert raw Overpass elements to Activity records"""
        activities = []

        for index, element in enumerate(elements):
            tags = element.get("tags") or {}

            activities.append(
                Activity(
                    # Elements without an id fall back to their position
                    id=element.get("id") or index,
                    name=tags.get("name") or UNNAMED_PLACEHOLDER,
                    category=get_category_for_tags(tags),
                    lat=element.get("lat"),
                    lon=element.get("lon"),
                )
            )

        return activities
