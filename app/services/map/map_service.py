from abc import ABC, abstractmethod
from typing import List, Tuple

from app.models.response import Activity, Coordinate


class MapService(ABC):
    """Map service abstract interface"""

    @abstractmethod
    async def geocode(self, place_name: str) -> Coordinate:
        """Resolve a free-text place name to coordinates"""
        pass

    @abstractmethod
    async def find_nearby_activities(
        self, center: Tuple[float, float], radius_m: float, categories: List[str]
    ) -> List[Activity]:
        """Search for activities of the given categories around a point

        Args:
            center: Search center (lat, lon)
            radius_m: Search radius in meters
            categories: Category names, queried in order
        """
        pass
