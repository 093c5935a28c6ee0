# Map service package
from .errors import FetchError, GeocodeNotFoundError, ParseError, UpstreamError
from .json_fetcher import JsonFetcher
from .map_service import MapService
from .osm_map_service import OSMMapService



__all__ = [
    "FetchError",
    "GeocodeNotFoundError",
    "JsonFetcher",
    "MapService",
    "OSMMapService",
    "ParseError",
    "UpstreamError",
    ]
