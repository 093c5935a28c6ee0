"""
Response models for the geocode and activities API
"""
from typing import List, Optional, Union
from pydantic import BaseModel, StrictFloat, StrictInt


class Coordinate(BaseModel):
    """Geographic point"""
    lat: float
    lon: float


class Activity(BaseModel):
    """Point of interest reshaped from an Overpass element"""
    id: Union[int, str]
    name: str
    category: str
    # Passed through as sent; omitted from JSON when the element has none
    lat: Optional[Union[StrictInt, StrictFloat, str]] = None
    lon: Optional[Union[StrictInt, StrictFloat, str]] = None


class ActivitiesResponse(BaseModel):
    """Activities response model"""
    results: List[Activity] = []


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
