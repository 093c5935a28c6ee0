from typing import List

from pydantic import BaseModel, Field, field_validator


class ActivityQuery(BaseModel):
    lat: float = Field(allow_inf_nan=False)
    lon: float = Field(allow_inf_nan=False)
    radius: float = Field(allow_inf_nan=False)  # meters
    categories: List[str] = Field(min_length=1)

    @field_validator("categories", mode="before")
    @classmethod
    def split_categories(cls, value):
        """Accept the comma-separated form used in query strings."""
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return [item.strip() for item in value if item and item.strip()]
