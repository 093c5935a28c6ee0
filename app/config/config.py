from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    # Server configuration
    host: str = "0.0.0.0"
    port: int = 3000
    api_version: str = "1.0"
    log_level: str = "INFO"
    cors_allow_origins: str = "*"

    # Static front-end
    static_dir: Path = PACKAGE_DIR / "public"
    static_index: str = "index.html"

    # OpenStreetMap services
    nominatim_url: str = "https://nominatim.openstreetmap.org/search"
    overpass_url: str = "https://overpass-api.de/api/interpreter"
    overpass_timeout_seconds: int = 25

    # Outbound HTTP. Nominatim refuses requests without a User-Agent.
    http_timeout_seconds: Optional[float] = None
    user_agent: str = "activity-explorer/1.0"

    # Reject /api/activities requests naming categories we cannot query
    strict_categories: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
