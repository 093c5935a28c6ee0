import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app, get_activity_service, get_static_files
from app.services.activity_service import ActivityService
from app.services.map.json_fetcher import JsonFetcher
from app.services.map.osm_map_service import OSMMapService
from app.services.static_service import StaticFileService

NOMINATIM_URL = "https://nominatim.test/search"
OVERPASS_URL = "https://overpass.test/api/interpreter"


class StubUpstream:
    """Fake Nominatim/Overpass pair driven through httpx.MockTransport."""

    def __init__(self):
        self.geocode_payload = []
        self.overpass_payload = {"elements": []}
        self.error = None
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if request.url.host == "nominatim.test":
            return httpx.Response(200, content=json.dumps(self.geocode_payload))
        return httpx.Response(200, content=json.dumps(self.overpass_payload))

    def map_service(self) -> OSMMapService:
        fetcher = JsonFetcher(transport=httpx.MockTransport(self.handler))
        return OSMMapService(
            fetcher, nominatim_url=NOMINATIM_URL, overpass_url=OVERPASS_URL
        )


@pytest.fixture
def upstream():
    return StubUpstream()


@pytest.fixture
def static_root(tmp_path):
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_text("<h1>Activity Explorer</h1>")
    (root / "style.css").write_text("body { margin: 0; }")
    (root / "data.bin").write_bytes(b"\x00\x01\x02")
    (root / "assets").mkdir()
    (root / "assets" / "logo.svg").write_text("<svg></svg>")
    (tmp_path / "secret.txt").write_text("outside the static root")
    return root


@pytest.fixture
def client(upstream, static_root):
    app.dependency_overrides[get_activity_service] = lambda: ActivityService(
        upstream.map_service(), strict_categories=False
    )
    app.dependency_overrides[get_static_files] = lambda: StaticFileService(static_root)
    yield TestClient(app)
    app.dependency_overrides.clear()
