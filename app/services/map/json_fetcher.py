"""
JSON over HTTPS client shared by the geocoder and the activity search.
"""
from typing import Any, Dict, Optional

import httpx

from app.config import settings
from app.config.logging_config import get_logger
from app.services.map.errors import FetchError, ParseError

logger = get_logger(__name__)


class JsonFetcher:
    """Perform a single GET and decode the whole body as JSON.

    No retries and no redirects. Unless HTTP_TIMEOUT_SECONDS is set the
    request may wait on the upstream indefinitely.
    """

    def __init__(
        self,
        *,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self._headers = {
            "Accept": "application/json",
            "User-Agent": user_agent or settings.user_agent,
        }
        self._transport = transport

    async def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        logger.debug("GET %s params=%s", url, params)
        try:
            async with httpx.AsyncClient(
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Upstream %s answered %s", e.request.url.host, e.response.status_code
            )
            raise FetchError(
                f"Upstream request failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Upstream request to %s failed: %r", url, e)
            raise FetchError(str(e) or type(e).__name__) from e

        try:
            return response.json()
        except ValueError as e:
            logger.warning("Upstream %s returned invalid JSON", url)
            raise ParseError(f"Invalid JSON in upstream response: {e}") from e
