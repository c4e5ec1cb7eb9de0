"""Authenticated HTTP transport for the Runscope API."""

import asyncio
import logging

import aiohttp

from runscope.radar.errors import TransportError
from runscope.radar.models.client_config import ClientConfig

logger = logging.getLogger(__name__)


class HttpTransport:
    """Issues GET/POST/PUT/DELETE requests relative to a base URL."""

    def __init__(self, config: ClientConfig) -> None:
        """Initialize transport with client configuration."""
        self.config = config
        self.base_url = config.base_url
        self._headers = {
            "Authorization": f"Bearer {config.token}",
            "Accept": "application/json",
        }

    def url_for(self, path: str) -> str:
        """Return the absolute URL for a path relative to the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get(self, path: str) -> bytes:
        """GET ``path`` and return the raw response body."""
        return await self._request("GET", path)

    async def post(self, path: str, data: bytes) -> bytes:
        """POST a JSON body to ``path`` and return the raw response body."""
        return await self._request("POST", path, data)

    async def put(self, path: str, data: bytes) -> bytes:
        """PUT a JSON body to ``path`` and return the raw response body."""
        return await self._request("PUT", path, data)

    async def delete(self, path: str) -> None:
        """DELETE ``path``; success is the absence of an error."""
        await self._request("DELETE", path)

    async def _request(
        self, method: str, path: str, data: bytes | None = None
    ) -> bytes:
        url = self.url_for(path)
        headers = dict(self._headers)
        if data is not None:
            headers["Content-Type"] = "application/json"

        logger.debug(f"{method} {url.split('?', 1)[0]}")
        timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(
                    method, url, headers=headers, data=data
                ) as response:
                    content = await response.read()
                    if not 200 <= response.status < 300:
                        text = content.decode("utf-8", errors="replace")
                        raise TransportError(
                            f"{method} {path} failed: {response.status} {text}",
                            status=response.status,
                            body=text,
                        )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        return content
