"""HTTP client helper."""

from __future__ import annotations

import logging
from typing import Optional

import aiohttp
from multidict import CIMultiDict

from ..io.messages import Request, Response

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper.

    Sends raw ``Request`` objects and returns fully buffered ``Response``
    objects. HTTP error statuses are returned, not raised; network errors
    propagate to the caller.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def resolve_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"
        return url

    async def send(self, request: Request) -> Response:
        """Send a request and buffer the whole response body."""
        url = self.resolve_url(request.url)
        data = request.form.to_form_data() if len(request.form) else None

        async with self.session.request(
            request.method,
            url,
            headers=request.headers,
            data=data,
            cookies=request.cookies or None,
        ) as response:
            body = await response.read()
            logger.debug(f"{request.method} {url} -> {response.status}")
            return Response(
                status=response.status,
                reason=response.reason or "",
                headers=CIMultiDict(response.headers),
                body=body,
            )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
