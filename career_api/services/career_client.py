"""HTTP client for Overwatch career pages.

One pooled httpx.AsyncClient is shared by every request. The client only
reports what the origin said (status + body); classifying the status is the
caller's job. Transport failures are raised as UpstreamFailure so they stay
distinguishable from an origin that answered with an error status.
"""

import logging
import time
from dataclasses import dataclass

import httpx

from career_api.schemas.player import Battletag
from career_api.services.errors import UpstreamFailure
from career_api.settings import DEFAULT_USER_AGENT

logger = logging.getLogger("uvicorn.error")


@dataclass(frozen=True)
class OriginResponse:
    """Status and body of one career page request."""

    status_code: int
    text: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class CareerPageClient:
    """Client for https://overwatch.blizzard.com career pages."""

    BASE_URL = "https://overwatch.blizzard.com/en-us/career"

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize client; the HTTP connection pool is created lazily."""
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    def career_url(self, battletag: Battletag) -> str:
        return f"{self.base_url}/{battletag.path_component}"

    async def fetch(self, battletag: Battletag) -> OriginResponse:
        """Fetch the career page for a battletag.

        The body is fully read before returning.

        Raises:
            UpstreamFailure: If the request fails at the transport level.
        """
        url = self.career_url(battletag)
        client = await self._get_client()

        start = time.perf_counter()
        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning(f"Career page request failed for {battletag}: {e!r}")
            raise UpstreamFailure(
                "Failed getting player", detail={"battletag": str(battletag)}
            ) from e

        logger.info(
            f"Career page fetch for {battletag} took {time.perf_counter() - start:.3f}s "
            f"(status={response.status_code})"
        )
        return OriginResponse(status_code=response.status_code, text=response.text)
