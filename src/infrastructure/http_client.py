"""Async HTTP client for fetching pages."""

from typing import Optional

from curl_cffi.requests import AsyncSession
from loguru import logger

import config
from domain.exceptions import ProgressFetchError


class AsyncHTTPClient:
    """Thin wrapper over curl_cffi that returns page text."""

    def __init__(self, timeout: Optional[float] = None, impersonate: str = "chrome"):
        """
        Initialize client.

        Args:
            timeout: Request timeout in seconds (defaults to configured value)
            impersonate: Browser fingerprint presented by curl_cffi
        """
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.impersonate = impersonate

    async def get_text(self, url: str, cookies: Optional[dict[str, str]] = None) -> str:
        """Fetch ``url`` and return its body as text."""
        logger.debug(f"GET {url}")

        try:
            async with AsyncSession() as session:
                response = await session.get(
                    url,
                    cookies=cookies,
                    timeout=self.timeout,
                    impersonate=self.impersonate,
                )
        except Exception as e:
            logger.error(f"Request to {url} failed: {e}")
            raise ProgressFetchError(f"Request to {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise ProgressFetchError(f"Unexpected status {response.status_code} from {url}")

        return response.text
