"""Service for fetching and parsing progress pages."""

from loguru import logger

import config
from domain.models import Progress
from infrastructure.parsers import HTTPClientProtocol, ProgressPageParserProtocol


class ProgressService:
    """Service for retrieving a user's Project Euler progress."""

    def __init__(
        self,
        http_client: HTTPClientProtocol,
        page_parser: ProgressPageParserProtocol,
    ):
        self.http_client = http_client
        self.page_parser = page_parser

    async def get_progress(self, session_id: str) -> Progress:
        """Fetch the progress page for ``session_id`` and parse it."""
        url = config.build_progress_url()
        logger.info(f"Fetching progress page: {url}")

        html = await self.http_client.get_text(
            url,
            cookies={config.SESSION_COOKIE_NAME: session_id.strip()},
        )
        return self.page_parser.parse(html)
