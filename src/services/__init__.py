from services.progress import ProgressService


def create_progress_service() -> ProgressService:
    """Factory function to create progress service with all dependencies."""
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.parsers import ProgressPageParser

    return ProgressService(
        http_client=AsyncHTTPClient(),
        page_parser=ProgressPageParser(),
    )


__all__ = ["ProgressService", "create_progress_service"]
