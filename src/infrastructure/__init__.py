from .http_client import AsyncHTTPClient
from .session import resolve_session_id

__all__ = [
    "AsyncHTTPClient",
    "resolve_session_id",
]
