"""Lookup of the session id used to authenticate against the site."""

from pathlib import Path
from typing import Optional

from loguru import logger

import config
from domain.exceptions import SessionNotFoundError


def resolve_session_id(explicit: Optional[str] = None, session_file: Optional[str] = None) -> str:
    """
    Return the session id to send with requests.

    Checks, in order, the explicit value, the configured session id and the
    session file.
    """
    if explicit and explicit.strip():
        return explicit.strip()

    if config.SESSION_ID and config.SESSION_ID.strip():
        logger.debug("Using session id from environment")
        return config.SESSION_ID.strip()

    path = Path(session_file or config.SESSION_FILE)
    try:
        value = path.read_text(encoding="utf-8").strip()
    except OSError as e:
        raise SessionNotFoundError(f"No session id given and unable to read {path}: {e}") from e

    if not value:
        raise SessionNotFoundError(f"Session file {path} is empty")

    logger.debug(f"Using session id from {path}")
    return value
