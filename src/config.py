"""Runtime configuration for the progress scraper."""

import os
import sys

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

PROJECT_EULER_HOSTNAME = os.getenv("PROJECT_EULER_HOSTNAME", "projecteuler.net")
PROGRESS_ENDPOINT = "progress"
SESSION_COOKIE_NAME = "PHPSESSID"

# Session id given directly, or a file holding it
SESSION_ID = os.getenv("PROJECT_EULER_SESSION_ID")
SESSION_FILE = os.getenv("PROJECT_EULER_SESSION_FILE", SESSION_COOKIE_NAME)

REQUEST_TIMEOUT = float(os.getenv("PROJECT_EULER_TIMEOUT", "30"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def build_progress_url() -> str:
    """Build the URL of the progress page."""
    return f"https://{PROJECT_EULER_HOSTNAME}/{PROGRESS_ENDPOINT}"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Send log output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level)
