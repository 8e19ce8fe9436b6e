"""Litestar application serving progress data."""

from litestar import Litestar

import config
from api.routes import ProgressController


def create_app() -> Litestar:
    config.configure_logging()
    return Litestar(route_handlers=[ProgressController])


app = create_app()
