"""Root logger setup shared by the API and the CLI."""

import logging

from hedge_tracker.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None):
    """Configure the root logger from settings.log_level unless overridden."""
    level_name = (level or settings.log_level).upper()
    # No-op when handlers are already installed (uvicorn, pytest)
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level_name)

    # uvicorn access logs are noisy at INFO for a calculation API
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
