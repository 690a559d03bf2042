"""Logging setup for applications embedding the search engine."""

import logging

from boolsearch.core.config import settings


def configure_logging(level: str | None = None) -> None:
    """Configure root logging. Library modules only create loggers."""
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
