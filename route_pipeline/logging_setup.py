"""
Logging Setup

Library modules only create loggers; the embedding application calls
configure_logging() once at startup.
"""

import logging
import sys

from route_pipeline.config import settings


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for the pipeline.

    Args:
        level: Level name, defaults to settings.log_level
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )
