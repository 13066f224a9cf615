# File: housekeeping/core/log_config.py

import logging
from typing import Optional

import housekeeping.core.config.settings as config


def configure_logging(level: Optional[int] = None) -> None:
    """
    Applies the configured level and format to the root logger.
    Only entry points call this; library modules just use getLogger(__name__).
    """
    settings = config.settings
    logging.basicConfig(
        level=level if level is not None else settings.log_level_value,
        format=settings.LOG_FORMAT
    )
