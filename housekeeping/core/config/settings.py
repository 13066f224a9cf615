# File: housekeeping/core/config/settings.py

import logging
import os


class Settings:
    # --- Logging ---
    LOG_LEVEL: str = os.getenv("HOUSEKEEPING_LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv(
        "HOUSEKEEPING_LOG_FORMAT",
        "%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    @property
    def log_level_value(self) -> int:
        """Numeric level for LOG_LEVEL. Unknown names fall back to INFO."""
        value = logging.getLevelName(self.LOG_LEVEL.strip().upper())
        return value if isinstance(value, int) else logging.INFO


settings = Settings()
