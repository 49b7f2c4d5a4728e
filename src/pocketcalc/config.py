"""
Runtime settings for pocketcalc.
Environment variables (prefixed with ``POCKETCALC_``) override defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields

ENV_PREFIX = "POCKETCALC_"


@dataclass
class Settings:
    """Calculator configuration"""

    # Rendering
    MAX_DISPLAY_LENGTH: int = 14

    # Formatting: significant digits kept before the minimal text form
    ROUND_DIGITS: int = 12

    # Session: states kept in Calculator.history, 0 for no limit
    HISTORY_LIMIT: int = 1000

    # Logging
    LOG_LEVEL: str = "WARNING"

    def __post_init__(self) -> None:
        """Load from environment variables"""
        for f in fields(self):
            env_value = os.getenv(ENV_PREFIX + f.name)
            if env_value is None:
                continue
            if f.type in (int, "int"):
                setattr(self, f.name, int(env_value))
            else:
                setattr(self, f.name, env_value)


# Global settings instance
settings = Settings()
