import os
from typing import Optional

from dotenv import load_dotenv

# Load .env file variables into environment
load_dotenv(verbose=True)

_TRUTHY = ("true", "1", "yes")


class Settings:
    """Event dispatcher configuration loaded from environment variables."""

    # --- Logging Settings ---
    def get_log_level(self, default: str = "INFO") -> str:
        """Gets the configured log level, defaulting if not set."""
        return os.getenv("LOG_LEVEL", default).upper()

    # --- Registration Settings ---
    def get_listeners_filepath(self) -> Optional[str]:
        """Returns the path to the JSON registration file, if set."""
        return os.getenv("EVENT_LISTENERS_FILEPATH") or None

    def get_strict_registration(self) -> bool:
        """Whether registrations loaded from file are validated up front."""
        return os.getenv("EVENT_STRICT_REGISTRATION", "true").lower() in _TRUTHY
