"""
Tilepath Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


class Config:
    """Engine configuration loaded from environment variables."""

    # Path cache
    PATH_CACHE_CAPACITY: int = int(os.getenv("TILEPATH_CACHE_CAPACITY", "10"))

    # Debug output
    # Enable with TILEPATH_DEBUG_PATHS=1 to trace searches and cache activity
    DEBUG_PATHS: bool = _env_flag("TILEPATH_DEBUG_PATHS")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.PATH_CACHE_CAPACITY < 0:
            raise ValueError(
                "TILEPATH_CACHE_CAPACITY must be zero or a positive integer "
                f"(got {cls.PATH_CACHE_CAPACITY}). Use 0 to disable caching."
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Tilepath Configuration:",
            f"  Path Cache Capacity: {cls.PATH_CACHE_CAPACITY}",
            f"  Debug Paths: {cls.DEBUG_PATHS}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
