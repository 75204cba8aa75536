"""Logging utilities for tilepath.

Provides color-coded console output so search traces and cache activity
are easy to tell apart when ``TILEPATH_DEBUG_PATHS`` is enabled.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for operation types
    BLUE = "\033[94m"      # Search steps
    RED = "\033[91m"       # Failures and invalidations
    GREEN = "\033[92m"     # Path found / cache hit
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if TILEPATH_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("TILEPATH_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_deterministic(message: str) -> None:
    """Log a search step (blue)."""
    print(colored(message, Color.BLUE))


def log_error(message: str) -> None:
    """Log a failure or invalidation (red)."""
    print(colored(message, Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(message, Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(message, Color.CYAN))


# Markers for operation types (color-blind accessible)
LOG_TAG_DETERMINISTIC = "[•]"  # Search step
LOG_TAG_ERROR = "[!]"          # No path / invalidation
LOG_TAG_SUCCESS = "[✓]"        # Path found / cache hit
LOG_TAG_INFO = "[i]"           # Information
