"""Logging utilities for shelfmap.

Provides color-coded console output for the route planning service layer.
The core grid operations never log.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for operation types
    BLUE = "\033[94m"      # Grid builds and searches
    YELLOW = "\033[93m"    # Endpoint snapping, stale results
    RED = "\033[91m"       # Failures (no path, rejected edits)
    GREEN = "\033[92m"     # Success/completion
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
        Colorized text if SHELFMAP_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("SHELFMAP_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_search(message: str) -> None:
    """Log a grid build or search step (blue)."""
    print(colored(f"{LOG_TAG_SEARCH} {message}", Color.BLUE))


def log_warning(message: str) -> None:
    """Log a recoverable condition (yellow)."""
    print(colored(f"{LOG_TAG_WARNING} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    """Log a failure (red)."""
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


# Markers for operation types (color-blind accessible)
LOG_TAG_SEARCH = "[•]"    # Build/search
LOG_TAG_WARNING = "[~]"   # Snapped endpoint, discarded result
LOG_TAG_ERROR = "[!]"     # Failure
LOG_TAG_SUCCESS = "[✓]"   # Success
LOG_TAG_INFO = "[i]"      # Information
