"""
Shelfmap Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _optional_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


class Config:
    """Application configuration loaded from environment variables."""

    # Default map size used by the demo and by callers that do not pass one
    GRID_ROWS: int = int(os.getenv("SHELFMAP_GRID_ROWS", "30"))
    GRID_COLS: int = int(os.getenv("SHELFMAP_GRID_COLS", "60"))

    # Footprint of a newly placed shelf, in cells
    SHELF_WIDTH: int = int(os.getenv("SHELFMAP_SHELF_WIDTH", "2"))
    SHELF_HEIGHT: int = int(os.getenv("SHELFMAP_SHELF_HEIGHT", "1"))

    # Search guard; None means width * height expansions
    MAX_EXPANSIONS: Optional[int] = _optional_int(os.getenv("SHELFMAP_MAX_EXPANSIONS"))

    # Print the ASCII grid snapshot for every planned route
    DEBUG_GRID: bool = bool(os.getenv("SHELFMAP_DEBUG_GRID"))

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors for unusable values."""
        if cls.GRID_ROWS <= 0 or cls.GRID_COLS <= 0:
            raise ValueError(
                f"SHELFMAP_GRID_ROWS and SHELFMAP_GRID_COLS must be positive "
                f"(got {cls.GRID_ROWS}x{cls.GRID_COLS})"
            )

        if cls.SHELF_WIDTH < 1 or cls.SHELF_HEIGHT < 1:
            raise ValueError(
                "SHELFMAP_SHELF_WIDTH and SHELFMAP_SHELF_HEIGHT must be at least 1"
            )

        if cls.MAX_EXPANSIONS is not None and cls.MAX_EXPANSIONS < 0:
            raise ValueError("SHELFMAP_MAX_EXPANSIONS cannot be negative")

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        cap = cls.MAX_EXPANSIONS if cls.MAX_EXPANSIONS is not None else "width*height"
        lines = [
            "Shelfmap Configuration:",
            f"  Grid: {cls.GRID_COLS} cols x {cls.GRID_ROWS} rows",
            f"  Default Shelf: {cls.SHELF_WIDTH}x{cls.SHELF_HEIGHT}",
            f"  Max Expansions: {cap}",
            f"  Debug Grid: {cls.DEBUG_GRID}",
        ]
        return "\n".join(lines)
