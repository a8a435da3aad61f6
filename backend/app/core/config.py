import logging
import os
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

DEFAULT_ORIGINS = "http://localhost:3000"
DEFAULT_LOG_LEVEL = logging.INFO

DATABASE_URL = os.environ.get("DATABASE_URL")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("LOG_FILE")


def resolve_log_level(name: Optional[str]) -> int:
    """Maps a level name such as "debug" to its logging constant.

    Args:
        name (Optional[str]): Level name from the environment or a caller.

    Returns:
        int: The matching level, or INFO for unknown names.
    """
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def get_allowed_origins() -> List[str]:
    """Reads the CORS origins from ALLOWED_ORIGINS (comma-separated).

    Returns:
        List[str]: Non-empty origins, falling back to the local frontend.
    """
    raw = os.environ.get("ALLOWED_ORIGINS") or DEFAULT_ORIGINS
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
