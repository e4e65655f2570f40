# src/stickersync/utils.py
import importlib.metadata
from typing import Optional

from stickersync.constants import APP_NAME

# Cached after the first metadata lookup
_VERSION_CACHE: Optional[str] = None


def get_version() -> str:
    """
    Return the installed stickersync version, or "unknown" when the package metadata is unavailable.
    """
    global _VERSION_CACHE

    if _VERSION_CACHE is None:
        try:
            _VERSION_CACHE = importlib.metadata.version(APP_NAME)
        except importlib.metadata.PackageNotFoundError:
            _VERSION_CACHE = "unknown"

    return _VERSION_CACHE


def get_user_agent() -> str:
    """Get the User-Agent string used for HTTP requests (`stickersync/{version}`)."""
    return f"{APP_NAME}/{get_version()}"
