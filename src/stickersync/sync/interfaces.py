"""
Core Interfaces for the stickersync Sync Subsystem

This module defines the data structures shared by the path mapper, the
checksum engine, the installer and the orchestrator.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from stickersync.constants import STICKERS_DIR_NAME, WALLPAPERS_DIR_NAME

Pathish = Union[str, Path]


@dataclass(frozen=True)
class AssetIdentity:
    """Logical identity of the active sticker."""

    path: str
    """Relative identifier of the sticker image (e.g. '/happy/aqua.png')"""

    name: str
    """Identifier used to derive the wallpaper location (e.g. 'aqua.png')"""


class AssetKind(Enum):
    """The two asset slots kept in sync for every sticker."""

    STICKER = STICKERS_DIR_NAME
    WALLPAPER = WALLPAPERS_DIR_NAME

    @property
    def directory_name(self) -> str:
        return self.value


class AssetState(Enum):
    """Per-asset progress through one sync cycle."""

    UNCHECKED = "unchecked"
    FRESH = "fresh"
    STALE = "stale"
    INSTALLED = "installed"
    INSTALL_FAILED = "install_failed"


@dataclass(frozen=True)
class AssetLocation:
    """Remote and local location of one asset. Derived, never persisted."""

    kind: AssetKind
    remote_url: str
    local_path: str


@dataclass(frozen=True)
class SyncResult:
    """Reference URLs handed back to the display layer after a sync cycle."""

    sticker_url: str
    """file:// URL of the sticker image currently on disk"""

    wallpaper_url: str
    """file:// URL of the wallpaper image currently on disk"""

    sticker_state: AssetState = AssetState.UNCHECKED
    wallpaper_state: AssetState = AssetState.UNCHECKED
