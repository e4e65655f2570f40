"""
Sticker asset synchronization.

Checks the sticker and wallpaper of the active theme against the asset
server and installs changed files under the configuration root.
"""

from .checksum import digest, digest_of_file, fetch_remote_checksum
from .client import AsyncAssetClient, create_async_client
from .files import ensure_parent_dirs_exist, write_bytes_atomic
from .installer import install
from .interfaces import (
    AssetIdentity,
    AssetKind,
    AssetLocation,
    AssetState,
    SyncResult,
)
from .orchestrator import AssetSynchronizer, reference_urls, sync_assets
from .paths import (
    encode_path,
    resolve_locations,
    sticker_local_path,
    to_reference_url,
    wallpaper_local_path,
)
from .staleness import is_stale

__all__ = [
    "AssetIdentity",
    "AssetKind",
    "AssetLocation",
    "AssetState",
    "AssetSynchronizer",
    "AsyncAssetClient",
    "SyncResult",
    "create_async_client",
    "digest",
    "digest_of_file",
    "encode_path",
    "ensure_parent_dirs_exist",
    "fetch_remote_checksum",
    "install",
    "reference_urls",
    "is_stale",
    "resolve_locations",
    "sticker_local_path",
    "sync_assets",
    "to_reference_url",
    "wallpaper_local_path",
    "write_bytes_atomic",
]
