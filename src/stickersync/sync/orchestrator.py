"""
Sync Orchestrator

Drives the sticker and wallpaper of one identity through staleness check and
installation concurrently, and returns display-ready references to whatever
ends up on disk.
"""

import asyncio
from typing import Optional, Tuple

from stickersync.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_STICKER_ASSETS_URL,
    DEFAULT_WALLPAPER_ASSETS_URL,
)
from stickersync.log_utils import logger

from .client import AsyncAssetClient, create_async_client
from .installer import install
from .interfaces import AssetIdentity, AssetLocation, AssetState, Pathish, SyncResult
from .paths import resolve_locations, to_reference_url
from .staleness import is_stale


class AssetSynchronizer:
    """
    Keeps the local sticker and wallpaper of an identity in line with the asset server.

    Example:
        async with create_async_client() as client:
            synchronizer = AssetSynchronizer(client, config_root)
            result = await synchronizer.sync(AssetIdentity("/happy/aqua.png", "aqua.png"))
    """

    def __init__(
        self,
        client: AsyncAssetClient,
        config_root: Pathish,
        sticker_base_url: str = DEFAULT_STICKER_ASSETS_URL,
        wallpaper_base_url: str = DEFAULT_WALLPAPER_ASSETS_URL,
    ) -> None:
        self.client = client
        self.config_root = config_root
        self.sticker_base_url = sticker_base_url
        self.wallpaper_base_url = wallpaper_base_url

    def resolve(self, identity: AssetIdentity) -> Tuple[AssetLocation, AssetLocation]:
        return resolve_locations(
            identity,
            self.config_root,
            self.sticker_base_url,
            self.wallpaper_base_url,
        )

    async def sync_asset(self, location: AssetLocation) -> AssetState:
        """
        Run one asset through the staleness check and, if needed, installation.

        Parameters:
            location (AssetLocation): The asset to synchronize.

        Returns:
            AssetState: FRESH, INSTALLED or INSTALL_FAILED.
        """
        kind = location.kind.name.lower()
        if not await is_stale(self.client, location.remote_url, location.local_path):
            logger.debug(f"{kind} is up to date: {location.local_path}")
            return AssetState.FRESH

        state = AssetState.STALE
        logger.debug(f"{kind} is {state.value}: {location.local_path}")
        if await install(self.client, location.remote_url, location.local_path):
            state = AssetState.INSTALLED
        else:
            state = AssetState.INSTALL_FAILED
        return state

    async def sync(self, identity: AssetIdentity) -> SyncResult:
        """
        Synchronize the sticker and wallpaper of `identity`.

        Both assets are processed concurrently and independently; a failure on
        one never affects the other. The returned URLs always point at the
        current disk state, which is the previous copy when an update failed.

        Parameters:
            identity (AssetIdentity): The sticker to synchronize.

        Returns:
            SyncResult: Reference URLs plus the final state of each asset.
        """
        sticker, wallpaper = self.resolve(identity)
        outcomes = await asyncio.gather(
            self.sync_asset(sticker),
            self.sync_asset(wallpaper),
            return_exceptions=True,
        )

        states = []
        for location, outcome in zip((sticker, wallpaper), outcomes, strict=True):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.error(
                    f"Unexpected error syncing {location.remote_url}: {outcome}",
                    exc_info=outcome,
                )
                states.append(AssetState.INSTALL_FAILED)
            else:
                states.append(outcome)

        return SyncResult(
            sticker_url=to_reference_url(sticker.local_path),
            wallpaper_url=to_reference_url(wallpaper.local_path),
            sticker_state=states[0],
            wallpaper_state=states[1],
        )

    def reference_urls(self, identity: AssetIdentity) -> SyncResult:
        return reference_urls(
            identity,
            self.config_root,
            self.sticker_base_url,
            self.wallpaper_base_url,
        )


def reference_urls(
    identity: AssetIdentity,
    config_root: Pathish,
    sticker_base_url: str = DEFAULT_STICKER_ASSETS_URL,
    wallpaper_base_url: str = DEFAULT_WALLPAPER_ASSETS_URL,
) -> SyncResult:
    """Reference URLs for the assets currently on disk, without any network access."""
    sticker, wallpaper = resolve_locations(
        identity, config_root, sticker_base_url, wallpaper_base_url
    )
    return SyncResult(
        sticker_url=to_reference_url(sticker.local_path),
        wallpaper_url=to_reference_url(wallpaper.local_path),
    )


async def sync_assets(
    identity: AssetIdentity,
    config_root: Pathish,
    sticker_base_url: str = DEFAULT_STICKER_ASSETS_URL,
    wallpaper_base_url: str = DEFAULT_WALLPAPER_ASSETS_URL,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    client: Optional[AsyncAssetClient] = None,
) -> SyncResult:
    """
    Run one sync cycle, opening a client for the duration when none is given.

    Parameters:
        identity (AssetIdentity): The sticker to synchronize.
        config_root (Pathish): Directory holding `stickers/` and `wallpapers/`.
        sticker_base_url (str): Endpoint the sticker path is appended to.
        wallpaper_base_url (str): Endpoint the wallpaper name is appended to.
        timeout (float): Request timeout for a client created here.
        client (Optional[AsyncAssetClient]): Existing client to reuse.

    Returns:
        SyncResult: See `AssetSynchronizer.sync`.
    """
    if client is not None:
        return await AssetSynchronizer(
            client, config_root, sticker_base_url, wallpaper_base_url
        ).sync(identity)

    async with create_async_client(timeout=timeout) as owned_client:
        return await AssetSynchronizer(
            owned_client, config_root, sticker_base_url, wallpaper_base_url
        ).sync(identity)
