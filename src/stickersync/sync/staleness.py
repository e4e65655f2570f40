"""
Staleness decision for a single asset.
"""

from stickersync.exceptions import StickerSyncError
from stickersync.log_utils import logger

from .checksum import digest_of_file, fetch_remote_checksum
from .client import AsyncAssetClient
from .interfaces import Pathish


async def is_stale(
    client: AsyncAssetClient, remote_url: str, local_path: Pathish
) -> bool:
    """
    Decide whether the local copy of an asset needs to be replaced.

    A missing local file is always stale. When the check itself fails
    (checksum sidecar unreachable, local file unreadable) the error is logged
    and the asset is reported as not stale, leaving the cached copy in place.

    Parameters:
        client (AsyncAssetClient): HTTP client for the checksum sidecar.
        remote_url (str): URL of the remote asset.
        local_path (Pathish): Location of the cached copy.

    Returns:
        bool: True if the remote digest differs from the local one.
    """
    try:
        remote_checksum = await fetch_remote_checksum(client, remote_url)
        local_checksum = await digest_of_file(local_path)
    except (StickerSyncError, OSError) as e:
        logger.error(f"Unable to check for updates to {remote_url}: {e}")
        return False
    except Exception as e:
        logger.error(
            f"Unable to check for updates to {remote_url}: {e}", exc_info=True
        )
        return False

    if local_checksum is None:
        return True
    return remote_checksum != local_checksum
