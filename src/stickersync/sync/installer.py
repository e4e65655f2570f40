"""
Asset installer: download a remote asset and put it in place on disk.
"""

from stickersync.exceptions import StickerSyncError
from stickersync.log_utils import logger

from .client import AsyncAssetClient
from .files import ensure_parent_dirs_exist, write_bytes_atomic
from .interfaces import Pathish


async def download_remote_asset(
    client: AsyncAssetClient, remote_url: str, local_path: Pathish
) -> None:
    """
    Download `remote_url` and write it to `local_path`.

    The full payload is received before anything is written, so a failed
    download never touches the existing file.

    Raises:
        FileSystemError: If the parent directories cannot be created.
        NetworkError: If the download fails.
        OSError: If the file cannot be written.
    """
    ensure_parent_dirs_exist(local_path)
    logger.info(f"Downloading remote asset: {remote_url}")
    payload = await client.get_bytes(remote_url)
    logger.info("Remote asset downloaded!")
    await write_bytes_atomic(local_path, payload)
    logger.debug(f"Installed {len(payload)} bytes at {local_path}")


async def install(
    client: AsyncAssetClient, remote_url: str, local_path: Pathish
) -> bool:
    """
    Install a remote asset, reporting failures instead of raising them.

    Returns:
        bool: True if the asset was written, False if any step failed.
    """
    try:
        await download_remote_asset(client, remote_url, local_path)
        return True
    except (StickerSyncError, OSError) as e:
        logger.error(f"Unable to install asset {remote_url}! {e}")
    except Exception as e:
        logger.error(f"Unable to install asset {remote_url}! {e}", exc_info=True)
    return False
