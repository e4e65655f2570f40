"""
Checksum engine and remote checksum fetcher.

Assets are compared by MD5 digest. The digest only detects content drift; it
is not a tamper check.
"""

import hashlib
from typing import Optional, Union

import aiofiles  # type: ignore[import-untyped]

from stickersync.constants import CHECKSUM_SUFFIX
from stickersync.log_utils import logger

from .client import AsyncAssetClient
from .interfaces import Pathish


def digest(data: Union[bytes, str]) -> str:
    """Return the lowercase hex MD5 digest of `data` (str is UTF-8 encoded)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.md5(data).hexdigest()


async def digest_of_file(file_path: Pathish) -> Optional[str]:
    """
    Compute the digest of a local file.

    Returns:
        Optional[str]: The hex digest, or None when the file does not exist
            (the never-synced state). Other read errors propagate.
    """
    try:
        async with aiofiles.open(file_path, "rb") as f:
            contents = await f.read()
    except FileNotFoundError:
        logger.debug(f"No local copy at {file_path}")
        return None
    return digest(contents)


def checksum_url(remote_url: str) -> str:
    return f"{remote_url}{CHECKSUM_SUFFIX}"


async def fetch_remote_checksum(client: AsyncAssetClient, remote_url: str) -> str:
    """
    Read the digest published in the `.checksum.txt` sidecar of a remote asset.

    Parameters:
        client (AsyncAssetClient): HTTP client used for the request.
        remote_url (str): URL of the asset itself.

    Returns:
        str: The sidecar body with surrounding whitespace removed.

    Raises:
        NetworkError: If the sidecar cannot be read.
    """
    sidecar_url = checksum_url(remote_url)
    logger.info(f"Fetching resource checksum: {sidecar_url}")
    body = await client.get_bytes(sidecar_url)
    return body.decode("utf-8", errors="replace").strip()
