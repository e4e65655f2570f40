"""
Path and URL mapping for sticker assets.

Every function here is pure apart from `to_reference_url`, which reads the
clock for its cache-busting query parameter.
"""

import os
import re
import time
from typing import Optional, Tuple
from urllib.parse import quote

from stickersync.constants import (
    CACHE_BUST_PARAM,
    CACHE_BUST_RADIX,
    EXTRA_ESCAPED_CHARACTERS,
    FILE_URL_SCHEME,
    URI_RESERVED_CHARACTERS,
)

from .interfaces import AssetIdentity, AssetKind, AssetLocation, Pathish

_EXTRA_ESCAPE_RX = re.compile(f"[{re.escape(EXTRA_ESCAPED_CHARACTERS)}]")
_RADIX_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _escape_char(match: "re.Match[str]") -> str:
    return f"%{ord(match.group()):02X}"


def encode_path(raw_path: Pathish) -> str:
    """
    Convert a file system path into a URL-safe, forward-slash path.

    Backslashes (and the platform separator) become `/`, the result is
    percent-encoded leaving URI-reserved characters intact, and finally
    `! ' ( ) *` are escaped as well.

    Parameters:
        raw_path (Pathish): Path or identifier to encode.

    Returns:
        str: The encoded path.
    """
    unencoded = str(raw_path).replace("\\", "/")
    if os.sep != "/":
        unencoded = unencoded.replace(os.sep, "/")
    encoded = quote(unencoded, safe=URI_RESERVED_CHARACTERS)
    return _EXTRA_ESCAPE_RX.sub(_escape_char, encoded)


def sticker_remote_segment(identity: AssetIdentity) -> str:
    return encode_path(identity.path)


def wallpaper_remote_segment(identity: AssetIdentity) -> str:
    return encode_path("/" + identity.name)


def _local_path(config_root: Pathish, kind: AssetKind, segment: str) -> str:
    # The segment's leading "/" separates it from the kind directory; it must
    # not make os.path.join discard the root.
    return os.path.join(
        str(config_root), kind.directory_name, *filter(None, segment.split("/"))
    )


def sticker_local_path(identity: AssetIdentity, config_root: Pathish) -> str:
    """Local path of the cached sticker image under `<config_root>/stickers/`."""
    return _local_path(config_root, AssetKind.STICKER, sticker_remote_segment(identity))


def wallpaper_local_path(identity: AssetIdentity, config_root: Pathish) -> str:
    """Local path of the cached wallpaper image under `<config_root>/wallpapers/`."""
    return _local_path(
        config_root, AssetKind.WALLPAPER, wallpaper_remote_segment(identity)
    )


def to_base32(value: int) -> str:
    """Render a non-negative integer in base 32 using the digits 0-9a-v."""
    if value < 0:
        raise ValueError(f"value must be >= 0, got {value}")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, CACHE_BUST_RADIX)
        digits.append(_RADIX_DIGITS[remainder])
    return "".join(reversed(digits))


def to_reference_url(local_path: Pathish, now: Optional[float] = None) -> str:
    """
    Build a display-ready `file://` URL for a local asset.

    The `time` query parameter changes on every call so a freshly installed
    file is not served from the display layer's image cache.

    Parameters:
        local_path (Pathish): Absolute path of the asset on disk.
        now (Optional[float]): Timestamp in seconds; defaults to `time.time()`.

    Returns:
        str: `file://<encoded path>?time=<base32 milliseconds>`.
    """
    timestamp = time.time() if now is None else now
    cache_buster = to_base32(int(timestamp * 1000))
    return f"{FILE_URL_SCHEME}{encode_path(local_path)}?{CACHE_BUST_PARAM}={cache_buster}"


def resolve_locations(
    identity: AssetIdentity,
    config_root: Pathish,
    sticker_base_url: str,
    wallpaper_base_url: str,
) -> Tuple[AssetLocation, AssetLocation]:
    """
    Resolve the sticker and wallpaper locations for an identity.

    Returns:
        Tuple[AssetLocation, AssetLocation]: (sticker, wallpaper). Remote URLs are
            the base endpoint concatenated with the encoded segment.
    """
    sticker = AssetLocation(
        kind=AssetKind.STICKER,
        remote_url=f"{sticker_base_url}{sticker_remote_segment(identity)}",
        local_path=sticker_local_path(identity, config_root),
    )
    wallpaper = AssetLocation(
        kind=AssetKind.WALLPAPER,
        remote_url=f"{wallpaper_base_url}{wallpaper_remote_segment(identity)}",
        local_path=wallpaper_local_path(identity, config_root),
    )
    return sticker, wallpaper
