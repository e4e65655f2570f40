"""
File helpers for installing assets under the configuration root.
"""

import os
import time
from pathlib import Path

import aiofiles  # type: ignore[import-untyped]

from stickersync.constants import TEMP_FILE_MARKER
from stickersync.exceptions import FileSystemError
from stickersync.log_utils import logger

from .interfaces import Pathish


def ensure_parent_dirs_exist(file_path: Pathish) -> None:
    """
    Make sure every ancestor directory of `file_path` exists.

    Walks up to the furthest missing ancestor, then creates the chain from
    there downward. Does nothing when the parent directory already exists.

    Raises:
        FileSystemError: If an ancestor exists as a non-directory or cannot be created.
    """
    parent = Path(file_path).parent
    if parent.is_dir():
        return

    missing = []
    current = parent
    while not current.exists():
        missing.append(current)
        if current.parent == current:
            break
        current = current.parent

    if current.exists() and not current.is_dir():
        raise FileSystemError(
            "Cannot create directory below a non-directory",
            path=str(current),
        )

    for directory in reversed(missing):
        try:
            directory.mkdir()
        except FileExistsError:
            # Another writer may have created it in the meantime
            if not directory.is_dir():
                raise FileSystemError(
                    "Path exists and is not a directory", path=str(directory)
                ) from None
        except OSError as e:
            raise FileSystemError(
                "Unable to create directory", path=str(directory), details=str(e)
            ) from e
        logger.debug(f"Created directory {directory}")


def _temp_path_for(target: Path) -> Path:
    return target.with_name(
        f"{target.name}{TEMP_FILE_MARKER}.{os.getpid()}.{int(time.time() * 1000)}"
    )


async def write_bytes_atomic(file_path: Pathish, data: bytes) -> None:
    """
    Write `data` to `file_path`, replacing any existing file in one step.

    The bytes go to a sibling temporary file first, which is then moved over
    the target, so readers never see a truncated asset.

    Raises:
        OSError: If the temporary file cannot be written or moved into place.
    """
    target = Path(file_path)
    temp_path = _temp_path_for(target)
    try:
        async with aiofiles.open(temp_path, "wb") as f:
            await f.write(data)
        temp_path.replace(target)
    except BaseException:
        if temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
        raise
