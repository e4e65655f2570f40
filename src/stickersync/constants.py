"""
Constants and configuration values for stickersync.

This module contains the hardcoded URLs, directory names, timeouts, and
logging settings used throughout the application.
"""

# Remote asset endpoints
DOKI_ASSETS_BASE = "https://doki.assets.unthrottled.io"
DEFAULT_STICKER_ASSETS_URL = f"{DOKI_ASSETS_BASE}/stickers/vscode"
DEFAULT_WALLPAPER_ASSETS_URL = f"{DOKI_ASSETS_BASE}/backgrounds/wallpapers"

# Sidecar resource published next to every remote asset
CHECKSUM_SUFFIX = ".checksum.txt"

# Network timeouts (in seconds)
DEFAULT_REQUEST_TIMEOUT = 30

# HTTP status thresholds
HTTP_STATUS_ERROR_THRESHOLD = 400

# File and directory names
APP_NAME = "stickersync"
CONFIG_FILE_NAME = "stickersync.yaml"
STICKERS_DIR_NAME = "stickers"
WALLPAPERS_DIR_NAME = "wallpapers"
TEMP_FILE_MARKER = ".tmp"

# Reference URL settings
FILE_URL_SCHEME = "file://"
CACHE_BUST_PARAM = "time"
CACHE_BUST_RADIX = 32

# Characters that encodeURI leaves alone; everything else gets percent-encoded
URI_RESERVED_CHARACTERS = ";,/?:@&=+$#!'()*"
# Survive URI encoding but are unsafe inside CSS url() references
EXTRA_ESCAPED_CHARACTERS = "!'()*"

# Logging configuration
LOGGER_NAME = "stickersync"
LOG_LEVEL_ENV_VAR = "STICKERSYNC_LOG_LEVEL"
LOG_FILE_NAME = "stickersync.log"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
INFO_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s: %(message)s"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_FILE_BACKUP_COUNT = 5
