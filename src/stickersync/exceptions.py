"""
Custom exceptions for stickersync.

Configuration problems propagate to the command line. Download and file system
errors are raised by the low-level helpers and stopped at the staleness check
and installer boundaries, which log them and carry on.
"""


class StickerSyncError(Exception):
    """
    Base exception for all stickersync errors.

    Catch this to handle any application-specific failure.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        """
        Initialize the exception.

        Args:
            message: The primary error message.
            details: Optional additional context about the error.
        """
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(StickerSyncError):
    """
    Exception raised when configuration is invalid or missing.

    This includes:
    - Missing sticker identity
    - Invalid configuration values
    - Configuration file parsing errors
    """

    pass


class ConfigFileError(ConfigurationError):
    """Exception raised when configuration file cannot be read or written."""

    pass


class ConfigValidationError(ConfigurationError):
    """Exception raised when configuration validation fails."""

    pass


# =============================================================================
# Download Errors
# =============================================================================


class DownloadError(StickerSyncError):
    """
    Base exception for download-related errors.

    Attributes:
        url: The URL that was being fetched when the error occurred.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url


class NetworkError(DownloadError):
    """
    Exception raised when a remote resource cannot be read.

    This includes:
    - Connection failures and DNS errors
    - Timeouts
    - Non-success HTTP responses (see HTTPError)
    """

    pass


class HTTPError(NetworkError):
    """
    Exception raised for non-success HTTP responses.

    Attributes:
        status_code: The HTTP status code returned by the server.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message, url, details)
        self.status_code = status_code


# =============================================================================
# File System Errors
# =============================================================================


class FileSystemError(StickerSyncError):
    """
    Exception raised for local file system failures.

    Attributes:
        path: The file path that caused the error.
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message, details)
        self.path = path
