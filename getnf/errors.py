from typing import Optional


class GetnfError(Exception):
    """Base class for every failure reported to the user."""

    def __init__(self, message: str, font: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.font = font

    def __str__(self) -> str:
        if self.font:
            return f"{self.font}: {self.message}"
        return self.message


class NetworkError(GetnfError):
    """Contacting the GitHub API or downloading a release archive failed."""


class ArchiveError(NetworkError):
    """
    A downloaded archive could not be decompressed or unpacked.

    Subclasses NetworkError so a broken archive aborts a batch exactly like a
    failed download.
    """


class ParseError(GetnfError):
    """A GitHub API response is malformed or misses an expected field."""


class FilesystemError(GetnfError):
    """A font directory is missing, unreadable or not writable."""


class ConfigurationError(GetnfError):
    """A required environment variable is missing for this platform and scope."""


class UnsupportedPlatformError(GetnfError):
    """The operating system has no known font directory."""


class InvalidFontNameError(GetnfError):
    """A font name cannot be mapped to a single entry of the font directory."""
