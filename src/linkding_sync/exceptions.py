"""Custom exceptions for linkding-sync."""


class LinkdingSyncError(Exception):
    """Base exception for linkding-sync."""


class FetchError(LinkdingSyncError):
    """Raised when the bookmark request fails or returns an unusable body."""


class DestinationError(LinkdingSyncError):
    """Raised when the destination note cannot be resolved to a file."""


class UnknownSettingError(LinkdingSyncError):
    """Raised when a settings edit names a key that does not exist."""
