"""Failure taxonomy for profile lookups.

Each error carries the HTTP status and error code it is surfaced with.
Cache read/write problems are deliberately absent: they are logged and
absorbed by the orchestrator, never raised to callers.
"""

from typing import Any


class ProfileError(Exception):
    """Base class for failures that abort a profile lookup."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, detail: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class StructuralAbsence(ProfileError):
    """An always-present node (or its attribute) is missing from the page."""

    code = "PARSE_ERROR"


class ValueDecodeFailure(ProfileError):
    """A node was found but its marker is not in the known table."""

    code = "UNEXPECTED_VALUE"


class MalformedReference(ProfileError):
    """An attribute expected to hold a URL could not be parsed as one."""

    status_code = 400
    code = "MALFORMED_REFERENCE"


class UpstreamNotFound(ProfileError):
    """The career page does not exist for this battletag."""

    status_code = 404
    code = "PLAYER_NOT_FOUND"


class UpstreamFailure(ProfileError):
    """Origin returned a non-success status or the transport failed."""

    code = "UPSTREAM_FAILURE"


class CorruptCacheEntry(ProfileError):
    """A cached payload exists but does not decode into a profile."""

    code = "CORRUPT_CACHE_ENTRY"
