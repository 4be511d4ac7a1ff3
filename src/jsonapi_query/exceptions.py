"""
Exception hierarchy for request parsing.

Only two operations can fail: percent-decoding (path or query) and path
classification. Everything else degrades silently.

All exceptions inherit from ``JsonApiQueryError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class JsonApiQueryError(Exception):
    """Root exception for the jsonapi-query package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class DecodeError(JsonApiQueryError, ValueError):
    """Raised when percent-decoding fails."""

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(reason)


class QueryDecodeError(DecodeError):
    """The query string could not be unescaped."""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(raw, f"failed to unescape query: {reason}")


class PathDecodeError(DecodeError):
    """The path could not be unescaped."""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(raw, f"failed to unescape path {raw!r}: {reason}")


class PathError(JsonApiQueryError, ValueError):
    """Base class for path shape errors."""


class EmptyPathError(PathError):
    """Raised when the path has no segments."""

    def __init__(self) -> None:
        super().__init__("empty path is given, path must have 1-4 segments")


class UnknownPathFormatError(PathError):
    """Raised when the path has more than four segments."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"unknown path format {path!r}, path must have 1-4 segments")

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["path"] = self.path
        return result


class PathFormatError(PathError):
    """Raised when a fixed segment of the path holds an unexpected literal."""

    def __init__(self, expected: str, received: str, position: int) -> None:
        self.expected = expected
        self.received = received
        self.position = position
        super().__init__(
            f"path format error, expected segment {position} of the path "
            f"to be {expected!r} but {received!r} is received"
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["expected"] = self.expected
        result["received"] = self.received
        return result
