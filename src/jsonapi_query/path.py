"""
Path classification.

The path addresses one of four JSON:API targets::

    /articles                         collection
    /articles/42                      single resource
    /articles/42/author               related resource
    /articles/42/relationships/author relationship

See https://jsonapi.org/format/#fetching-relationships.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .decoding import decode_path
from .exceptions import (
    EmptyPathError,
    PathDecodeError,
    PathFormatError,
    UnknownPathFormatError,
)
from .model import Request, Resource

if TYPE_CHECKING:
    from .decoding import IDecoder

_logger = logging.getLogger(__name__)

PATH_DELIMITER = "/"
RELATIONSHIPS_SEGMENT = "relationships"


def normalize_delimiters(path: str, delimiter: str = PATH_DELIMITER) -> str:
    """Collapse every run of ``delimiter`` into a single occurrence."""
    if not path:
        return path
    return re.sub(f"(?:{re.escape(delimiter)})+", delimiter, path)


def classify_path(path: str, decoder: IDecoder = decode_path) -> Request:
    """
    Map a 1-4 segment path onto a ``Request`` (without query).

    Raises:
        PathDecodeError: the path cannot be percent-decoded.
        EmptyPathError: the path has no segments.
        PathFormatError: segment 3 of a 4-segment path is not ``relationships``.
        UnknownPathFormatError: the path has more than 4 segments.
    """
    try:
        decoded = decoder(path)
    except ValueError as e:
        raise PathDecodeError(path, str(e)) from e

    normalized = normalize_delimiters(decoded)
    if normalized.startswith(PATH_DELIMITER):
        normalized = normalized[len(PATH_DELIMITER) :]
    if not normalized:
        raise EmptyPathError()

    segments = normalized.split(PATH_DELIMITER)
    _logger.debug("Classifying path %r with %d segments", normalized, len(segments))

    if len(segments) == 1:
        return Request(resource=Resource(type=segments[0]))
    if len(segments) == 2:
        return Request(resource=Resource(type=segments[0], id=segments[1]))
    if len(segments) == 3:
        return Request(
            resource=Resource(type=segments[0], id=segments[1]),
            related_resource_type=segments[2],
        )
    if len(segments) == 4:
        if segments[2] != RELATIONSHIPS_SEGMENT:
            raise PathFormatError(
                expected=RELATIONSHIPS_SEGMENT, received=segments[2], position=3
            )
        return Request(
            resource=Resource(type=segments[0], id=segments[1]),
            relationship_type=segments[3],
        )
    raise UnknownPathFormatError(normalized)
