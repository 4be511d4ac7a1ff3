"""IDecoder — protocol for the percent-decoding collaborator, plus defaults."""

from __future__ import annotations

import re
from typing import Protocol, runtime_checkable
from urllib.parse import unquote, unquote_plus

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2}).{0,2}", re.DOTALL)


@runtime_checkable
class IDecoder(Protocol):
    """Unescape a raw path or query component.

    Implementations raise ``ValueError`` on malformed input; the parser
    wraps it into ``PathDecodeError`` / ``QueryDecodeError``.
    """

    def __call__(self, raw: str) -> str:
        """Return the decoded string."""
        ...


def _check_escapes(raw: str) -> None:
    match = _BAD_ESCAPE.search(raw)
    if match is not None:
        raise ValueError(f"invalid URL escape {match.group(0)!r}")


def decode_query_component(raw: str) -> str:
    """Form-style unescaping: ``+`` is a space, every ``%`` must start ``%XX``.

    Escaped bytes that are not UTF-8 are kept as lone surrogates, so
    ``.encode("utf-8", "surrogateescape")`` gives back the original bytes.
    """
    _check_escapes(raw)
    return unquote_plus(raw, errors="surrogateescape")


def decode_path(raw: str) -> str:
    """Path unescaping; ``+`` is kept as is."""
    _check_escapes(raw)
    return unquote(raw, errors="surrogateescape")
