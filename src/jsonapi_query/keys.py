"""Bracket key extraction: ``page[size]`` -> ``("page", ("size",))``."""

from __future__ import annotations

import logging
import re

_logger = logging.getLogger(__name__)

# IDENT ('[' NESTED_IDENT ']')+ with no characters between or after groups
_BRACKETED_KEY = re.compile(r"([^\[\]]+)((?:\[[^\[\]]+\])+)")
_NESTED_KEY = re.compile(r"\[([^\[\]]+)\]")


def extract_keys(token: str) -> tuple[str, tuple[str, ...] | None]:
    """
    Split ``token`` into its top-level key and nested keys.

    ``"top[n1][n2]"`` gives ``("top", ("n1", "n2"))``. A token without
    brackets gives ``(token, None)``.

    Any syntax violation (leading ``[``, stray ``]``, empty ``[]``, text
    between or after the bracket groups, unterminated group) is not an
    error: the whole token is returned unchanged as the top-level key with
    ``None`` nested keys.
    """
    if "[" not in token and "]" not in token:
        return token, None
    match = _BRACKETED_KEY.fullmatch(token)
    if match is None:
        _logger.debug("Malformed bracket key %r kept as a plain key", token)
        return token, None
    return match.group(1), tuple(_NESTED_KEY.findall(match.group(2)))
