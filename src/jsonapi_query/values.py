"""Query tokenizer — raw query string -> ``Values`` multimap."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from .decoding import decode_query_component
from .exceptions import QueryDecodeError
from .keys import extract_keys
from .model import Value, Values

if TYPE_CHECKING:
    from .decoding import IDecoder

_logger = logging.getLogger(__name__)

_FRAGMENT_SEPARATORS = re.compile(r"[&;]")


def tokenize(query: str, decoder: IDecoder = decode_query_component) -> Values:
    """
    Tokenize ``query`` into a multimap keyed by top-level key.

    The query is a list of ``key=value`` settings separated by ``&`` or
    ``;`` and optionally prefixed with ``?``. A setting without ``=`` is a
    key with an empty value. Keys may carry nested keys in square brackets,
    e.g. ``page[size]``.

    Raises:
        QueryDecodeError: the query cannot be percent-decoded.
    """
    if query.startswith("?"):
        query = query[1:]
    try:
        query = decoder(query)
    except ValueError as e:
        raise QueryDecodeError(query, str(e)) from e

    entries: dict[str, list[Value]] = {}
    for fragment in _FRAGMENT_SEPARATORS.split(query):
        if not fragment:
            continue
        key, _, value = fragment.partition("=")
        top_key, nested_keys = extract_keys(key)
        entries.setdefault(top_key, []).append(
            Value(top_level_key=top_key, nested_keys=nested_keys, value=value)
        )
    _logger.debug("Tokenized query into %d top-level keys", len(entries))
    return Values(entries)
