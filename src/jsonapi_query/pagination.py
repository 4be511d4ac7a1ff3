"""PageBuilder — ``page[...]`` size, number, limit, offset and cursor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import DEFAULT_KEYWORDS, QueryKeywords
from .model import Page

if TYPE_CHECKING:
    from .model import Values

_logger = logging.getLogger(__name__)

PAGE_PARAMETERS = frozenset({"size", "number", "limit", "offset", "cursor"})


class PageBuilder:
    """Collect pagination parameters without interpreting them.

    Values stay strings: the pagination strategy (page-based, offset-based
    or cursor-based) is up to the application. A later occurrence of the
    same parameter overwrites an earlier one.
    """

    def __init__(self, keywords: QueryKeywords = DEFAULT_KEYWORDS) -> None:
        self._key = keywords.page

    def build(self, values: Values) -> Page | None:
        params: dict[str, str] = {}
        for item in values.get(self._key, ()):
            if item.nested_keys is None or len(item.nested_keys) != 1:
                continue
            name = item.nested_keys[0]
            if name not in PAGE_PARAMETERS:
                _logger.debug("Ignoring unknown page parameter %r", name)
                continue
            params[name] = item.value
        if not params:
            return None
        return Page(**params)
