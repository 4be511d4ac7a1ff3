"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QueryKeywords:
    """
    Top-level query keys the projection builders read.

    Defaults follow the JSON:API query parameter families; override them
    when an API exposes the same directives under different names, e.g.
    ``QueryKeywords(sort="order_by")``.
    """

    include: str = "include"
    sort: str = "sort"
    filter: str = "filter"
    fields: str = "fields"
    page: str = "page"


DEFAULT_KEYWORDS = QueryKeywords()
