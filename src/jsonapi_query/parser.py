"""QueryParser — request target -> ``Request`` with its ``Query``."""

from __future__ import annotations

import logging

from .config import DEFAULT_KEYWORDS, QueryKeywords
from .decoding import IDecoder, decode_path, decode_query_component
from .includes import IncludeTreeBuilder
from .model import Query, Request, Values
from .pagination import PageBuilder
from .path import classify_path
from .projections import FieldsBuilder, FilterBuilder, SortBuilder
from .values import tokenize

_logger = logging.getLogger(__name__)

QUERY_SEPARATOR = "?"


class QueryParser:
    """Parse JSON:API paths and query strings."""

    def __init__(
        self,
        keywords: QueryKeywords = DEFAULT_KEYWORDS,
        *,
        query_decoder: IDecoder = decode_query_component,
        path_decoder: IDecoder = decode_path,
    ) -> None:
        """
        Initialize QueryParser.

        Args:
            keywords: Top-level keys read by the projection builders.
            query_decoder: Percent-decoder for query strings.
            path_decoder: Percent-decoder for paths.
        """
        for name, decoder in (
            ("query_decoder", query_decoder),
            ("path_decoder", path_decoder),
        ):
            if not isinstance(decoder, IDecoder):
                raise TypeError(f"{name} must be callable, got {decoder!r}")
        self._query_decoder = query_decoder
        self._path_decoder = path_decoder
        self._includes = IncludeTreeBuilder(keywords)
        self._sort = SortBuilder(keywords)
        self._filters = FilterBuilder(keywords)
        self._fields = FieldsBuilder(keywords)
        self._page = PageBuilder(keywords)

    def parse_values(self, query: str) -> Values:
        """Tokenize ``query`` into the raw multimap."""
        return tokenize(query, self._query_decoder)

    def parse_query(self, query: str) -> Query:
        """Tokenize ``query`` and build every projection from the same values."""
        values = self.parse_values(query)
        return Query(
            includes=self._includes.build(values),
            fields=self._fields.build(values),
            sort=self._sort.build(values),
            filters=self._filters.build(values),
            page=self._page.build(values),
            values=values,
        )

    def parse_path(self, path: str) -> Request:
        """Classify ``path``; the returned request carries no query."""
        return classify_path(path, self._path_decoder)

    def parse_request(self, target: str, query: str | None = None) -> Request:
        """
        Parse ``/articles/42/comments?include=author`` into a ``Request``.

        Without ``query`` the target is split at the first ``?``; with it,
        ``target`` is taken as the path alone. The path is classified first,
        so path errors take precedence over query decoding errors.
        """
        if query is None:
            path, _, query = target.partition(QUERY_SEPARATOR)
        else:
            path = target
        request = self.parse_path(path)
        parsed = self.parse_query(query)
        _logger.debug(
            "Parsed request for %s (relationship=%r, related=%r)",
            request.resource,
            request.relationship_type,
            request.related_resource_type,
        )
        return request.model_copy(update={"query": parsed})


_default_parser = QueryParser()


def parse_values(query: str) -> Values:
    """Tokenize ``query`` with the default parser."""
    return _default_parser.parse_values(query)


def parse_query(query: str) -> Query:
    """Parse ``query`` with the default parser."""
    return _default_parser.parse_query(query)


def parse_path(path: str) -> Request:
    """Classify ``path`` with the default parser."""
    return _default_parser.parse_path(path)


def parse_request(target: str, query: str | None = None) -> Request:
    """Parse ``path?query`` (or a path plus ``query``) with the default parser."""
    return _default_parser.parse_request(target, query)
