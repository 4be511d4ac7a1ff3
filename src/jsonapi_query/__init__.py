"""JSON:API request parsing — path addressing, include, fields, sort, filter, page."""

from __future__ import annotations

from .config import DEFAULT_KEYWORDS, QueryKeywords
from .decoding import IDecoder, decode_path, decode_query_component
from .exceptions import (
    DecodeError,
    EmptyPathError,
    JsonApiQueryError,
    PathDecodeError,
    PathError,
    PathFormatError,
    QueryDecodeError,
    UnknownPathFormatError,
)
from .includes import IncludeTreeBuilder
from .keys import extract_keys
from .model import (
    Filter,
    Include,
    Page,
    Query,
    Request,
    Resource,
    ResourceFields,
    Sort,
    SortOrder,
    Value,
    Values,
)
from .pagination import PageBuilder
from .parser import QueryParser, parse_path, parse_query, parse_request, parse_values
from .path import classify_path, normalize_delimiters
from .projections import FieldsBuilder, FilterBuilder, SortBuilder
from .values import tokenize

__all__ = [
    "DEFAULT_KEYWORDS",
    "DecodeError",
    "EmptyPathError",
    "FieldsBuilder",
    "Filter",
    "FilterBuilder",
    "IDecoder",
    "Include",
    "IncludeTreeBuilder",
    "JsonApiQueryError",
    "Page",
    "PageBuilder",
    "PathDecodeError",
    "PathError",
    "PathFormatError",
    "Query",
    "QueryDecodeError",
    "QueryKeywords",
    "QueryParser",
    "Request",
    "Resource",
    "ResourceFields",
    "Sort",
    "SortBuilder",
    "SortOrder",
    "UnknownPathFormatError",
    "Value",
    "Values",
    "classify_path",
    "decode_path",
    "decode_query_component",
    "extract_keys",
    "normalize_delimiters",
    "parse_path",
    "parse_query",
    "parse_request",
    "parse_values",
    "tokenize",
]
