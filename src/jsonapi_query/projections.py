"""Sort, filter and sparse-fieldset builders over the ``Values`` multimap."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import DEFAULT_KEYWORDS, QueryKeywords
from .model import Filter, ResourceFields, Sort, SortOrder

if TYPE_CHECKING:
    from .model import Values

_logger = logging.getLogger(__name__)

LIST_DELIMITER = ","
DESCENDING_PREFIX = "-"


class SortBuilder:
    """
    Parse ``sort=createdAt,-title`` into ``Sort`` criteria.

    A field prefixed with ``-`` sorts descending. Field names are unique
    across all ``sort`` fragments: the first occurrence wins, including
    its direction, and later duplicates are dropped.
    """

    def __init__(self, keywords: QueryKeywords = DEFAULT_KEYWORDS) -> None:
        self._key = keywords.sort

    def build(self, values: Values) -> tuple[Sort, ...]:
        out: list[Sort] = []
        seen: set[str] = set()
        for item in values.get(self._key, ()):
            if item.nested_keys is not None or not item.value:
                _logger.debug("Skipping sort value %r", item)
                continue
            for part in item.value.split(LIST_DELIMITER):
                order = SortOrder.ASC
                if part.startswith(DESCENDING_PREFIX):
                    order = SortOrder.DESC
                    part = part[len(DESCENDING_PREFIX) :]
                if not part or part in seen:
                    continue
                seen.add(part)
                out.append(Sort(field_name=part, order=order))
        return tuple(out)


class FilterBuilder:
    """Parse ``filter[field]=predicate`` entries, keeping predicates verbatim.

    Repeated fields are all kept in encounter order. Entries with zero or
    several nested keys (``filter[a][b]``) stay reachable via ``Query.values``.
    """

    def __init__(self, keywords: QueryKeywords = DEFAULT_KEYWORDS) -> None:
        self._key = keywords.filter

    def build(self, values: Values) -> tuple[Filter, ...]:
        out: list[Filter] = []
        for item in values.get(self._key, ()):
            if item.nested_keys is None or len(item.nested_keys) != 1 or not item.value:
                _logger.debug("Skipping filter value %r", item)
                continue
            out.append(Filter(field_name=item.nested_keys[0], predicate=item.value))
        return tuple(out)


class FieldsBuilder:
    """
    Parse sparse fieldsets: ``fields[articles]=title,body``.

    Field lists of the same resource type are unioned across fragments in
    first-occurrence order; empty names are dropped. Returns ``None`` when
    no fragment contributed a field.
    """

    def __init__(self, keywords: QueryKeywords = DEFAULT_KEYWORDS) -> None:
        self._key = keywords.fields

    def build(self, values: Values) -> ResourceFields | None:
        fields: dict[str, list[str]] = {}
        seen: dict[str, set[str]] = {}
        for item in values.get(self._key, ()):
            if (
                item.nested_keys is None
                or len(item.nested_keys) != 1
                or not item.value.strip()
            ):
                _logger.debug("Skipping fields value %r", item)
                continue
            resource_type = item.nested_keys[0]
            by_resource = seen.setdefault(resource_type, set())
            to_append: list[str] = []
            for name in item.value.split(LIST_DELIMITER):
                if not name or name in by_resource:
                    continue
                by_resource.add(name)
                to_append.append(name)
            if not to_append:
                continue
            fields.setdefault(resource_type, []).extend(to_append)
        return ResourceFields(fields) if fields else None
