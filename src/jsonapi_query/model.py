"""
Immutable result model of a parsed JSON:API request.

Every object below is created once per parse call and never mutated.
Sequences are tuples; the two mapping types (``Values`` and
``ResourceFields``) are read-only ``Mapping`` implementations.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ValueObject(BaseModel):
    """Base class for the result objects.

    Value objects are immutable and defined by their attributes.
    Equality is structural (all fields compared).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self._field_values() == other._field_values()

    def __hash__(self) -> int:
        return hash(self._field_values())

    def _field_values(self) -> tuple[object, ...]:
        return tuple(getattr(self, name) for name in type(self).model_fields)


class Value(ValueObject):
    """One ``key[nested]...=value`` occurrence from the query string.

    ``nested_keys`` is ``None`` when the key carries no (valid) brackets;
    it is never an empty tuple.
    """

    top_level_key: str
    nested_keys: tuple[str, ...] | None = None
    value: str = ""


class Values(Mapping[str, tuple[Value, ...]]):
    """Read-only multimap: top-level key -> values in occurrence order."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Iterable[Value]] | None = None) -> None:
        frozen: dict[str, tuple[Value, ...]] = {}
        for key, items in (data or {}).items():
            entries = tuple(items)
            for entry in entries:
                if entry.top_level_key != key:
                    raise ValueError(
                        f"value with top-level key {entry.top_level_key!r} "
                        f"stored under {key!r}"
                    )
            frozen[key] = entries
        self._data = frozen

    def __getitem__(self, key: str) -> tuple[Value, ...]:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self.items()) == dict(other.items())

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def get_value(self, top_key: str, *nested_keys: str) -> str:
        """Return the first value whose nested keys match ``nested_keys`` exactly.

        ``values.get_value("page", "size")`` reads ``page[size]``;
        ``values.get_value("include")`` reads a bare ``include``.
        Returns an empty string when nothing matches.
        """
        for item in self._data.get(top_key, ()):
            if (item.nested_keys or ()) == nested_keys:
                return item.value
        return ""


class ResourceFields(Mapping[str, tuple[str, ...]]):
    """Sparse fieldsets: resource type -> requested field names.

    ``fields[articles]=title,body`` becomes ``{"articles": ("title", "body")}``.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Iterable[str]] | None = None) -> None:
        self._data = {key: tuple(fields) for key, fields in (data or {}).items()}

    def __getitem__(self, key: str) -> tuple[str, ...]:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self.items()) == dict(other.items())

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def fields_for(self, resource_type: str) -> tuple[str, ...] | None:
        """Return the fields requested for ``resource_type``, ``None`` if unset."""
        return self._data.get(resource_type)


class SortOrder(str, Enum):
    """Sort direction; ``-field`` in ``sort`` selects ``DESC``."""

    ASC = "ASC"
    DESC = "DESC"

    def __str__(self) -> str:
        return self.value


class Sort(ValueObject):
    """Sort criterion; ``sort=-createdAt`` is ``Sort("createdAt", DESC)``."""

    field_name: str
    order: SortOrder = SortOrder.ASC


class Filter(ValueObject):
    """``filter[createdAt]=lt:2015-01-01`` is ``Filter("createdAt", "lt:2015-01-01")``.

    The predicate is kept verbatim; its syntax belongs to the application.
    """

    field_name: str
    predicate: str


class Include(ValueObject):
    """Node of the inclusion forest built from ``include=comments.author``."""

    relation: str
    includes: tuple[Include, ...] = ()


class Page(ValueObject):
    """Pagination parameters, kept as strings; empty means unset."""

    size: str = ""
    number: str = ""
    limit: str = ""
    offset: str = ""
    cursor: str = ""


class Resource(ValueObject):
    """Addressed resource; an empty ``id`` means a collection request."""

    type: str
    id: str = ""

    @property
    def is_collection(self) -> bool:
        return not self.id


class Query(ValueObject):
    """All directives read from the query string."""

    includes: tuple[Include, ...] = ()
    fields: ResourceFields | None = None
    sort: tuple[Sort, ...] = ()
    filters: tuple[Filter, ...] = ()
    page: Page | None = None
    values: Values = Field(default_factory=Values)


class Request(ValueObject):
    """Result of parsing a path and its query string.

    ``/articles/1/author`` sets ``related_resource_type``;
    ``/articles/1/relationships/author`` sets ``relationship_type``.
    """

    resource: Resource
    relationship_type: str = ""
    related_resource_type: str = ""
    query: Query | None = None

    @model_validator(mode="after")
    def _check_target(self) -> Request:
        if self.relationship_type and self.related_resource_type:
            raise ValueError(
                "relationship_type and related_resource_type are mutually exclusive"
            )
        return self

    def is_relationship_request(self) -> bool:
        return self.relationship_type != ""

    def is_related_resource_request(self) -> bool:
        return self.related_resource_type != ""
