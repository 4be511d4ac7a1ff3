"""Shared fixtures for jsonapi-query tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from jsonapi_query import Value, Values


@pytest.fixture
def make_values() -> Callable[..., Values]:
    """Build a ``Values`` multimap for a single top-level key.

    Each entry is either a plain value string or a ``(value, nested_keys)`` pair.
    """

    def _make(key: str, *entries: str | tuple[str, tuple[str, ...] | None]) -> Values:
        items = []
        for entry in entries:
            value, nested = (entry, None) if isinstance(entry, str) else entry
            items.append(Value(top_level_key=key, nested_keys=nested, value=value))
        return Values({key: items})

    return _make
