"""End-to-end tests for QueryParser."""

from __future__ import annotations

import pytest

from jsonapi_query import (
    EmptyPathError,
    Filter,
    Include,
    Page,
    PathDecodeError,
    PathFormatError,
    Query,
    QueryDecodeError,
    QueryKeywords,
    QueryParser,
    Request,
    Resource,
    ResourceFields,
    Sort,
    SortOrder,
    Value,
    Values,
    parse_path,
    parse_query,
    parse_request,
    parse_values,
)


def test_parse_query() -> None:
    query = parse_query(
        "?filter[title]=eq:foo&page[size]=16&sort=-createdAt,title"
        "&include=author&fields[articles]=title,body"
    )
    assert query == Query(
        includes=(Include(relation="author"),),
        fields=ResourceFields({"articles": ["title", "body"]}),
        sort=(
            Sort(field_name="createdAt", order=SortOrder.DESC),
            Sort(field_name="title", order=SortOrder.ASC),
        ),
        filters=(Filter(field_name="title", predicate="eq:foo"),),
        page=Page(size="16"),
        values=Values(
            {
                "filter": [
                    Value(
                        top_level_key="filter", nested_keys=("title",), value="eq:foo"
                    )
                ],
                "page": [
                    Value(top_level_key="page", nested_keys=("size",), value="16")
                ],
                "sort": [Value(top_level_key="sort", value="-createdAt,title")],
                "include": [Value(top_level_key="include", value="author")],
                "fields": [
                    Value(
                        top_level_key="fields",
                        nested_keys=("articles",),
                        value="title,body",
                    )
                ],
            }
        ),
    )


def test_parse_empty_query() -> None:
    query = parse_query("")
    assert query.includes == ()
    assert query.sort == ()
    assert query.filters == ()
    assert query.fields is None
    assert query.page is None
    assert query.values == Values()


def test_parse_request() -> None:
    request = parse_request("/articles/42/comments?fields[comments]=author")
    assert request == Request(
        resource=Resource(type="articles", id="42"),
        related_resource_type="comments",
        query=Query(
            fields=ResourceFields({"comments": ["author"]}),
            values=Values(
                {
                    "fields": [
                        Value(
                            top_level_key="fields",
                            nested_keys=("comments",),
                            value="author",
                        )
                    ]
                }
            ),
        ),
    )
    assert request.query is not None
    assert request.query.fields == {"comments": ("author",)}


def test_parse_request_with_separate_query() -> None:
    request = parse_request("/articles", "sort=-id")
    assert request.resource == Resource(type="articles")
    assert request.resource.is_collection
    assert request.query is not None
    assert request.query.sort == (Sort(field_name="id", order=SortOrder.DESC),)


def test_parse_request_without_query_attaches_empty_query() -> None:
    request = parse_request("/articles/1")
    assert request.query == Query()


def test_question_mark_in_query_value_is_kept() -> None:
    request = parse_request("/articles?filter[title]=why?")
    assert request.query is not None
    assert request.query.filters == (Filter(field_name="title", predicate="why?"),)


def test_include_merge_end_to_end() -> None:
    query = parse_query(
        "include=author,comments.author&include=comments.replies&include=author.avatar"
    )
    assert [i.relation for i in query.includes] == ["author", "comments"]
    assert [i.relation for i in query.includes[0].includes] == ["avatar"]
    assert [i.relation for i in query.includes[1].includes] == ["author", "replies"]


def test_path_errors_surface_before_query_errors() -> None:
    with pytest.raises(PathFormatError):
        parse_request("/a/b/c/d?x=%zz")
    with pytest.raises(EmptyPathError):
        parse_request("?include=author")
    with pytest.raises(QueryDecodeError):
        parse_request("/articles?x=%zz")


def test_parse_path_and_values_shortcuts() -> None:
    assert parse_path("/articles/1") == Request(
        resource=Resource(type="articles", id="1")
    )
    assert parse_values("a=1").get_value("a") == "1"


def test_custom_keywords() -> None:
    parser = QueryParser(QueryKeywords(sort="order_by", page="p"))
    query = parser.parse_query("order_by=-name&p[limit]=5&sort=ignored")
    assert query.sort == (Sort(field_name="name", order=SortOrder.DESC),)
    assert query.page == Page(limit="5")
    assert query.values.get_value("sort") == "ignored"


def test_custom_decoders() -> None:
    calls: list[str] = []

    def identity(raw: str) -> str:
        calls.append(raw)
        return raw

    parser = QueryParser(query_decoder=identity, path_decoder=identity)
    request = parser.parse_request("/articles/%41?q=%41")
    assert request.resource.id == "%41"
    assert request.query is not None
    assert request.query.values.get_value("q") == "%41"
    assert calls == ["/articles/%41", "q=%41"]


def test_failing_path_decoder() -> None:
    def broken(raw: str) -> str:
        raise ValueError("nope")

    parser = QueryParser(path_decoder=broken)
    with pytest.raises(PathDecodeError, match="nope"):
        parser.parse_path("/articles")


def test_decoders_must_be_callable() -> None:
    with pytest.raises(TypeError):
        QueryParser(query_decoder="not callable")  # type: ignore[arg-type]


def test_parsing_is_deterministic() -> None:
    target = "/articles?include=a.b,c&sort=x,-y&fields[a]=f&page[size]=1&filter[x]=1"
    assert parse_request(target) == parse_request(target)
