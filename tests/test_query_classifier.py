import pytest

from gqlrelay.core.errors import ValidationError
from gqlrelay.services.query_classifier import (
    GraphQLQuery,
    MissingQuery,
    SimpleChat,
    classify_body,
    extract_query_type,
    is_self_test,
)


@pytest.mark.parametrize(
    "query, expected",
    [
        ("query { chat(messages: $m) { id } }", "chat"),
        ("mutation CreateCompletion { id }", "chat"),
        ("  query\n\t{  MODELS { id } }", "models"),
        ("query { chatModels { id } }", "chat"),
        ("query { users { id } }", "unknown"),
        ("", "unknown"),
    ],
)
def test_extract_query_type(query, expected):
    assert extract_query_type(query) == expected


def test_classify_graphql_query():
    parsed = classify_body(
        {"query": "query { chat }", "variables": {"messages": []}, "operationName": "Chat"}
    )
    assert parsed == GraphQLQuery(query="query { chat }", variables={"messages": []}, operation_name="Chat")


def test_classify_graphql_query_without_variables():
    parsed = classify_body({"query": "query { models { id } }"})
    assert isinstance(parsed, GraphQLQuery)
    assert parsed.variables == {}


def test_query_takes_precedence_over_simple_fields():
    parsed = classify_body({"query": "query { models { id } }", "prompt": "hello"})
    assert isinstance(parsed, GraphQLQuery)


@pytest.mark.parametrize("field", ["prompt", "message", "input"])
def test_classify_simple_chat(field):
    assert classify_body({field: "你好"}) == SimpleChat(text="你好")


def test_simple_chat_field_order():
    assert classify_body({"input": "c", "message": "b", "prompt": "a"}) == SimpleChat(text="a")
    assert classify_body({"prompt": "", "message": "b"}) == SimpleChat(text="b")


@pytest.mark.parametrize("body", [{}, {"variables": {}}, {"prompt": ""}, [], "text", None])
def test_classify_missing_query(body):
    assert isinstance(classify_body(body), MissingQuery)


def test_non_string_simple_message_rejected():
    with pytest.raises(ValidationError):
        classify_body({"prompt": 42})


def test_non_object_variables_rejected():
    with pytest.raises(ValidationError):
        classify_body({"query": "chat", "variables": ["x"]})


@pytest.mark.parametrize(
    "text, expected",
    [
        ("test", True),
        ("This is a TEST message", True),
        ("连接测试", True),
        ("latest news", True),
        ("hello", False),
        ("你好", False),
    ],
)
def test_is_self_test(text, expected):
    assert is_self_test(text) is expected
