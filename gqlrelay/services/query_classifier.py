"""请求体与查询类型的分类（纯函数，不涉及 I/O）

这里没有真正的 GraphQL 解析：查询类型只按关键字子串判断，
未命中时返回 "unknown"，由上层渲染为 ``Unknown query type: unknown``。
"""
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Union

from gqlrelay.core.errors import ValidationError

QueryType = Literal["chat", "models", "unknown"]

SIMPLE_CHAT_FIELDS = ("prompt", "message", "input")
SELF_TEST_KEYWORDS = ("test", "测试")

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class GraphQLQuery:
    query: str
    variables: Dict[str, Any] = field(default_factory=dict)
    operation_name: Optional[str] = None


@dataclass(frozen=True)
class SimpleChat:
    text: str


@dataclass(frozen=True)
class MissingQuery:
    pass


ParsedBody = Union[GraphQLQuery, SimpleChat, MissingQuery]


def classify_body(body: Any) -> ParsedBody:
    """把 POST 请求体归类为 GraphQL 查询、简化聊天或缺少查询"""
    if not isinstance(body, dict):
        return MissingQuery()

    query = body.get("query")
    if query:
        variables = body.get("variables") or {}
        if not isinstance(variables, dict):
            raise ValidationError("GraphQL variables must be an object")
        return GraphQLQuery(
            query=str(query),
            variables=variables,
            operation_name=body.get("operationName"),
        )

    for name in SIMPLE_CHAT_FIELDS:
        value = body.get(name)
        if value:
            if not isinstance(value, str):
                raise ValidationError("Simple message must be a string")
            return SimpleChat(text=value)

    return MissingQuery()


def extract_query_type(query: str) -> QueryType:
    clean_query = _WHITESPACE.sub(" ", query).strip().lower()

    if "chat" in clean_query or "completion" in clean_query:
        return "chat"
    elif "models" in clean_query:
        return "models"

    return "unknown"


def is_self_test(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in SELF_TEST_KEYWORDS)
