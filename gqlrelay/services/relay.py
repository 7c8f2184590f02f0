"""GraphQL 风格请求到 OpenAI Chat Completions / Models 接口的转换

所有处理函数都返回信封字典：成功为 ``{"data": ...}``，失败为
``{"errors": [...]}``，两者互斥。配置与 HTTP 客户端均由调用方显式传入。
"""
import json
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from gqlrelay.core.config import Settings
from gqlrelay.core.errors import ConfigurationError, RelayError, ValidationError
from gqlrelay.core.logging import mask_key
from gqlrelay.schemas.graphql import (
    ChatChoice,
    ChatMessage,
    ChatResult,
    ChatUsage,
    ChatVariables,
    ModelInfo,
)
from gqlrelay.services.openai_client import OpenAIClient
from gqlrelay.services.query_classifier import GraphQLQuery, extract_query_type

logger = logging.getLogger(__name__)

SELF_TEST_REPLY = (
    '✅ 测试成功！收到您的消息: "{text}". '
    "服务和前端连接正常，CORS配置有效。现在需要配置OpenAI API密钥。"
)


def _error(message: str, details: Optional[str] = None) -> Dict[str, Any]:
    return RelayError(message, details).to_envelope()


def _require_api_key(settings: Settings, check_prefix: bool) -> str:
    api_key = settings.OPENAI_API_KEY
    if not api_key:
        logger.error("OPENAI_API_KEY environment variable is not set")
        raise ConfigurationError("OpenAI API key not configured")

    if check_prefix and settings.REQUIRE_KEY_PREFIX and not api_key.startswith(settings.API_KEY_PREFIX):
        logger.error("Invalid OpenAI API key format: %s", mask_key(api_key))
        raise ConfigurationError("Invalid OpenAI API key format")

    logger.debug("API key configured, length: %d", len(api_key))
    return api_key


def build_chat_request(variables: Dict[str, Any], settings: Settings) -> Dict[str, Any]:
    """把 chat 查询变量转换为 OpenAI 请求体，未提供的参数使用默认值"""
    try:
        chat_vars = ChatVariables.model_validate(variables)
    except PydanticValidationError as e:
        raise ValidationError("Invalid chat variables", details=str(e))

    if not chat_vars.messages:
        raise ValidationError("Messages are required for chat query")

    return {
        "model": chat_vars.model or settings.DEFAULT_MODEL,
        "messages": [m.model_dump() for m in chat_vars.messages],
        "max_tokens": chat_vars.maxTokens if chat_vars.maxTokens is not None else settings.DEFAULT_MAX_TOKENS,
        "temperature": (
            chat_vars.temperature if chat_vars.temperature is not None else settings.DEFAULT_TEMPERATURE
        ),
        "stream": False,
    }


def map_chat_response(data: Dict[str, Any]) -> Dict[str, Any]:
    usage = data.get("usage") or {}
    result = ChatResult(
        id=data.get("id"),
        model=data.get("model"),
        choices=[
            ChatChoice(
                message=ChatMessage(
                    role=choice["message"]["role"],
                    content=choice["message"].get("content") or "",
                ),
                finishReason=choice.get("finish_reason"),
                index=choice.get("index", 0),
            )
            for choice in data["choices"]
        ],
        usage=ChatUsage(
            promptTokens=usage.get("prompt_tokens") or 0,
            completionTokens=usage.get("completion_tokens") or 0,
            totalTokens=usage.get("total_tokens") or 0,
        ),
        created=data.get("created"),
    )
    return {"data": {"chat": result.model_dump()}}


def map_models_response(data: Dict[str, Any]) -> Dict[str, Any]:
    models = [
        ModelInfo(
            id=model["id"],
            object=model.get("object"),
            created=model.get("created"),
            ownedBy=model.get("owned_by"),
        ).model_dump()
        for model in data["data"]
    ]
    return {"data": {"models": models}}


async def handle_chat_query(
    variables: Dict[str, Any],
    settings: Settings,
    http_client: httpx.AsyncClient,
) -> Dict[str, Any]:
    try:
        api_key = _require_api_key(settings, check_prefix=True)
        req_body = build_chat_request(variables, settings)
    except RelayError as e:
        return e.to_envelope()

    logger.debug("Calling OpenAI API with: %s", json.dumps(req_body, ensure_ascii=False))
    client = OpenAIClient(http_client, api_key, settings.OPENAI_BASE_URL)
    try:
        data = await client.create_chat_completion(req_body)
        return map_chat_response(data)
    except RelayError as e:
        return e.to_envelope()
    except Exception as e:
        logger.exception("Chat query error")
        return _error("Failed to call OpenAI API", str(e))


async def handle_models_query(settings: Settings, http_client: httpx.AsyncClient) -> Dict[str, Any]:
    try:
        api_key = _require_api_key(settings, check_prefix=False)
    except RelayError as e:
        return e.to_envelope()

    client = OpenAIClient(http_client, api_key, settings.OPENAI_BASE_URL)
    try:
        data = await client.list_models()
        return map_models_response(data)
    except RelayError as e:
        return e.to_envelope()
    except Exception as e:
        logger.exception("Models query error")
        return _error("Failed to fetch models", str(e))


async def handle_graphql_query(
    request: GraphQLQuery,
    settings: Settings,
    http_client: httpx.AsyncClient,
) -> Dict[str, Any]:
    query_type = extract_query_type(request.query)
    logger.info("GraphQL query type: %s, operation: %s", query_type, request.operation_name)

    if query_type == "chat":
        return await handle_chat_query(request.variables, settings, http_client)
    if query_type == "models":
        return await handle_models_query(settings, http_client)
    return _error(f"Unknown query type: {query_type}")


def self_test_message(text: str) -> str:
    return SELF_TEST_REPLY.format(text=text)


def simple_chat_variables(text: str, settings: Settings) -> Dict[str, Any]:
    return {
        "messages": [{"role": "user", "content": text}],
        "model": settings.DEFAULT_MODEL,
        "maxTokens": settings.DEFAULT_MAX_TOKENS,
        "temperature": settings.DEFAULT_TEMPERATURE,
    }
