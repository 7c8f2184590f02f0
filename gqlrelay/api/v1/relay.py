import logging
from pathlib import Path

import httpx
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from gqlrelay.core.config import Settings, get_settings
from gqlrelay.core.errors import InternalError, ValidationError
from gqlrelay.schemas.response import ErrorEnvelope, SimpleChatError, SimpleChatReply
from gqlrelay.services.openai_client import get_http_client
from gqlrelay.services.query_classifier import (
    GraphQLQuery,
    SimpleChat,
    classify_body,
    is_self_test,
)
from gqlrelay.services.relay import (
    handle_chat_query,
    handle_graphql_query,
    self_test_message,
    simple_chat_variables,
)

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))

MISSING_QUERY_MESSAGE = "GraphQL query or simple message is required"


@router.get("/")
async def info_page(request: Request, settings: Settings = Depends(get_settings)):
    """服务说明页"""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "endpoint": str(request.url),
            "api_key_configured": bool(settings.OPENAI_API_KEY),
            "default_model": settings.DEFAULT_MODEL,
        },
    )


async def _handle_simple_chat(
    chat: SimpleChat,
    settings: Settings,
    http_client: httpx.AsyncClient,
) -> JSONResponse:
    # 连通性自检，不调用 OpenAI
    if is_self_test(chat.text):
        logger.info("Self-test message received")
        return JSONResponse(content=SimpleChatReply(message=self_test_message(chat.text)).model_dump())

    result = await handle_chat_query(simple_chat_variables(chat.text, settings), settings, http_client)
    if "errors" in result:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=SimpleChatError(error=", ".join(e["message"] for e in result["errors"])).model_dump(),
        )

    choices = result["data"]["chat"]["choices"]
    content = choices[0]["message"]["content"] if choices else ""
    return JSONResponse(content=SimpleChatReply(message=content).model_dump())


@router.post(
    "/",
    responses={
        400: {"model": ErrorEnvelope},
        500: {"model": ErrorEnvelope},
    },
)
async def relay(
    request: Request,
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
):
    """GraphQL 风格请求或简化聊天请求的统一入口"""
    try:
        body = await request.json()
        parsed = classify_body(body)

        if isinstance(parsed, SimpleChat):
            return await _handle_simple_chat(parsed, settings, http_client)

        if isinstance(parsed, GraphQLQuery):
            result = await handle_graphql_query(parsed, settings, http_client)
            return JSONResponse(content=result)

        raise ValidationError(MISSING_QUERY_MESSAGE)

    except ValidationError as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=e.to_envelope())
    except Exception as e:
        logger.exception("Error processing request")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=InternalError(str(e)).to_envelope(),
        )
