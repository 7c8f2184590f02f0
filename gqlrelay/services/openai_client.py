import logging
from typing import Any, AsyncIterator, Dict

import httpx
from fastapi import Depends

from gqlrelay.core.config import Settings, get_settings
from gqlrelay.core.errors import UpstreamError

logger = logging.getLogger(__name__)


# 依赖注入：每个请求一个 httpx 客户端，请求结束后关闭
async def get_http_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=settings.OPENAI_TIMEOUT_SECONDS) as client:
        yield client


class OpenAIClient:
    """OpenAI REST 接口的最小封装，只负责发请求和检查状态码"""

    def __init__(self, http_client: httpx.AsyncClient, api_key: str, base_url: str):
        self.http_client = http_client
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    @staticmethod
    def _check(resp: httpx.Response) -> None:
        logger.info("OpenAI API response status: %s", resp.status_code)
        if resp.is_success:
            return
        logger.warning("OpenAI API error response: %s", resp.text)
        raise UpstreamError(resp.status_code, resp.text)

    async def create_chat_completion(self, req_body: Dict[str, Any]) -> Dict[str, Any]:
        resp = await self.http_client.post(
            f"{self.base_url}/chat/completions",
            headers={**self._headers(), "Content-Type": "application/json"},
            json=req_body,
        )
        self._check(resp)
        return resp.json()

    async def list_models(self) -> Dict[str, Any]:
        resp = await self.http_client.get(
            f"{self.base_url}/models",
            headers=self._headers(),
        )
        self._check(resp)
        return resp.json()
