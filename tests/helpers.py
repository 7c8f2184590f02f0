import json

import httpx

from gqlrelay.core.config import Settings


class FakeOpenAI:
    """记录出站请求并返回预设响应的 MockTransport 处理器"""

    def __init__(self):
        self.requests = []
        self.routes = {}

    def reply(self, method, path, status_code=200, json_body=None, text=None):
        self.routes[(method, path)] = (status_code, json_body, text)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, json_body, text = self.routes.get(
            (request.method, request.url.path), (404, None, "not found")
        )
        if json_body is not None:
            return httpx.Response(status_code, json=json_body)
        return httpx.Response(status_code, text=text or "")

    def last_json(self):
        return json.loads(self.requests[-1].content)


def make_settings(**overrides):
    values = {"OPENAI_API_KEY": "sk-test-key"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


# OpenAI 接口的示例响应
CHAT_COMPLETION = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "gpt-4o-mini",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "你好！有什么可以帮您？"},
            "finish_reason": "stop",
        }
    ],
    "usage": {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21},
}

MODELS_LIST = {
    "object": "list",
    "data": [
        {"id": "gpt-4o-mini", "object": "model", "created": 1721172741, "owned_by": "system"},
        {"id": "gpt-4o", "object": "model", "created": 1715367049, "owned_by": "openai"},
    ],
}
