import httpx
import pytest
from fastapi.testclient import TestClient

from gqlrelay.core.config import get_settings
from gqlrelay.services.openai_client import get_http_client
from helpers import FakeOpenAI, make_settings
from main import app


@pytest.fixture
def fake_openai():
    return FakeOpenAI()


@pytest.fixture
def configure(fake_openai):
    """返回一个函数，用于按测试需要替换配置；默认已配置有效密钥"""

    def _configure(**overrides):
        current = make_settings(**overrides)
        app.dependency_overrides[get_settings] = lambda: current
        return current

    async def _http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake_openai)) as client:
            yield client

    app.dependency_overrides[get_http_client] = _http_client
    _configure()
    yield _configure
    app.dependency_overrides.clear()


@pytest.fixture
def client(configure):
    with TestClient(app) as test_client:
        yield test_client
