from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # 服务信息
    APP_NAME: str = "OpenAI GraphQL Relay"
    APP_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # 日志
    LOG_LEVEL: str = "INFO"

    # OpenAI 接口配置
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_TIMEOUT_SECONDS: float = 60

    # 密钥格式校验（部分部署不要求 sk- 前缀）
    REQUIRE_KEY_PREFIX: bool = True
    API_KEY_PREFIX: str = "sk-"

    # 聊天默认参数
    DEFAULT_MODEL: str = "gpt-4o-mini"
    DEFAULT_MAX_TOKENS: int = 1024
    DEFAULT_TEMPERATURE: float = 0.7

    class Config:
        env_file = ".env"

settings = Settings()


def get_settings() -> Settings:
    """依赖注入：获取当前配置"""
    return settings
