from typing import Any, Dict, Optional


class RelayError(Exception):
    """中继错误基类，可直接渲染为 GraphQL 风格的 errors 信封"""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_error(self) -> Dict[str, Any]:
        error = {"message": self.message}
        if self.details is not None:
            error["details"] = self.details
        return error

    def to_envelope(self) -> Dict[str, Any]:
        return {"errors": [self.to_error()]}


class ConfigurationError(RelayError):
    """API 密钥缺失或格式错误"""


class ValidationError(RelayError):
    """请求缺少 query / messages 等必要字段"""


class UpstreamError(RelayError):
    """OpenAI 返回非 2xx 状态码"""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"OpenAI API error: {status_code}", details=body)
        self.status_code = status_code
        self.body = body


class InternalError(RelayError):
    def __init__(self, details: str):
        super().__init__("Internal server error", details=details)
