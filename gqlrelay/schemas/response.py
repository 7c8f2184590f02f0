from pydantic import BaseModel
from typing import Optional, Any, List

class ApiResponse(BaseModel):
    code: int = 200
    message: str = "success"
    data: Optional[Any] = None


# GraphQL 风格错误项
class ErrorItem(BaseModel):
    message: str
    details: Optional[str] = None


class ErrorEnvelope(BaseModel):
    errors: List[ErrorItem]


# 简化聊天请求的响应
class SimpleChatReply(BaseModel):
    message: str


class SimpleChatError(BaseModel):
    error: str
