from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class ChatMessage(BaseModel):
    role: str
    content: str


# chat 查询变量
class ChatVariables(BaseModel):
    model_config = ConfigDict(extra="ignore")

    messages: List[ChatMessage] = Field(default_factory=list)
    model: Optional[str] = None
    maxTokens: Optional[int] = None
    temperature: Optional[float] = None


class ChatChoice(BaseModel):
    message: ChatMessage
    finishReason: Optional[str] = None
    index: int = 0


class ChatUsage(BaseModel):
    promptTokens: int = 0
    completionTokens: int = 0
    totalTokens: int = 0


class ChatResult(BaseModel):
    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[ChatChoice]
    usage: ChatUsage
    created: Optional[int] = None


class ModelInfo(BaseModel):
    id: str
    object: Optional[str] = None
    created: Optional[int] = None
    ownedBy: Optional[str] = None
