from gqlrelay.schemas.response import (
    ApiResponse,
    ErrorItem,
    ErrorEnvelope,
    SimpleChatReply,
    SimpleChatError,
)
from gqlrelay.schemas.graphql import (
    ChatMessage,
    ChatVariables,
    ChatChoice,
    ChatUsage,
    ChatResult,
    ModelInfo,
)
