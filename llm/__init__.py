"""LLM providers facade for the flow adapter."""

from llm.base import ErrorCode, LLMError, LLMProvider, ServiceError
from llm.messages import build_messages
from llm.models import CompletionRequest, CompletionResult, ConversationTurn, Role
from llm.providers.openai import OpenAIProvider
from llm.registry import create_provider, register_provider, registered_types

__all__ = [
    "LLMProvider",
    "LLMError",
    "ServiceError",
    "ErrorCode",
    "OpenAIProvider",
    "ConversationTurn",
    "Role",
    "CompletionRequest",
    "CompletionResult",
    "build_messages",
    "create_provider",
    "register_provider",
    "registered_types",
]
