"""Base interfaces and errors for LLM providers."""

from abc import ABC, abstractmethod
from enum import Enum

from llm.models import CompletionResult


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    def __init__(self, model_name: str) -> None:
        """Validate and store the model identifier sent with every request."""
        if not isinstance(model_name, str):
            raise TypeError(f"model_name must be a string, got {type(model_name).__name__}")
        if not model_name.strip():
            raise ValueError("model_name cannot be empty or whitespace only")
        self.model_name = model_name.strip()

    @abstractmethod
    async def generate_response(
        self,
        instructions: str,
        input_text: str,
        max_tokens: int,
        *,
        timeout: float | None = None,
    ) -> CompletionResult:
        """Generate a completion for instructions + input, raising ServiceError on failure."""
        raise NotImplementedError(
            f"generate_response() not implemented for input={input_text!r}"
        )  # pragma: no cover

    @abstractmethod
    async def validate_connection(self) -> bool:
        """Test if the LLM provider is reachable and credentials work."""
        raise NotImplementedError("validate_connection() must be implemented")  # pragma: no cover


class LLMError(Exception):
    """Base error for the LLM adapter layer."""

    pass


class ErrorCode(Enum):
    UNKNOWN = "unknown"
    CREDENTIALS = "credentials"  # Provider rejected the API key (HTTP 401)
    RATE_LIMIT = "rate_limit"  # Provider throttled the call (HTTP 429)


class ServiceError(LLMError):
    """Provider-independent failure of a single completion call.

    Carries the instructions and input of the failing call so callers can log
    or surface them without holding on to the request themselves.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN,
        *,
        instructions: str = "",
        input_text: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.instructions = instructions
        self.input = input_text

    def __repr__(self) -> str:
        return f"ServiceError(code={self.code.value!r}, message={self.message!r})"
