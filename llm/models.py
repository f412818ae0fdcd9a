"""Request/response models exchanged with LLM completion endpoints."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from config.llm.defaults import COMPLETION_TEMPERATURE


class Role(Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ConversationTurn:
    """One role-tagged message sent to the completion endpoint."""

    role: Role
    content: str

    def __post_init__(self) -> None:
        """Coerce string roles and validate content type."""
        if isinstance(self.role, str):
            object.__setattr__(self, "role", Role(self.role))
        if not isinstance(self.role, Role):
            raise ValueError("role must be a Role enum value")
        if not isinstance(self.content, str):
            raise ValueError("content must be a string")

    def to_param(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}


@dataclass(frozen=True)
class CompletionRequest:
    """Everything needed for one chat completion call."""

    model: str
    turns: tuple[ConversationTurn, ...]
    max_output_tokens: int
    temperature: float = COMPLETION_TEMPERATURE

    def __post_init__(self) -> None:
        """Freeze turn ordering and validate the token ceiling."""
        if not isinstance(self.turns, tuple):
            object.__setattr__(self, "turns", tuple(self.turns))
        if not isinstance(self.max_output_tokens, int) or isinstance(self.max_output_tokens, bool):
            raise ValueError("max_output_tokens must be an integer")
        if self.max_output_tokens < 1:
            raise ValueError(f"max_output_tokens must be >= 1, got {self.max_output_tokens}")

    def to_params(self) -> dict[str, Any]:
        """Render as keyword arguments for chat.completions.create()."""
        return {
            "model": self.model,
            "messages": [turn.to_param() for turn in self.turns],
            "temperature": self.temperature,
            "max_tokens": self.max_output_tokens,
        }


@dataclass(frozen=True)
class CompletionResult:
    """Normalized outcome of a successful completion call."""

    output_text: str = ""
    tokens_used: int = 0
