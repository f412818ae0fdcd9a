"""Configured LLM records as handed to the provider registry."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class ConfigIncompleteError(ValueError):
    """Raised when a configured LLM lacks a required setting (e.g. its API key)."""

    pass


@dataclass(frozen=True)
class LLMConfig:
    """One configured LLM: which provider type, which model, and its raw settings."""

    uuid: str
    llm_type: str
    model: str
    config: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate type and model identifiers."""
        if not isinstance(self.llm_type, str) or not self.llm_type.strip():
            raise ValueError("llm_type cannot be empty")
        if not isinstance(self.model, str) or not self.model.strip():
            raise ValueError("model cannot be empty")

    def get_string(self, key: str, default: str = "") -> str:
        """Return config[key] as a stripped string, or default when absent/not a string."""
        value = self.config.get(key)
        if not isinstance(value, str):
            return default
        return value.strip()

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> "LLMConfig":
        """Load a single LLM record from environment variables."""
        if env is None:
            env = os.environ
        model = (env.get("LLM_MODEL") or "").strip()
        if not model:
            raise ValueError("LLM_MODEL environment variable not found or empty")
        return LLMConfig(
            uuid=(env.get("LLM_UUID") or "").strip() or "local",
            llm_type=(env.get("LLM_TYPE") or "").strip() or "openai",
            model=model,
            config={
                "api_key": env.get("OPENAI_API_KEY") or "",
                "base_url": env.get("OPENAI_BASE_URL") or "",
            },
        )
