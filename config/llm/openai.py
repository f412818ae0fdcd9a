"""OpenAI LLM provider configuration settings."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from config.llm.defaults import DEFAULT_TIMEOUT_SECONDS
from config.llm.llm_config import ConfigIncompleteError, LLMConfig

CONFIG_API_KEY = "api_key"
CONFIG_BASE_URL = "base_url"


@dataclass(frozen=True)
class OpenAISettings:
    """Configuration for OpenAI (or OpenAI-compatible) LLM access."""

    api_key: str
    base_url: str | None = None
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> "OpenAISettings":
        """Load OpenAI settings from environment variables."""
        if env is None:
            env = os.environ
        key = (env.get("OPENAI_API_KEY") or "").strip()
        if not key:
            raise ConfigIncompleteError("OPENAI_API_KEY environment variable not found or empty")
        base_url = (env.get("OPENAI_BASE_URL") or "").strip() or None
        return OpenAISettings(api_key=key, base_url=base_url)

    @staticmethod
    def from_config(llm: LLMConfig) -> "OpenAISettings":
        """Load OpenAI settings from a configured LLM record."""
        key = llm.get_string(CONFIG_API_KEY)
        if not key:
            raise ConfigIncompleteError(f"config incomplete for LLM: {llm.uuid}")
        base_url = llm.get_string(CONFIG_BASE_URL) or None
        return OpenAISettings(api_key=key, base_url=base_url)
