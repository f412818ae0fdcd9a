"""Configuration settings for LLM providers."""

from config.llm.defaults import COMPLETION_TEMPERATURE, DEFAULT_TIMEOUT_SECONDS
from config.llm.llm_config import ConfigIncompleteError, LLMConfig
from config.llm.openai import OpenAISettings

__all__ = [
    "COMPLETION_TEMPERATURE",
    "DEFAULT_TIMEOUT_SECONDS",
    "ConfigIncompleteError",
    "LLMConfig",
    "OpenAISettings",
]
