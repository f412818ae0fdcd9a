"""Provider registry keyed by configured LLM type.

Providers register a factory under one or more type keys when their module is
imported. Callers then build a provider from an LLMConfig without importing
the concrete class:

    provider = create_provider(LLMConfig(uuid="...", llm_type="openai", model="gpt-4o",
                                         config={"api_key": "..."}))
"""

import logging
from collections.abc import Callable

import httpx

from config.llm import LLMConfig
from llm.base import LLMProvider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[LLMConfig, httpx.AsyncClient | None], LLMProvider]

_FACTORIES: dict[str, ProviderFactory] = {}


def _normalize_key(type_key: str) -> str:
    return type_key.strip().lower()


def register_provider(type_key: str, factory: ProviderFactory) -> None:
    """Register factory under type_key (case-insensitive). Keys cannot be re-registered."""
    key = _normalize_key(type_key)
    if not key:
        raise ValueError("type_key cannot be empty")
    if key in _FACTORIES:
        raise ValueError(f"LLM provider type already registered: {key!r}")
    _FACTORIES[key] = factory
    logger.debug(f"Registered LLM provider type {key!r}")


def registered_types() -> list[str]:
    return sorted(_FACTORIES)


def create_provider(llm: LLMConfig, http_client: httpx.AsyncClient | None = None) -> LLMProvider:
    """Instantiate the provider registered for llm.llm_type."""
    key = _normalize_key(llm.llm_type)
    factory = _FACTORIES.get(key)
    if factory is None:
        raise KeyError(f"Unknown LLM provider type: {llm.llm_type!r}")
    return factory(llm, http_client)
