"""Project-wide pytest fixtures and utilities."""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest

from config.llm import OpenAISettings
from llm.providers import openai as openai_module
from llm.providers.openai import OpenAIProvider
from tests.helpers import make_completion


@pytest.fixture
def fake_client(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    """Replace AsyncOpenAI with a fake whose chat/models endpoints are AsyncMocks."""
    client = SimpleNamespace(
        init_kwargs={},
        chat=SimpleNamespace(
            completions=SimpleNamespace(
                create=AsyncMock(return_value=make_completion("ok", total_tokens=7))
            )
        ),
        models=SimpleNamespace(list=AsyncMock()),
    )

    def _factory(**kwargs: Any) -> SimpleNamespace:
        client.init_kwargs = kwargs
        return client

    monkeypatch.setattr(openai_module, "AsyncOpenAI", _factory)
    return client


@pytest.fixture
def make_provider(fake_client: SimpleNamespace) -> Callable[..., OpenAIProvider]:
    """Factory for OpenAIProvider instances backed by fake_client."""

    def _make(model_name: str = "test-model", **settings_kwargs: Any) -> OpenAIProvider:
        settings = OpenAISettings(api_key="test-key", **settings_kwargs)
        return OpenAIProvider(settings, model_name)

    return _make
