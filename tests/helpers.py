"""Builders for OpenAI SDK responses and errors used across unit tests."""

from __future__ import annotations

from types import SimpleNamespace

import httpx
import openai

API_URL = "https://api.openai.test/v1/chat/completions"


def make_completion(
    *contents: str | None, total_tokens: int | None = 0, with_usage: bool = True
) -> SimpleNamespace:
    """Build a chat completion response shaped like the OpenAI SDK object."""
    choices = [
        SimpleNamespace(index=i, message=SimpleNamespace(role="assistant", content=content))
        for i, content in enumerate(contents)
    ]
    usage = SimpleNamespace(total_tokens=total_tokens) if with_usage else None
    return SimpleNamespace(choices=choices, usage=usage)


def make_request() -> httpx.Request:
    return httpx.Request("POST", API_URL)


def make_status_error(status_code: int, message: str = "boom") -> openai.APIStatusError:
    """Build the SDK exception the client raises for a given HTTP status."""
    response = httpx.Response(status_code, request=make_request())
    error_cls = {
        400: openai.BadRequestError,
        401: openai.AuthenticationError,
        403: openai.PermissionDeniedError,
        404: openai.NotFoundError,
        429: openai.RateLimitError,
    }.get(status_code)
    if error_cls is None:
        error_cls = openai.InternalServerError if status_code >= 500 else openai.APIStatusError
    return error_cls(message, response=response, body=None)
