import logging
from http import HTTPStatus
from typing import Any

import httpx
from openai import APIError, APIStatusError, AsyncOpenAI

from config.llm import COMPLETION_TEMPERATURE, LLMConfig, OpenAISettings
from llm.base import ErrorCode, LLMProvider, ServiceError
from llm.messages import build_messages
from llm.models import CompletionRequest, CompletionResult
from llm.registry import register_provider

logger = logging.getLogger(__name__)

TYPE_OPENAI = "openai"
TYPE_OPENAI_COMPATIBLE = "openai_compatible"

# Failures the completion call can surface; all of them become ServiceErrors.
_CALL_ERRORS = (
    APIError,
    httpx.HTTPError,
    TimeoutError,
    AttributeError,
    ValueError,
    TypeError,
    RuntimeError,
)


class OpenAIProvider(LLMProvider):
    def __init__(
        self,
        settings: OpenAISettings,
        model_name: str,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(model_name)
        self.settings = settings
        self.client = AsyncOpenAI(
            api_key=settings.api_key,
            base_url=settings.base_url,
            http_client=http_client,
            max_retries=0,
            timeout=settings.timeout_seconds,
        )

    async def generate_response(
        self,
        instructions: str,
        input_text: str,
        max_tokens: int,
        *,
        timeout: float | None = None,
    ) -> CompletionResult:
        """Run a chat completion for instructions + input and normalize the outcome."""
        request = CompletionRequest(
            model=self.model_name,
            turns=tuple(build_messages(instructions, input_text)),
            max_output_tokens=max_tokens,
            temperature=COMPLETION_TEMPERATURE,
        )
        logger.debug(f"Sending {len(request.turns)} turns to OpenAI model {self.model_name!r}")
        args: dict[str, Any] = request.to_params()
        if timeout is not None:
            args["timeout"] = timeout

        try:
            resp = await self.client.chat.completions.create(**args)
            return self._to_result(resp)
        except _CALL_ERRORS as exc:
            err = self._classify_openai_exception(exc, instructions, input_text)
            logger.warning(
                f"OpenAI completion failed for model {self.model_name!r} "
                f"(code={err.code.value}): {err.message}"
            )
            raise err from exc

    @staticmethod
    def _to_result(resp: Any) -> CompletionResult:
        """Map a chat completion response onto CompletionResult (first choice only)."""
        if not resp.choices:
            return CompletionResult(output_text="", tokens_used=0)

        content = resp.choices[0].message.content
        usage = getattr(resp, "usage", None)
        tokens = getattr(usage, "total_tokens", None) if usage is not None else None
        return CompletionResult(
            output_text=content or "",
            tokens_used=tokens if isinstance(tokens, int) else 0,
        )

    def _classify_openai_exception(
        self, e: Exception, instructions: str, input_text: str
    ) -> ServiceError:
        """Map OpenAI SDK (or any other) exceptions to a ServiceError code."""
        code = ErrorCode.UNKNOWN
        if isinstance(e, APIStatusError):
            status = getattr(e, "status_code", None)
            if status == HTTPStatus.UNAUTHORIZED:
                code = ErrorCode.CREDENTIALS
            elif status == HTTPStatus.TOO_MANY_REQUESTS:
                code = ErrorCode.RATE_LIMIT

        return ServiceError(str(e), code, instructions=instructions, input_text=input_text)

    async def validate_connection(self) -> bool:
        """Return True when OpenAI models.list succeeds; False when API errors."""
        try:
            await self.client.models.list()
            return True
        except (
            APIError,
            httpx.HTTPError,
            ValueError,
            TypeError,
            RuntimeError,
        ) as exc:
            logger.warning(f"OpenAIProvider connection validation failed: {exc}")
            return False


def new_openai_provider(
    llm: LLMConfig, http_client: httpx.AsyncClient | None = None
) -> OpenAIProvider:
    """Registry factory: build an OpenAIProvider from a configured LLM record."""
    settings = OpenAISettings.from_config(llm)
    return OpenAIProvider(settings, llm.model, http_client=http_client)


register_provider(TYPE_OPENAI, new_openai_provider)
register_provider(TYPE_OPENAI_COMPATIBLE, new_openai_provider)
