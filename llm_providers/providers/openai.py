"""
OpenAI chat completions provider.
"""

import logging

import openai

from ..base import LLMProvider
from ..config import get_settings
from ..exceptions import AuthenticationError, ProviderRequestError
from ..registry import LLMProviderRegistry
from ..types import ChatMessage, ChatResponse, LLMConfig

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """
    Chat completions through ``openai.AsyncOpenAI``.

    Any server speaking the same API can reuse this class by overriding
    :meth:`_client_options` (see ``LocalModelProvider``).
    """

    provider_name = "openai"
    display_name = "OpenAI"
    models = ("gpt-4o-mini", "gpt-4o", "gpt-4.1-mini", "gpt-4.1")

    def __init__(self, config: LLMConfig | None = None):
        super().__init__(config)
        self._client: openai.AsyncOpenAI | None = None

    @property
    def client(self) -> openai.AsyncOpenAI:
        # Created on first use so listing providers never needs a key.
        if self._client is None:
            self._client = openai.AsyncOpenAI(**self._client_options())
        return self._client

    def _client_options(self) -> dict:
        api_key = (self.config.api_key if self.config else None) or get_settings().openai_api_key
        return {"api_key": api_key}

    async def chat_async(
        self,
        messages: list[ChatMessage],
        model_id: str | None = None,
        **kwargs,
    ) -> ChatResponse:
        request = {
            "model": self.resolve_model(model_id),
            "messages": [message.to_dict() for message in messages],
            **(self.config.request_params() if self.config else {}),
            **kwargs,
        }
        logger.debug(
            "%s chat request: model=%s, %s messages",
            self.display_name,
            request["model"],
            len(messages),
        )
        try:
            completion = await self.client.chat.completions.create(**request)
        except openai.AuthenticationError as e:
            raise AuthenticationError(
                f"{self.display_name} rejected the API key: {e}", status_code=e.status_code
            ) from e
        except openai.OpenAIError as e:
            raise ProviderRequestError(
                f"{self.display_name} request failed: {e}",
                status_code=getattr(e, "status_code", None),
            ) from e
        return _to_response(completion)


def _to_response(completion) -> ChatResponse:
    """The last choice is the reply; a missing or null message becomes ""."""
    content = ""
    if completion.choices:
        content = completion.choices[-1].message.content or ""
    usage = None
    if completion.usage:
        usage = {
            "prompt_tokens": completion.usage.prompt_tokens,
            "completion_tokens": completion.usage.completion_tokens,
            "total_tokens": completion.usage.total_tokens,
        }
    return ChatResponse(content=content, model=completion.model, usage=usage)


LLMProviderRegistry.register("openai", OpenAIProvider, default=True)
