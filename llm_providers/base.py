"""
Base class for LLM providers.

An agent only ever awaits :meth:`LLMProvider.chat_async`. The descriptive
class attributes feed ``agent-shell providers``.
"""

from abc import ABC, abstractmethod

from .types import ChatMessage, ChatResponse, LLMConfig, ProviderInfo


class LLMProvider(ABC):
    """
    A chat model backend.

    Subclasses set the class attributes and implement ``chat_async``.

    Example:
        class EchoProvider(LLMProvider):
            provider_name = "echo"
            display_name = "Echo"
            requires_api_key = False

            async def chat_async(self, messages, model_id=None, **kwargs):
                return ChatResponse(content=messages[-1].content, model="echo")
    """

    provider_name: str
    display_name: str
    requires_api_key: bool = True
    models: tuple[str, ...] = ()

    def __init__(self, config: LLMConfig | None = None):
        self.config = config

    def list_models(self) -> list[str]:
        """Model IDs known to work with this provider."""
        return list(self.models)

    def get_info(self) -> ProviderInfo:
        return ProviderInfo(
            name=self.provider_name,
            display_name=self.display_name,
            requires_api_key=self.requires_api_key,
            models=self.list_models(),
        )

    def resolve_model(self, model_id: str | None = None) -> str:
        """
        Pick the model for a request: the argument, else the configured one.

        Raises:
            ValueError: If neither is set.
        """
        model = model_id or (self.config.model_id if self.config else None)
        if not model:
            raise ValueError(f"{self.display_name}: no model_id given and none configured")
        return model

    @abstractmethod
    async def chat_async(
        self,
        messages: list[ChatMessage],
        model_id: str | None = None,
        **kwargs,
    ) -> ChatResponse:
        """
        Send the conversation and return the model's reply.

        Args:
            messages: Conversation, oldest first.
            model_id: Overrides the configured model.
            **kwargs: Extra request parameters; they win over config values.
        """
