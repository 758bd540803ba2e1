"""
High level chat assistant that hides provider and tool wiring.
"""

import logging
from collections.abc import Iterable

from llm_providers import LLMProviderRegistry, resolve_llm_config

from .shell import AgentShell
from .tools import Tool

logger = logging.getLogger(__name__)


class ChatAssistant(AgentShell):
    """
    AgentShell with sensible defaults and one-call provider setup.

    Example:
        assistant = ChatAssistant()
        assistant.init(api_key="sk-...")
        assistant.register_tools([weather_tool, calendar_tool])
        reply = await assistant.chat("hello")
    """

    def __init__(
        self,
        name: str = "Assistant",
        description: str = "General purpose assistant",
        version: str = "1.0",
        author: str = "unknown",
        **kwargs,
    ):
        super().__init__(name, description, version, author, **kwargs)

    def init(
        self,
        api_key: str | None = None,
        model_id: str = "gpt-4o-mini",
        provider_name: str = "openai",
        **agent_config,
    ) -> None:
        """
        Create the provider from configuration and bind it.

        Args:
            api_key: API key override; falls back to the environment.
            model_id: Model to chat with.
            provider_name: Registered provider name ('openai', 'local', ...).
            **agent_config: Extra overrides passed to resolve_llm_config
                (endpoint, temperature, max_tokens, ...).
        """
        config = resolve_llm_config(
            {"provider": provider_name, "model": model_id, "api_key": api_key, **agent_config}
        )
        provider = LLMProviderRegistry.get(config.provider, config=config)
        self.model_id = config.model_id
        logger.debug(f"Assistant '{self.name}' using {config.provider}/{config.model_id}")
        self.initialize(provider)

    def register_tool(self, tool: Tool) -> None:
        self.add_tool(tool)

    def register_tools(self, tools: Iterable[Tool]) -> None:
        for tool in tools:
            self.register_tool(tool)
