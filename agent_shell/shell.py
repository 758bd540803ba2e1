"""
Agent shell: orchestrates a single chat turn.

A message is recorded, offered to the dispatch policy, and either handled by
a registered tool or forwarded with the whole conversation to the bound LLM
provider. Whatever happens, the reply is recorded and returned as text.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from llm_providers import ChatMessage, LLMProvider, MessageRole

from .conversation import NO_HISTORY_MESSAGE, ConversationLog, Turn, TurnRole
from .dispatch import DispatchPolicy, ToolSelector
from .exceptions import ConfigurationError
from .tools import Tool, ToolHandler, ToolRegistry

logger = logging.getLogger(__name__)

NO_RESPONSE_MESSAGE = "No response generated."


class AgentShell:
    """
    Conversational agent with a tool registry, a conversation log and an
    optional LLM provider.

    The shell is Uninitialized until a provider is bound with
    :meth:`initialize`. ``chat`` raises ConfigurationError before that; once
    Ready it always returns text, turning tool and provider faults into
    error replies that are kept in the history.

    Calls to ``chat`` on one shell must not overlap; the embedding
    application serializes them.

    Example:
        shell = AgentShell("Helper", "Answers questions", "1.0", "me")
        shell.add_function_tool("weather", "Current weather", get_weather)
        shell.initialize(LLMProviderRegistry.get("openai", config=config))
        reply = await shell.chat("what's the weather in Paris?")
    """

    def __init__(
        self,
        name: str,
        description: str,
        version: str,
        author: str,
        *,
        dispatch_policy: ToolSelector | None = None,
        model_id: str | None = None,
        instructions: str | None = None,
        reject_duplicate_tools: bool = False,
    ):
        self.name = name
        self.description = description
        self.version = version
        self.author = author
        self.model_id = model_id
        self.instructions = instructions
        self.dispatch_policy: ToolSelector = dispatch_policy or DispatchPolicy()
        self.registry = ToolRegistry(reject_duplicates=reject_duplicate_tools)
        self.log = ConversationLog()
        self._provider: LLMProvider | None = None

    # -------------------------------------------------------------------------
    # Initialization
    # -------------------------------------------------------------------------

    @property
    def provider(self) -> LLMProvider | None:
        return self._provider

    @property
    def is_ready(self) -> bool:
        return self._provider is not None

    def initialize(self, provider: LLMProvider | None = None) -> None:
        """
        Bind the LLM provider and register default tools.

        Args:
            provider: Provider used for replies no tool handles. When omitted
                only the default tools are registered and the shell stays
                Uninitialized.
        """
        if provider is not None:
            self._provider = provider
            logger.info(f"Agent '{self.name}' bound to provider '{provider.provider_name}'")
        self.initialize_default_tools()

    def initialize_default_tools(self) -> None:
        """Hook for subclasses that ship built-in tools."""
        pass

    # -------------------------------------------------------------------------
    # Tools
    # -------------------------------------------------------------------------

    @property
    def tools(self) -> Mapping[str, Tool]:
        """Read-only view of the registered tools by name."""
        return MappingProxyType({tool.name: tool for tool in self.registry})

    def add_tool(self, tool: Tool) -> None:
        self.registry.add(tool)

    def add_function_tool(self, name: str, description: str, handler: ToolHandler) -> Tool:
        return self.registry.add_function(name, description, handler)

    def remove_tool(self, name: str) -> bool:
        return self.registry.remove(name)

    def get_tool(self, name: str) -> Tool | None:
        return self.registry.get(name)

    def get_tools_description(self) -> str:
        """Tool listing with an ``Available tools:`` header."""
        if not len(self.registry):
            return self.registry.describe_all()
        lines = [f"- {line}" for line in self.registry.describe_all().splitlines()]
        return "Available tools:\n" + "\n".join(lines)

    # -------------------------------------------------------------------------
    # Chat
    # -------------------------------------------------------------------------

    async def chat(self, message: str) -> str:
        """
        Handle one user message and return the reply.

        Raises:
            ConfigurationError: If no provider has been bound.
        """
        if self._provider is None:
            raise ConfigurationError(
                "Chat model not initialized. Call initialize(provider) first."
            )

        self.log.append(TurnRole.USER, message)

        try:
            tool = self.dispatch_policy.select(message, self.registry)
            if tool is not None:
                reply = await self._run_tool(tool, message)
            else:
                reply = await self._ask_provider()
        except Exception as e:
            logger.error(f"Agent '{self.name}' failed to process message: {e}", exc_info=True)
            reply = f"Error processing message: {e}"

        self.log.append(TurnRole.AGENT, reply)
        return reply

    async def _run_tool(self, tool: Tool, message: str) -> str:
        result = await self.registry.execute(tool, message)
        if result.ok:
            return f"Tool '{tool.name}' executed: {result.output}"
        return f"Error executing tool '{tool.name}': {result.error}"

    def _build_messages(self) -> list[ChatMessage]:
        messages = self.log.to_chat_messages()
        if self.instructions:
            messages.insert(0, ChatMessage(role=MessageRole.SYSTEM, content=self.instructions))
        return messages

    async def _ask_provider(self) -> str:
        messages = self._build_messages()
        logger.debug(
            "Dispatching %s messages to %s",
            len(messages),
            self._provider.provider_name,
        )
        response = await self._provider.chat_async(messages, model_id=self.model_id)
        return response.content or NO_RESPONSE_MESSAGE

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    @property
    def conversation_history(self) -> tuple[Turn, ...]:
        return self.log.turns

    def clear_conversation_history(self) -> None:
        self.log.clear()

    def get_conversation_summary(self, window_size: int = 5) -> str:
        """Recent turns under a ``Conversation with <name>`` header."""
        if not len(self.log):
            return NO_HISTORY_MESSAGE
        header = f"Conversation with {self.name} ({len(self.log)} messages):"
        return f"{header}\n{self.log.summarize(window_size)}"

    def describe(self) -> dict[str, Any]:
        """Identity, tools and provider of this agent."""
        info = {
            "name": self.name,
            "description": self.description,
            "version": self.version,
            "author": self.author,
            "tools": self.registry.names(),
            "provider": self._provider.provider_name if self._provider else None,
        }
        logger.info(
            "Agent %s: %s (tools: %s)",
            self.name,
            self.description,
            ", ".join(info["tools"]) or "none",
        )
        return info
