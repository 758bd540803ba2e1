"""
Tests for ChatAssistant.
"""

from unittest.mock import patch

import pytest

from agent_shell.assistant import ChatAssistant
from agent_shell.tools import Tool
from llm_providers import LLMConfig, ProviderNotFoundError
from llm_providers.providers.local import LocalModelProvider
from llm_providers.providers.openai import OpenAIProvider


async def echo(text: str) -> str:
    return text


class TestChatAssistant:
    """Tests for the high-level assistant façade."""

    def test_defaults(self):
        """The assistant carries default identity metadata."""
        assistant = ChatAssistant()

        assert assistant.name == "Assistant"
        assert assistant.description == "General purpose assistant"
        assert assistant.version == "1.0"
        assert assistant.author == "unknown"
        assert assistant.is_ready is False

    def test_init_binds_openai_provider(self, monkeypatch):
        """init builds an OpenAI provider with the given key and model."""
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        assistant = ChatAssistant()

        assistant.init(api_key="sk-test", model_id="gpt-4o")

        assert isinstance(assistant.provider, OpenAIProvider)
        assert assistant.provider.config.api_key == "sk-test"
        assert assistant.provider.config.model_id == "gpt-4o"
        assert assistant.model_id == "gpt-4o"

    def test_init_falls_back_to_environment_key(self, monkeypatch):
        """Without an explicit key the OPENAI_API_KEY variable is used."""
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        assistant = ChatAssistant()

        assistant.init()

        assert assistant.provider.config.api_key == "sk-env"
        assert assistant.model_id == "gpt-4o-mini"

    def test_init_with_local_provider(self):
        """init can select any registered provider by name."""
        assistant = ChatAssistant()

        assistant.init(provider_name="local", model_id="llama3.2", endpoint="http://localhost:1234")

        assert isinstance(assistant.provider, LocalModelProvider)
        assert assistant.provider.config.endpoint == "http://localhost:1234"

    def test_init_unknown_provider(self):
        """An unregistered provider name fails loudly."""
        with pytest.raises(ProviderNotFoundError):
            ChatAssistant().init(provider_name="nope")

    def test_init_runs_default_tools_hook(self):
        """Subclasses get their built-in tools registered on init."""

        class WithEcho(ChatAssistant):
            def initialize_default_tools(self):
                self.add_function_tool("echo", "Repeat the message", echo)

        assistant = WithEcho()
        with patch("agent_shell.assistant.resolve_llm_config") as resolve:
            resolve.return_value = LLMConfig(provider="openai", model_id="gpt-4o-mini")
            assistant.init()

        assert assistant.get_tool("echo") is not None

    def test_register_tools(self):
        """register_tool and register_tools add tools in order."""
        assistant = ChatAssistant()
        assistant.register_tool(Tool("a", "first", echo))
        assistant.register_tools([Tool("b", "second", echo), Tool("c", "third", echo)])

        assert assistant.registry.names() == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_chat_with_bound_provider(self, fake_provider):
        """A ChatAssistant chats like any other shell once a provider is bound."""
        assistant = ChatAssistant()
        assistant.register_tool(Tool("echo", "Repeat the message", echo))
        assistant.initialize(fake_provider)

        assert await assistant.chat("echo this") == "Tool 'echo' executed: echo this"
        assert await assistant.chat("hello") == "Hello from the model"
