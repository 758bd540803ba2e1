"""
Tests for LLMProviderRegistry.
"""

import pytest

from llm_providers import LLMConfig, LLMProviderRegistry, ProviderNotFoundError
from llm_providers.providers.local import LocalModelProvider
from llm_providers.providers.openai import OpenAIProvider


@pytest.fixture
def empty_registry(monkeypatch):
    """A registry with nothing registered; the real one is restored afterwards."""
    monkeypatch.setattr(LLMProviderRegistry, "_factories", {})
    monkeypatch.setattr(LLMProviderRegistry, "_default", None)
    return LLMProviderRegistry


class TestBuiltinProviders:
    """Tests for the providers registered on import."""

    def test_registered_on_import(self):
        """Importing llm_providers registers openai (the default) and local."""
        assert LLMProviderRegistry.list_providers() == ["openai", "local"]
        assert LLMProviderRegistry.get_default() == "openai"

    def test_get_passes_config(self):
        """get builds the provider with the given config."""
        config = LLMConfig(provider="openai", model_id="gpt-4o")

        provider = LLMProviderRegistry.get("openai", config=config)

        assert isinstance(provider, OpenAIProvider)
        assert provider.config is config

    def test_get_without_name_uses_default(self):
        """No name means the default provider."""
        assert isinstance(LLMProviderRegistry.get(), OpenAIProvider)


class TestRegistration:
    """Tests for register/get on an empty registry."""

    def test_first_registration_becomes_default(self, empty_registry):
        """The first provider registered is the default."""
        empty_registry.register("local", LocalModelProvider)
        empty_registry.register("openai", OpenAIProvider)

        assert empty_registry.get_default() == "local"

    def test_default_flag(self, empty_registry):
        """default=True takes over from an earlier registration."""
        empty_registry.register("local", LocalModelProvider)
        empty_registry.register("openai", OpenAIProvider, default=True)

        assert empty_registry.get_default() == "openai"

    def test_any_factory_callable(self, empty_registry):
        """Factories need not be classes."""
        built = LocalModelProvider()
        empty_registry.register("shared", lambda config: built)

        assert empty_registry.get("shared") is built

    def test_unknown_name(self, empty_registry):
        """Unknown names raise ProviderNotFoundError listing what exists."""
        empty_registry.register("local", LocalModelProvider)

        with pytest.raises(ProviderNotFoundError, match="registered: local"):
            empty_registry.get("ollama")

    def test_nothing_registered(self, empty_registry):
        """get() with no default and no name fails."""
        with pytest.raises(ProviderNotFoundError, match="registered: none"):
            empty_registry.get()
