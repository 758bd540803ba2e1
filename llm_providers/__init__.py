"""
LLM providers for the agent shell.

An agent hands the conversation to an LLMProvider and reads back the reply.
Providers are looked up by name so the backend can be chosen from
configuration.

Example usage:
    from llm_providers import ChatMessage, LLMProviderRegistry, resolve_llm_config

    config = resolve_llm_config({"provider": "local", "model": "llama3.2"})
    provider = LLMProviderRegistry.get(config.provider, config=config)
    response = await provider.chat_async([ChatMessage(role="user", content="Hello!")])
    print(response.content)
"""

from .base import LLMProvider
from .config import ProviderSettings, get_settings, resolve_llm_config
from .exceptions import (
    AuthenticationError,
    InvalidEndpointError,
    LLMProviderError,
    ProviderNotFoundError,
    ProviderRequestError,
)
from .registry import LLMProviderRegistry
from .types import ChatMessage, ChatResponse, LLMConfig, MessageRole, ProviderInfo

# Registers the built-in providers
from . import providers  # noqa: F401

__all__ = [
    "LLMProvider",
    "LLMProviderRegistry",
    "ProviderSettings",
    "get_settings",
    "resolve_llm_config",
    "ChatMessage",
    "ChatResponse",
    "LLMConfig",
    "MessageRole",
    "ProviderInfo",
    "LLMProviderError",
    "ProviderNotFoundError",
    "ProviderRequestError",
    "AuthenticationError",
    "InvalidEndpointError",
]
