"""
Lookup of LLM providers by name.
"""

import logging
from collections.abc import Callable

from .base import LLMProvider
from .exceptions import ProviderNotFoundError
from .types import LLMConfig

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[LLMConfig | None], LLMProvider]


class LLMProviderRegistry:
    """
    Maps provider names to factories.

    Provider modules register themselves on import; ``ChatAssistant.init``
    and the CLI look them up by the name found in configuration.

    Example:
        LLMProviderRegistry.register("openai", OpenAIProvider, default=True)
        provider = LLMProviderRegistry.get("openai", config=config)
    """

    _factories: dict[str, ProviderFactory] = {}
    _default: str | None = None

    @classmethod
    def register(cls, name: str, factory: ProviderFactory, *, default: bool = False) -> None:
        """
        Register a provider class (or any callable taking an LLMConfig).

        The first registration becomes the default unless a later one passes
        ``default=True``.
        """
        cls._factories[name] = factory
        if default or cls._default is None:
            cls._default = name
        logger.debug(f"Registered LLM provider '{name}'")

    @classmethod
    def get(cls, name: str | None = None, config: LLMConfig | None = None) -> LLMProvider:
        """
        Build the named provider, or the default one.

        Raises:
            ProviderNotFoundError: If the name is not registered.
        """
        name = name or cls._default
        factory = cls._factories.get(name) if name else None
        if factory is None:
            known = ", ".join(cls._factories) or "none"
            raise ProviderNotFoundError(f"Unknown LLM provider {name!r} (registered: {known})")
        return factory(config)

    @classmethod
    def list_providers(cls) -> list[str]:
        """Registered names, in registration order."""
        return list(cls._factories)

    @classmethod
    def get_default(cls) -> str | None:
        return cls._default
