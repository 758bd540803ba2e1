"""
Building an LLMConfig from per-agent overrides and environment defaults.
"""

import logging
import os
from typing import Any

from pydantic import BaseModel, Field

from .types import LLMConfig

logger = logging.getLogger(__name__)

# The only provider that talks to a self-hosted endpoint.
LOCAL_PROVIDER = "local"

ENV_VARS = {
    "default_provider": "DEFAULT_LLM_PROVIDER",
    "default_model": "DEFAULT_LLM_MODEL",
    "openai_api_key": "OPENAI_API_KEY",
    "local_model_endpoint": "LOCAL_MODEL_ENDPOINT",
}

# Override keys copied straight onto LLMConfig; any other key becomes an
# extra request parameter.
_CONFIG_KEYS = {
    "provider": "provider",
    "model": "model_id",
    "api_key": "api_key",
    "endpoint": "endpoint",
    "temperature": "temperature",
    "max_tokens": "max_tokens",
}


class ProviderSettings(BaseModel):
    """Application-wide LLM defaults."""

    default_provider: str = Field(default="openai", description="Provider used when none is given")
    default_model: str = Field(default="gpt-4o-mini", description="Model used when none is given")
    openai_api_key: str | None = None
    local_model_endpoint: str = "http://localhost:11434"

    @classmethod
    def from_env(cls) -> "ProviderSettings":
        """Read settings from the environment; unset or empty variables keep the default."""
        values = {
            field_name: os.environ[env_name]
            for field_name, env_name in ENV_VARS.items()
            if os.environ.get(env_name)
        }
        return cls(**values)

    def api_key_for(self, provider: str) -> str | None:
        return self.openai_api_key if provider == "openai" else None


def get_settings() -> ProviderSettings:
    return ProviderSettings.from_env()


def resolve_llm_config(
    agent_config: dict[str, Any] | None = None,
    settings: ProviderSettings | None = None,
) -> LLMConfig:
    """
    Layer agent overrides over the application defaults.

    Keys set to None in ``agent_config`` are ignored, so callers can pass
    optional arguments through unchanged. The API key falls back to the
    provider's key from settings, and the local provider falls back to
    ``local_model_endpoint``.

    Example:
        config = resolve_llm_config({"provider": "local", "model": "llama3.2"})
    """
    settings = settings or get_settings()
    fields: dict[str, Any] = {
        "provider": settings.default_provider,
        "model_id": settings.default_model,
    }
    extra_params: dict[str, Any] = {}

    for key, value in (agent_config or {}).items():
        if value is None:
            continue
        if key in _CONFIG_KEYS:
            fields[_CONFIG_KEYS[key]] = value
        else:
            extra_params[key] = value

    config = LLMConfig(**fields, extra_params=extra_params)
    if not config.api_key:
        config.api_key = settings.api_key_for(config.provider)
    if not config.endpoint and config.provider == LOCAL_PROVIDER:
        config.endpoint = settings.local_model_endpoint

    logger.debug("Resolved LLM config: provider=%s model=%s", config.provider, config.model_id)
    return config
