"""
Self-hosted models behind an OpenAI-compatible server (Ollama, LM Studio, vLLM).
"""

import ipaddress
from urllib.parse import urlparse

from ..config import get_settings
from ..exceptions import InvalidEndpointError
from ..registry import LLMProviderRegistry
from ..types import LLMConfig
from .openai import OpenAIProvider

_LOCAL_HOSTNAMES = {"localhost", "host.docker.internal"}


def is_local_endpoint(endpoint: str) -> bool:
    """True for an http(s) URL on localhost or a private network address."""
    parsed = urlparse(endpoint)
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        return False
    host = parsed.hostname.lower()
    if host in _LOCAL_HOSTNAMES:
        return True
    try:
        address = ipaddress.ip_address(host)
    except ValueError:
        return False
    return address.is_loopback or address.is_private


class LocalModelProvider(OpenAIProvider):
    """
    OpenAIProvider pointed at ``<endpoint>/v1`` with no API key.

    The endpoint comes from the config, else ``LOCAL_MODEL_ENDPOINT``. Only
    localhost and private network addresses are accepted.
    """

    provider_name = "local"
    display_name = "Local model"
    requires_api_key = False
    models = ("llama3.2", "qwen2.5", "mistral")

    def __init__(self, config: LLMConfig | None = None):
        super().__init__(config)
        if not is_local_endpoint(self.endpoint):
            raise InvalidEndpointError(
                f"Local model endpoint {self.endpoint!r} must be on localhost or a private network"
            )

    @property
    def endpoint(self) -> str:
        if self.config and self.config.endpoint:
            return self.config.endpoint
        return get_settings().local_model_endpoint

    @property
    def base_url(self) -> str:
        return f"{self.endpoint.rstrip('/')}/v1"

    def _client_options(self) -> dict:
        # The openai client insists on a key; local servers ignore it.
        return {"base_url": self.base_url, "api_key": "local"}


LLMProviderRegistry.register("local", LocalModelProvider)
