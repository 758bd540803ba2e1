"""
Errors raised by LLM providers.

The agent shell recovers every one of these at its chat boundary; the CLI
reports them when building an assistant fails.
"""


class LLMProviderError(Exception):
    """Base class for provider errors."""


class ProviderNotFoundError(LLMProviderError):
    """No provider is registered under the requested name."""


class InvalidEndpointError(LLMProviderError):
    """A local model endpoint is not on localhost or a private network."""


class ProviderRequestError(LLMProviderError):
    """A chat completion request failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(ProviderRequestError):
    """The provider rejected the API key."""
