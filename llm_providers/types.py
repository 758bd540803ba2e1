"""
Data passed between an agent and its LLM provider.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class MessageRole(str, Enum):
    """Role of a message sent to the model."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class ChatMessage:
    """One message of the conversation sent to a provider."""

    role: MessageRole | str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": MessageRole(self.role).value, "content": self.content}


@dataclass
class ChatResponse:
    """The model's reply.

    ``content`` is the text of the last message the model produced; an empty
    string means it produced nothing.
    """

    content: str
    model: str
    usage: dict[str, int] | None = None


@dataclass
class LLMConfig:
    """Provider, model and request settings for one agent."""

    provider: str
    model_id: str
    api_key: str | None = None
    endpoint: str | None = None
    temperature: float = 0.7
    max_tokens: int | None = None
    extra_params: dict[str, Any] = field(default_factory=dict)

    def request_params(self) -> dict[str, Any]:
        """Sampling parameters for a chat completion request."""
        params: dict[str, Any] = {"temperature": self.temperature}
        if self.max_tokens:
            params["max_tokens"] = self.max_tokens
        params.update(self.extra_params)
        return params


@dataclass
class ProviderInfo:
    """What the CLI shows about a registered provider."""

    name: str
    display_name: str
    requires_api_key: bool
    models: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
