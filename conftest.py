"""
Shared pytest fixtures.

Provides an in-memory LLM provider so no test talks to a real model, and
points the CLI config at a temporary file.
"""

import pytest

from llm_providers import ChatMessage, ChatResponse, LLMProvider


class FakeProvider(LLMProvider):
    """Provider that returns canned replies and records what it was sent."""

    provider_name = "fake"
    display_name = "Fake"
    requires_api_key = False
    models = ("fake-1",)

    def __init__(self, reply: str = "Hello from the model", error: Exception | None = None):
        super().__init__(None)
        self.reply = reply
        self.error = error
        self.calls: list[list[ChatMessage]] = []

    async def chat_async(self, messages, model_id=None, **kwargs) -> ChatResponse:
        self.calls.append(list(messages))
        if self.error:
            raise self.error
        return ChatResponse(content=self.reply, model=model_id or "fake-1")


@pytest.fixture
def fake_provider():
    """A provider that answers every request with a fixed reply."""
    return FakeProvider()


@pytest.fixture
def failing_provider():
    """A provider whose every call fails like a network error."""
    return FakeProvider(error=ConnectionError("connection reset by peer"))


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point the CLI at a config file inside tmp_path."""
    path = tmp_path / "config.yaml"
    monkeypatch.setenv("AGENT_SHELL_CONFIG", str(path))
    return path
