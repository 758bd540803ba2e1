"""
Built-in providers. Importing this package registers them:

- openai: the OpenAI API
- local: Ollama, LM Studio, vLLM or any other OpenAI-compatible local server
"""

from .openai import OpenAIProvider
from .local import LocalModelProvider

__all__ = ["OpenAIProvider", "LocalModelProvider"]
