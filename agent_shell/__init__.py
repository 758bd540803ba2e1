"""
Agent Shell - a minimal conversational agent.

An AgentShell keeps a registry of named tools, a rolling conversation log and
a reference to an LLM provider. Messages that mention a tool are handled by
that tool; everything else goes to the provider with the full conversation.

Example usage:
    from agent_shell import ChatAssistant, Tool

    async def weather(text: str) -> str:
        return "Sunny, 21°C"

    assistant = ChatAssistant()
    assistant.register_tool(Tool("weather", "Current weather", weather))
    assistant.init()  # OpenAI, key from OPENAI_API_KEY

    await assistant.chat("what's the weather")   # handled by the tool
    await assistant.chat("tell me a joke")       # answered by the model
"""

from .assistant import ChatAssistant
from .conversation import ConversationLog, Turn, TurnRole
from .dispatch import DispatchPolicy, ToolMatcher, ToolSelector, name_in_message
from .exceptions import (
    AgentShellError,
    ConfigurationError,
    DuplicateToolError,
    ToolExecutionError,
)
from .shell import AgentShell
from .tools import Tool, ToolHandler, ToolRegistry, ToolResult

__all__ = [
    # Core classes
    "AgentShell",
    "ChatAssistant",
    "ToolRegistry",
    "ConversationLog",
    "DispatchPolicy",
    # Types
    "Tool",
    "ToolHandler",
    "ToolResult",
    "Turn",
    "TurnRole",
    "ToolMatcher",
    "ToolSelector",
    "name_in_message",
    # Exceptions
    "AgentShellError",
    "ConfigurationError",
    "ToolExecutionError",
    "DuplicateToolError",
]
