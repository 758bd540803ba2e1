"""
Exception hierarchy for the agent shell.

Only ConfigurationError ever reaches a caller of ``AgentShell.chat``. Tool
and provider faults are caught and turned into reply text.
"""


class AgentShellError(Exception):
    """Base exception for all agent shell errors."""

    pass


class ConfigurationError(AgentShellError):
    """Raised when the shell is used before a provider is bound."""

    pass


class ToolExecutionError(AgentShellError):
    """Raised when a tool handler fails."""

    def __init__(self, tool_name: str, message: str):
        super().__init__(message)
        self.tool_name = tool_name


class DuplicateToolError(AgentShellError):
    """Raised by a strict registry when a tool name is already taken."""

    pass
