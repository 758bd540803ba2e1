"""
Dispatch policy: decide whether a message goes to a tool or to the model.

The default policy is a keyword scan. Swap the matcher, subclass
DispatchPolicy, or hand AgentShell any object with a compatible ``select``
method to use smarter intent classification.
"""

import logging
from collections.abc import Callable
from typing import Protocol

from .tools import Tool, ToolRegistry

logger = logging.getLogger(__name__)

ToolMatcher = Callable[[str, Tool], bool]


def name_in_message(message: str, tool: Tool) -> bool:
    """True if the tool's name appears in the message, ignoring case."""
    return tool.name.lower() in message.lower()


class ToolSelector(Protocol):
    def select(self, message: str, registry: ToolRegistry) -> Tool | None: ...


class DispatchPolicy:
    """
    Pick the first registered tool whose matcher accepts the message.

    Tools are tried in registration order and the scan stops at the first
    match.
    """

    def __init__(self, matcher: ToolMatcher = name_in_message):
        self.matcher = matcher

    def select(self, message: str, registry: ToolRegistry) -> Tool | None:
        for tool in registry:
            if self.matcher(message, tool):
                logger.debug(f"Dispatching message to tool: {tool.name}")
                return tool
        return None
