"""
Tool registry for the agent shell.

A tool is a named, described async callable that turns a message into a
reply. The registry keeps tools in insertion order so dispatch and listings
are deterministic.
"""

import logging
from collections.abc import Awaitable, Callable, Iterable, Iterator
from dataclasses import dataclass

from .exceptions import DuplicateToolError, ToolExecutionError

logger = logging.getLogger(__name__)

ToolHandler = Callable[[str], Awaitable[str]]

NO_TOOLS_MESSAGE = "No tools available."


@dataclass
class Tool:
    """A named action the agent can run instead of asking the model."""

    name: str
    description: str
    handler: ToolHandler

    async def invoke(self, text: str) -> str:
        """
        Run the handler on the raw message text.

        Raises:
            ToolExecutionError: If the handler raises.
        """
        try:
            result = await self.handler(text)
        except Exception as e:
            raise ToolExecutionError(self.name, str(e)) from e
        return result if isinstance(result, str) else str(result)


@dataclass
class ToolResult:
    """Outcome of a tool execution."""

    tool_name: str
    ok: bool
    output: str | None = None
    error: str | None = None


class ToolRegistry:
    """
    Mapping from tool name to Tool.

    Adding a tool under an existing name replaces it (last registration
    wins). Pass ``reject_duplicates=True`` to raise DuplicateToolError
    instead.

    Example:
        registry = ToolRegistry()
        registry.add(Tool("weather", "Current weather", get_weather))
        tool = registry.get("weather")
        result = await registry.execute(tool, "what's the weather")
    """

    def __init__(self, tools: Iterable[Tool] | None = None, *, reject_duplicates: bool = False):
        self._tools: dict[str, Tool] = {}
        self.reject_duplicates = reject_duplicates
        for tool in tools or ():
            self.add(tool)

    def add(self, tool: Tool) -> None:
        """Register a tool, replacing any tool with the same name."""
        if tool.name in self._tools:
            if self.reject_duplicates:
                raise DuplicateToolError(f"Tool '{tool.name}' is already registered")
            logger.debug(f"Replacing tool: {tool.name}")
        self._tools[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name}")

    def add_function(self, name: str, description: str, handler: ToolHandler) -> Tool:
        """Build a Tool from an async callable and register it."""
        tool = Tool(name=name, description=description, handler=handler)
        self.add(tool)
        return tool

    def remove(self, name: str) -> bool:
        """Remove a tool. Returns False if no tool had that name."""
        if self._tools.pop(name, None) is None:
            return False
        logger.debug(f"Removed tool: {name}")
        return True

    def get(self, name: str) -> Tool | None:
        """Get tool by name."""
        return self._tools.get(name)

    def list_tools(self) -> list[Tool]:
        """List all registered tools in insertion order."""
        return list(self._tools.values())

    def names(self) -> list[str]:
        return list(self._tools.keys())

    def describe_all(self) -> str:
        """One ``name: description`` line per tool, or a sentinel when empty."""
        if not self._tools:
            return NO_TOOLS_MESSAGE
        return "\n".join(f"{tool.name}: {tool.description}" for tool in self._tools.values())

    async def execute(self, tool: Tool, text: str) -> ToolResult:
        """
        Run a tool and capture the outcome.

        Handler failures are logged and returned as a failed ToolResult,
        never raised.
        """
        try:
            output = await tool.invoke(text)
        except ToolExecutionError as e:
            logger.warning(f"Tool '{e.tool_name}' failed: {e}")
            return ToolResult(tool_name=tool.name, ok=False, error=str(e))
        return ToolResult(tool_name=tool.name, ok=True, output=output)

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[Tool]:
        return iter(list(self._tools.values()))
