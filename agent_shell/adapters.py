"""
Adapters that expose third-party tools as agent shell tools.
"""

import asyncio
import logging

from smolagents import Tool as SmolTool

from .tools import Tool

logger = logging.getLogger(__name__)


def from_smolagents(smol_tool: SmolTool, *, name: str | None = None) -> Tool:
    """
    Wrap a smolagents tool that takes a single string input.

    The tool's synchronous ``forward`` runs in a worker thread so it does not
    block the event loop.

    Args:
        smol_tool: An instantiated smolagents Tool.
        name: Optional name override, e.g. a keyword users actually type.

    Raises:
        ValueError: If the tool does not take exactly one string input.
    """
    inputs = smol_tool.inputs or {}
    if len(inputs) != 1:
        raise ValueError(
            f"Tool '{smol_tool.name}' takes {len(inputs)} inputs; only single-input tools can be wrapped"
        )
    input_name, spec = next(iter(inputs.items()))
    if spec.get("type") != "string":
        raise ValueError(f"Tool '{smol_tool.name}' input '{input_name}' is not a string")

    async def handler(text: str) -> str:
        result = await asyncio.to_thread(smol_tool, **{input_name: text})
        return str(result)

    tool_name = name or smol_tool.name
    logger.debug(f"Wrapped smolagents tool '{smol_tool.name}' as '{tool_name}'")
    return Tool(name=tool_name, description=smol_tool.description, handler=handler)
