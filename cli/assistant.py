"""Assistant used by the CLI, with a couple of built-in tools."""

from datetime import datetime, timezone

from agent_shell import ChatAssistant

from cli.utils.config import ShellConfig


async def current_time(text: str) -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


async def echo(text: str) -> str:
    return text


class CliAssistant(ChatAssistant):
    """ChatAssistant that ships the ``time`` and ``echo`` tools."""

    def initialize_default_tools(self) -> None:
        self.add_function_tool("time", "Current date and time in UTC", current_time)
        self.add_function_tool("echo", "Repeat the message back", echo)


def build_assistant(
    config: ShellConfig,
    provider: str | None = None,
    model: str | None = None,
    name: str | None = None,
) -> CliAssistant:
    """Create and initialize an assistant from config plus command-line overrides."""
    assistant = CliAssistant(name=name or config.agent_name, instructions=config.instructions)
    assistant.init(model_id=model or config.model, provider_name=provider or config.provider)
    return assistant
