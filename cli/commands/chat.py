"""Chat command - talk to the assistant once or interactively."""

import asyncio
from typing import Optional

import typer
from rich.panel import Panel

from agent_shell import AgentShell, AgentShellError
from cli.assistant import build_assistant
from cli.utils.config import load_config
from cli.utils.formatting import console, print_error, print_success
from llm_providers import LLMProviderError

EXIT_WORDS = {"exit", "quit"}


def print_reply(assistant: AgentShell, reply: str):
    console.print(f"[bold green]{assistant.name}:[/bold green] ", end="")
    console.print(reply, markup=False, highlight=False)


async def run_chat_loop(assistant: AgentShell):
    """Read messages until the user types exit/quit or closes stdin."""
    console.print(
        Panel(
            f"{assistant.description}\n\n"
            "Type [bold]/tools[/bold], [bold]/history[/bold] or [bold]/clear[/bold]; "
            "[bold]exit[/bold] to quit.",
            title=f"{assistant.name} v{assistant.version}",
        )
    )
    while True:
        try:
            user = await asyncio.to_thread(console.input, "[bold cyan]You:[/bold cyan] ")
        except (EOFError, KeyboardInterrupt):
            console.print("\nGoodbye!")
            break

        user = user.strip()
        if not user:
            continue
        if user.lower() in EXIT_WORDS:
            console.print("Goodbye!")
            break
        if user == "/tools":
            console.print(assistant.get_tools_description(), markup=False)
            continue
        if user == "/history":
            console.print(assistant.get_conversation_summary(), markup=False)
            continue
        if user == "/clear":
            assistant.clear_conversation_history()
            print_success("Conversation history cleared")
            continue

        print_reply(assistant, await assistant.chat(user))


def chat_command(
    content: Optional[str] = typer.Option(
        None, "--content", "-c", help="Send a single message and print the reply"
    ),
    provider: Optional[str] = typer.Option(None, "--provider", "-p", help="LLM provider name"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Model ID"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Agent name"),
):
    """Chat with the assistant."""
    config = load_config()
    try:
        assistant = build_assistant(config, provider=provider, model=model, name=name)
    except (LLMProviderError, AgentShellError) as e:
        print_error(f"Could not start assistant: {e}")
        raise typer.Exit(code=1)

    if content is not None:
        print_reply(assistant, asyncio.run(assistant.chat(content)))
        return

    asyncio.run(run_chat_loop(assistant))
