"""Agent shell CLI - Main entry point."""

import typer

from cli.commands.chat import chat_command
from cli.commands.config import config_app
from cli.commands.providers import providers_command
from cli.utils.config import load_config
from cli.utils.log_setup import configure_logging

app = typer.Typer(
    name="agent-shell",
    help="Agent Shell CLI - chat with a tool-using assistant",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.add_typer(config_app, name="config")

app.command(name="chat")(chat_command)
app.command(name="providers")(providers_command)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Agent Shell CLI for chatting with an LLM-backed assistant."""
    configure_logging(verbose or load_config().verbose)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
