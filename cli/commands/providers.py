"""Providers command - list registered LLM providers and their models."""

from cli.utils.formatting import FormatOption, OutputFormat, print_json, print_table
from llm_providers import LLMProviderRegistry


def providers_command(format: OutputFormat = FormatOption):
    """List available LLM providers."""
    default = LLMProviderRegistry.get_default()
    infos = [LLMProviderRegistry.get(name).get_info() for name in LLMProviderRegistry.list_providers()]

    if format == OutputFormat.JSON:
        print_json([{**info.to_dict(), "default": info.name == default} for info in infos])
        return

    print_table(
        "LLM Providers",
        ["Name", "Display Name", "API Key", "Models"],
        [
            (
                f"{info.name} (default)" if info.name == default else info.name,
                info.display_name,
                "yes" if info.requires_api_key else "no",
                ", ".join(info.models),
            )
            for info in infos
        ],
    )
