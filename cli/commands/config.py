"""Config commands - inspect and update the CLI configuration file."""

import typer
from pydantic import ValidationError

from cli.utils.config import ShellConfig, get_config_path, load_config, save_config
from cli.utils.formatting import (
    FormatOption,
    OutputFormat,
    print_error,
    print_json,
    print_success,
    print_table,
)

config_app = typer.Typer(
    name="config",
    help="Show or change CLI settings",
    rich_markup_mode="rich",
)


@config_app.command(name="show")
def show_config(format: OutputFormat = FormatOption):
    """Show the current configuration."""
    values = load_config().model_dump()
    if format == OutputFormat.JSON:
        print_json(values)
        return
    print_table(f"Config ({get_config_path()})", ["Key", "Value"], values.items())


@config_app.command(name="set")
def set_config(
    key: str = typer.Argument(..., help="Setting name"),
    value: str = typer.Argument(..., help="New value"),
):
    """Set a configuration value."""
    if key not in ShellConfig.model_fields:
        print_error(f"Unknown setting: {key}. Valid: {', '.join(ShellConfig.model_fields)}")
        raise typer.Exit(code=1)

    try:
        config = ShellConfig(**{**load_config().model_dump(), key: value})
    except ValidationError as e:
        print_error(f"Invalid value for {key}: {e.errors()[0]['msg']}")
        raise typer.Exit(code=1)

    save_config(config)
    print_success(f"{key} = {getattr(config, key)}")
