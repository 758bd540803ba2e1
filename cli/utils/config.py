"""Configuration management for the agent shell CLI."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "AGENT_SHELL_CONFIG"


class ShellConfig(BaseModel):
    """Agent shell CLI configuration."""

    model_config = ConfigDict(extra="ignore")

    provider: str = Field(default="openai", description="LLM provider name")
    model: str = Field(default="gpt-4o-mini", description="Model ID")
    agent_name: str = Field(default="Assistant", description="Name the agent introduces itself with")
    instructions: Optional[str] = Field(default=None, description="System prompt sent before the conversation")
    verbose: bool = Field(default=False, description="Verbose output by default")


def get_config_path() -> Path:
    """Get the path to the config file.

    Returns:
        Path from $AGENT_SHELL_CONFIG, or ~/.agent-shell/config.yaml
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".agent-shell" / "config.yaml"


def load_config() -> ShellConfig:
    """Load configuration from file.

    Returns:
        ShellConfig with loaded values, or defaults if the file is missing
        or malformed
    """
    config_path = get_config_path()

    if not config_path.exists():
        return ShellConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        return ShellConfig(**data)
    except Exception as e:
        logger.warning(f"Ignoring malformed config file {config_path}: {e}")
        return ShellConfig()


def save_config(config: ShellConfig):
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(exclude_none=True), f, default_flow_style=False)
