"""Logging setup for the CLI."""

import logging
import os


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging. $LOG_LEVEL overrides the verbosity flag."""
    level = logging.DEBUG if verbose else logging.WARNING

    env_level = os.environ.get("LOG_LEVEL")
    if env_level:
        level = getattr(logging, env_level.upper(), level)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    logging.getLogger().setLevel(level)
