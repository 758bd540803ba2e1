"""Agent shell command line interface."""
