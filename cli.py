#!/usr/bin/env python3
"""
Key-Value Shell CLI.

Entry point for the interactive key-value shell.

Usage:
    python cli.py --help
    python cli.py
    python cli.py --verbose
    python cli.py --debug
"""

import sys
from pathlib import Path

import click
import structlog

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from kvrepl.core.logging import get_logger, setup_logging


@click.command()
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output (INFO level logging).",
)
@click.option(
    "--debug", "-d",
    is_flag=True,
    help="Enable debug output (DEBUG level logging).",
)
def main(verbose: bool, debug: bool) -> None:
    """
    Interactive key-value shell.

    Reads one command per line. Type 'help' at the prompt for the list of
    commands, 'exit' or Ctrl-C to leave.

    \b
    Examples:
        python cli.py
        python cli.py --debug
    """
    if debug:
        log_level = "DEBUG"
    elif verbose:
        log_level = "INFO"
    else:
        log_level = None

    try:
        setup_logging(level=log_level)
    except ValueError as e:
        click.echo(click.style(f"Error loading config: {e}", fg="red"), err=True)
        sys.exit(1)

    structlog.contextvars.bind_contextvars(source="cli")

    logger = get_logger(__name__)
    logger.debug("CLI invoked", extra={"log_level": log_level})

    from kvrepl.shell.loop import run_shell

    sys.exit(run_shell())


if __name__ == "__main__":
    main()
