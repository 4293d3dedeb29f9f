"""
CLI Utilities - Shared helper functions for command line operations.

This module provides formatted printing and input loading used across the
CLI commands.
"""

import sys
from pathlib import Path

import click

from ..core.exceptions import InputNotFoundError

STDIN_PATH = "-"


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"), err=True)


def read_input(path: str) -> str:
    """
    Read IR text from a file path, or from stdin when the path is `-`.

    Raises:
        InputNotFoundError: If the file does not exist.
    """
    if path == STDIN_PATH:
        return sys.stdin.read()

    input_path = Path(path)
    if not input_path.is_file():
        raise InputNotFoundError(path)
    return input_path.read_text(encoding="utf-8", errors="replace")
