"""
JSON output envelope for CLI commands.

Every `--json` response has the same shape so that editor integrations can
parse it without knowing the command:

    {"meta": {"command": "view", "status": "success"}, "data": {...}}
    {"meta": {"command": "view", "status": "error"}, "error": {"type": ..., "message": ...}}
"""

import json
from typing import Any

import click


class JsonRenderer:
    """Renders command results and errors as a JSON envelope on stdout."""

    def __init__(self, command: str):
        self.command = command

    def render_success(self, data: Any) -> None:
        self._emit({"meta": {"command": self.command, "status": "success"}, "data": data})

    def render_error(self, error: Exception) -> None:
        self._emit({
            "meta": {"command": self.command, "status": "error"},
            "error": {"type": type(error).__name__, "message": str(error)},
        })

    def _emit(self, payload: dict) -> None:
        click.echo(json.dumps(payload, indent=2, default=str))
