"""
Exception hierarchy for irlens.

The IR pass itself never raises: malformed metadata is treated as plain text
and unresolvable scopes produce empty source locations. These exceptions
cover the collaborators around the pass (demangler, configuration, inputs).
"""

from pathlib import Path


class IrLensError(Exception):
    """Base class for all irlens errors."""


class DemanglerError(IrLensError):
    """
    Raised when the external demangler cannot produce usable output.

    Attributes:
        executable: The demangler command that was (or would have been) run.
        message: Human-readable error message.
    """

    def __init__(self, executable: str, message: str):
        self.executable = executable
        self.message = message
        super().__init__(f"Demangler '{executable}': {message}")


class ConfigError(IrLensError):
    """Raised when the configuration file exists but is unusable."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Config {path}: {message}")


class InputNotFoundError(IrLensError):
    """Raised when an IR input file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Input file not found: {path}")
