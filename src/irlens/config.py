"""
Global Configuration and Defaults.

This module centralizes the defaults of the IR pass and loads the optional
project configuration file (`.irlens/config.yaml`). Environment variables
override file values so that CI jobs can tune limits without editing files.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from .core.exceptions import ConfigError
from .core.types import FilterConfig

logger = logging.getLogger(__name__)

# --- Output Limits ---
# Maximum number of IR lines returned by one pass before truncation
DEFAULT_MAX_IR_LINES = 5000

# Replaces the line at index `max_lines` once the output is truncated
TRUNCATION_MARKER = "[truncated; too many lines]"

# Language tag attached to every IR result
LANGUAGE_ID = "llvm-ir"

# --- Collaborators ---
DEFAULT_DEMANGLER = "llvm-cxxfilt"

DEFAULT_CONFIG_PATH = Path(".irlens/config.yaml")

ENV_MAX_LINES = "IRLENS_MAX_LINES"
ENV_DEMANGLER = "IRLENS_DEMANGLER"


class Settings(BaseModel):
    """
    Construction-time settings for an IR parser.

    `max_lines_of_asm` is fixed for the lifetime of a parser instance.
    """
    max_lines_of_asm: int = Field(default=DEFAULT_MAX_IR_LINES, ge=1)
    demangler: str = DEFAULT_DEMANGLER
    default_filters: FilterConfig = Field(default_factory=FilterConfig)


def load_settings(path: Path | None = None) -> Settings:
    """
    Load settings from YAML and apply environment overrides.

    A missing default file yields the defaults. A path that is given
    explicitly must exist. A file that cannot be parsed or validated raises
    ConfigError.

    Example `.irlens/config.yaml`:

        max_lines_of_asm: 10000
        demangler: c++filt
        default_filters:
          filterDebugInfo: true
          comments: true
    """
    config_path = path or DEFAULT_CONFIG_PATH
    data: dict = {}

    if path is not None and not path.is_file():
        raise ConfigError(path, "file not found")

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(config_path, f"invalid YAML: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(config_path, "top level must be a mapping")
        logger.debug(f"Loaded settings from {config_path}")

    max_lines = os.getenv(ENV_MAX_LINES)
    if max_lines:
        data["max_lines_of_asm"] = max_lines
    demangler = os.getenv(ENV_DEMANGLER)
    if demangler:
        data["demangler"] = demangler

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(config_path, str(e)) from e
