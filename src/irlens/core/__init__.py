"""
Core modules for irlens.

This package contains the fundamental building blocks:
- types: Data structures (MetaNode, OutputLine, FilterConfig, etc.)
- resolver: Source location resolution over the metadata graph
- exceptions: Errors raised by the collaborators around the IR pass
"""

from .exceptions import ConfigError, DemanglerError, InputNotFoundError, IrLensError
from .resolver import ScopeResolver, is_synthetic_filename
from .types import (
    FilterConfig, FilterStage, IrResult, MetaNode,
    OutputLine, ParseFilters, SourceLocation,
)

__all__ = [
    # Types
    "FilterConfig", "FilterStage", "IrResult", "MetaNode",
    "OutputLine", "ParseFilters", "SourceLocation",
    # Resolution
    "ScopeResolver", "is_synthetic_filename",
    # Errors
    "IrLensError", "ConfigError", "DemanglerError", "InputNotFoundError",
]
