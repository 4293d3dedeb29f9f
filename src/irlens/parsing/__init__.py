"""
Parsing module for irlens.

Provides the single-pass LLVM IR processor and its building blocks:
- lines: line splitting
- metadata: DI metadata declaration parsing
- filters: configurable line filters
- llvm_ir: the orchestrating LlvmIrParser
"""

from .filters import FilterPipeline, FilterRegistry, is_llvm_directive
from .llvm_ir import LlvmIrParser, create_default_parser, is_llvm_ir
from .metadata import parse_meta_node

__all__ = [
    "FilterPipeline",
    "FilterRegistry",
    "LlvmIrParser",
    "create_default_parser",
    "is_llvm_directive",
    "is_llvm_ir",
    "parse_meta_node",
]
