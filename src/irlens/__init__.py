"""
irlens - LLVM IR post-processing.

irlens turns raw compiler-emitted LLVM IR into a filtered, source-annotated
line listing: debug-info metadata is collected during a single scan, `!dbg`
attachments are resolved to file/line/column, and huge outputs are truncated.

Key Components:
- parsing: line scanning, metadata parsing, filters and the IR pass
- core: data types, scope resolution, exceptions
- demangler: external symbol demangling collaborator

Usage:
    from irlens import FilterConfig, create_default_parser

    parser = create_default_parser()
    result = parser.process_ir(ir_text, FilterConfig(filter_debug_info=True))
"""

__version__ = "0.1.0"

from .core.types import FilterConfig, IrResult, MetaNode, OutputLine, ParseFilters, SourceLocation
from .parsing.llvm_ir import LlvmIrParser, create_default_parser, is_llvm_ir

__all__ = [
    "__version__",
    "FilterConfig",
    "IrResult",
    "LlvmIrParser",
    "MetaNode",
    "OutputLine",
    "ParseFilters",
    "SourceLocation",
    "create_default_parser",
    "is_llvm_ir",
]
