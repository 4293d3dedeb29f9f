"""
LLVM IR Parser.

Turns raw compiler-emitted LLVM IR text into a filtered list of output
lines, each optionally annotated with the source location of its `!dbg`
attachment.

One pass:
    1. Split the text into lines, collapsing runs of blank lines.
    2. Drop lines rejected by the pre-capture filters.
    3. Capture `!dbg !N` scopes and record every DI metadata declaration,
       even ones the post-capture filters drop from the output.
    4. Truncate the output to the configured line cap.
    5. Resolve source locations against the complete metadata graph, so
       forward references work.
    6. Optionally hand the lines to a demangler.
"""

import logging
import re
from typing import Any, Dict, List

from ..config import DEFAULT_MAX_IR_LINES, LANGUAGE_ID, TRUNCATION_MARKER, Settings
from ..core.exceptions import DemanglerError
from ..core.resolver import ScopeResolver
from ..core.types import FilterConfig, IrResult, MetaNode, OutputLine, ParseFilters
from ..demangler import Demangler, LlvmIrDemangler
from .filters import FilterPipeline
from .lines import is_blank, split_lines
from .metadata import parse_meta_node

logger = logging.getLogger(__name__)

DEBUG_REFERENCE_RE = re.compile(r"!dbg (!\d+)")


def is_llvm_ir(code: str) -> bool:
    """
    Heuristic check for IR carrying debug info.

    Requires a global value reference, a DI metadata node and a `!dbg`
    attachment to all appear in the text.
    """
    return "@llvm" in code and "!DI" in code and "!dbg" in code


class LlvmIrParser:
    """
    Post-processor for LLVM IR text.

    The line cap is fixed at construction; everything else is local to a
    single call, so one parser can serve independent inputs.

    Attributes:
        max_ir_lines: Output line cap before truncation.
        demangler: Collaborator used when a call requests demangling.
    """

    def __init__(
        self,
        max_ir_lines: int = DEFAULT_MAX_IR_LINES,
        demangler: Demangler | None = None,
    ):
        self.max_ir_lines = max_ir_lines
        self.demangler = demangler
        self._logger = logging.getLogger(f"{__name__}.LlvmIrParser")

    def process_ir(self, ir: str, filters: FilterConfig) -> IrResult:
        pipeline = FilterPipeline(filters)
        result: List[OutputLine] = []
        debug_info: Dict[str, MetaNode] = {}
        prev_line_empty = False

        lines = split_lines(ir)
        for line in lines:
            if is_blank(line):
                # Avoid multiple successive empty lines
                if not prev_line_empty:
                    result.append(OutputLine(text=""))
                prev_line_empty = True
                continue

            if pipeline.drops_before_capture(line):
                continue

            # Non-meta IR line; metadata is attached with "!dbg !123"
            match = DEBUG_REFERENCE_RE.search(line)
            scope = match.group(1) if match else None

            meta_node = parse_meta_node(line)
            if meta_node:
                debug_info[meta_node.meta_id] = meta_node

            if pipeline.drops_after_capture(line):
                continue

            result.append(OutputLine(text=line, scope=scope))
            prev_line_empty = False

        self._logger.debug(
            f"Scanned {len(lines)} lines: {len(result)} kept, {len(debug_info)} metadata nodes"
        )

        if len(result) >= self.max_ir_lines:
            self._logger.info(f"Truncating IR output from {len(result)} to {self.max_ir_lines} lines")
            del result[self.max_ir_lines:]
            result.append(OutputLine(text=TRUNCATION_MARKER))

        resolver = ScopeResolver(debug_info)
        for output_line in result:
            if output_line.scope is None:
                continue
            output_line.source = resolver.resolve(output_line.scope).model_copy()

        if filters.demangle:
            if self.demangler is None:
                raise DemanglerError("<none>", "demangling requested but no demangler is configured")
            result = self.demangler.process(result)

        return IrResult(asm=result, label_definitions={}, language_id=LANGUAGE_ID)

    def process(self, ir: str, filters: FilterConfig) -> IrResult:
        return self.process_ir(ir, filters)

    def process_from_filters(self, ir: Any, filters: ParseFilters) -> IrResult:
        """
        Entry point for callers holding generic compiler-output filters.

        Non-text input (e.g. a binary artifact) yields an empty result.
        """
        if isinstance(ir, str):
            return self.process_ir(ir, filters.to_filter_config())
        return IrResult(asm=[], label_definitions={})

    def is_llvm_ir(self, code: str) -> bool:
        return is_llvm_ir(code)


def create_default_parser(settings: Settings | None = None) -> LlvmIrParser:
    """Build a parser wired to the configured line cap and demangler."""
    settings = settings or Settings()
    return LlvmIrParser(
        max_ir_lines=settings.max_lines_of_asm,
        demangler=LlvmIrDemangler(settings.demangler),
    )
