"""
Line Filter Infrastructure.

Each filter is a small predicate over one raw IR line, gated by a flag of the
FilterConfig. Filters are grouped by the scan stage they run in:

- pre-capture: before `!dbg` capture and metadata parsing, so a dropped
  line contributes nothing to the pass.
- post-capture: after metadata parsing, so a dropped declaration still
  populates the metadata graph.
"""

import logging
import re
from typing import Dict, List, Protocol

from ..core.types import FilterConfig, FilterStage

logger = logging.getLogger(__name__)

COMMENT_ONLY_RE = re.compile(r"^\s*(;.*)$")
LLVM_DEBUG_CALL_RE = re.compile(r"^\s*call void @llvm\.dbg\..*$")
METADATA_DECLARATION_RE = re.compile(r"^!\d+ = (distinct )?!(DI|\{)")

DIRECTIVE_PREFIXES = (
    "!llvm",
    "source_filename = ",
    "target datalayout = ",
    "target triple = ",
)


def is_llvm_directive(line: str) -> bool:
    """True for metadata declarations and module-level directive lines."""
    return bool(METADATA_DECLARATION_RE.match(line)) or line.startswith(DIRECTIVE_PREFIXES)


class LineFilter(Protocol):
    """
    Universal line filter interface.

    Any class implementing this protocol can be registered to a
    FilterRegistry.
    """

    @property
    def name(self) -> str:
        """Unique name for debugging."""
        ...

    @property
    def stage(self) -> FilterStage:
        """Scan stage in which the filter runs."""
        ...

    @property
    def priority(self) -> int:
        """Execution priority within a stage. Higher numbers run first."""
        ...

    def is_enabled(self, config: FilterConfig) -> bool:
        ...

    def matches(self, line: str) -> bool:
        """True if the line should be dropped from the output."""
        ...


class CommentOnlyFilter:
    """Drop lines that hold nothing but a `;` comment."""

    name = "comment_only"
    stage = FilterStage.PRE_CAPTURE
    priority = 100

    def is_enabled(self, config: FilterConfig) -> bool:
        return config.comments

    def matches(self, line: str) -> bool:
        return bool(COMMENT_ONLY_RE.match(line))


class DebugCallFilter:
    """Drop `call void @llvm.dbg.*` intrinsic calls."""

    name = "debug_calls"
    stage = FilterStage.PRE_CAPTURE
    priority = 90

    def is_enabled(self, config: FilterConfig) -> bool:
        return config.filter_debug_info

    def matches(self, line: str) -> bool:
        return bool(LLVM_DEBUG_CALL_RE.match(line))


class DirectiveFilter:
    """Drop metadata declarations, `!llvm.*` lists and module directives."""

    name = "directives"
    stage = FilterStage.POST_CAPTURE
    priority = 100

    def is_enabled(self, config: FilterConfig) -> bool:
        return config.filter_ir_metadata

    def matches(self, line: str) -> bool:
        return is_llvm_directive(line)


class FilterRegistry:
    """
    Holds line filters per stage, ordered by priority.
    """

    def __init__(self):
        self._filters: Dict[FilterStage, List[LineFilter]] = {stage: [] for stage in FilterStage}

    def register(self, line_filter: LineFilter) -> None:
        """Register a new filter and sort its stage by priority."""
        filters = self._filters[line_filter.stage]
        filters.append(line_filter)
        filters.sort(key=lambda f: -f.priority)

    def for_stage(self, stage: FilterStage) -> List[LineFilter]:
        return list(self._filters[stage])


def create_default_registry() -> FilterRegistry:
    registry = FilterRegistry()
    registry.register(CommentOnlyFilter())
    registry.register(DebugCallFilter())
    registry.register(DirectiveFilter())
    return registry


class FilterPipeline:
    """
    The filters enabled by one FilterConfig, split by stage.

    Built once per pass; the config is immutable so the enabled set is too.
    """

    def __init__(self, config: FilterConfig, registry: FilterRegistry | None = None):
        self.config = config
        registry = registry or create_default_registry()
        self._pre = [f for f in registry.for_stage(FilterStage.PRE_CAPTURE) if f.is_enabled(config)]
        self._post = [f for f in registry.for_stage(FilterStage.POST_CAPTURE) if f.is_enabled(config)]
        logger.debug(
            f"Enabled filters: {[f.name for f in self._pre]} (pre), {[f.name for f in self._post]} (post)"
        )

    @property
    def enabled(self) -> List[str]:
        return [f.name for f in self._pre + self._post]

    def drops_before_capture(self, line: str) -> bool:
        return any(f.matches(line) for f in self._pre)

    def drops_after_capture(self, line: str) -> bool:
        return any(f.matches(line) for f in self._post)
