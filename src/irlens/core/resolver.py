"""
Scope Resolver.

Maps a debug scope id (the `!N` of a `!dbg !N` attachment) to a source
location by walking the metadata graph built during a scan.

Resolution Strategy:
    - File name: `filename` on the node itself, else follow `file`,
      else bubble up through `scope`.
    - Line / column: the attribute on the node itself, else bubble up
      through `scope`.

Chains end at a missing node, a node without a link to follow, or a node
already visited on the same walk (cyclic metadata).
"""

import logging
import re
from typing import Callable, Dict, Mapping, Tuple

from .types import MetaNode, SourceLocation

logger = logging.getLogger(__name__)

# Stand-in names compilers give to code read from stdin or a scratch buffer
SYNTHETIC_SOURCE_RE = re.compile(r".*<stdin>|^-$|example\.[^/]+$|<source>")

# A step inspects one node and returns (found, value_or_next_id)
Step = Callable[[MetaNode], Tuple[bool, str | None]]


def is_synthetic_filename(filename: str) -> bool:
    """True for placeholder names such as `<stdin>`, `-` or `example.cpp`."""
    return bool(SYNTHETIC_SOURCE_RE.search(filename))


def _to_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _file_step(node: MetaNode) -> Tuple[bool, str | None]:
    filename = node.get("filename")
    if filename:
        return True, filename
    if node.get("file"):
        return False, node.get("file")
    return False, node.get("scope")


def _attribute_step(key: str) -> Step:
    def step(node: MetaNode) -> Tuple[bool, str | None]:
        if node.get(key):
            return True, node.get(key)
        return False, node.get("scope")

    return step


_line_step = _attribute_step("line")
_column_step = _attribute_step("column")


class ScopeResolver:
    """
    Resolves source locations against one pass's metadata graph.

    Attributes:
        graph: Metadata nodes keyed by their `!N` id.

    Example:
        ```python
        resolver = ScopeResolver(graph)
        location = resolver.resolve("!17")
        print(location.file, location.line)
        ```
    """

    def __init__(self, graph: Mapping[str, MetaNode]):
        self.graph = graph
        self._cache: Dict[str, SourceLocation] = {}

    def _walk(self, scope: str | None, step: Step) -> str | None:
        seen = set()
        current = scope
        while current is not None:
            if current in seen:
                logger.debug(f"Cyclic debug scope chain at {current} (starting from {scope})")
                return None
            seen.add(current)

            node = self.graph.get(current)
            if node is None:
                return None

            found, value = step(node)
            if found:
                return value
            current = value
        return None

    def file_name(self, scope: str) -> str | None:
        filename = self._walk(scope, _file_step)
        if filename is None or is_synthetic_filename(filename):
            return None
        return filename

    def line_number(self, scope: str) -> int | None:
        return _to_int(self._walk(scope, _line_step))

    def column(self, scope: str) -> int | None:
        return _to_int(self._walk(scope, _column_step))

    def resolve(self, scope: str) -> SourceLocation:
        """Resolve file, line and column for a scope id (memoized)."""
        if scope not in self._cache:
            self._cache[scope] = SourceLocation(
                file=self.file_name(scope),
                line=self.line_number(scope),
                column=self.column(scope),
            )
        return self._cache[scope]
