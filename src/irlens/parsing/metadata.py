"""
Debug-info metadata node parsing.

Recognizes declarations of the form

    !12 = distinct !DISubprogram(name: "main", scope: !1, file: !1, line: 3)

and turns them into MetaNode records. Lines that look similar but do not
match are left to the caller as ordinary IR text.

See: https://llvm.org/docs/LangRef.html#metadata
"""

import re
from typing import Iterator, Tuple

from ..core.types import MetaNode

META_NODE_RE = re.compile(r"^(!\d+) = (?:distinct )?!DI([A-Za-z]+)\((.*)\)")

# key: !123 | 123 | word | "" | "string with \" escapes"
META_NODE_OPTIONS_RE = re.compile(r'(\w+): (!?\d+|\w+|""|"(?:[^"\\]|\\.)*")')


def strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def iter_meta_options(body: str) -> Iterator[Tuple[str, str]]:
    """Yield `(key, value)` pairs from the argument list of a DI node."""
    for match in META_NODE_OPTIONS_RE.finditer(body):
        yield match.group(1), strip_quotes(match.group(2))


def parse_meta_node(line: str) -> MetaNode | None:
    """Parse a metadata declaration line, or return None if it is not one."""
    match = META_NODE_RE.match(line)
    if not match:
        return None

    attributes = {}
    for key, value in iter_meta_options(match.group(3)):
        attributes[key] = value

    return MetaNode(
        meta_id=match.group(1),
        meta_type=match.group(2),
        attributes=attributes,
    )
