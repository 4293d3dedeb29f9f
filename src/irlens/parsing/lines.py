"""Line splitting helpers shared by the IR scan."""

import re
from typing import List

_LINE_BREAK_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> List[str]:
    """
    Split text into lines on `\\n` or `\\r\\n`.

    Empty text has no lines. A final newline does not produce a trailing
    empty line, but blank lines inside the text are kept.
    """
    if not text:
        return []
    lines = _LINE_BREAK_RE.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def is_blank(line: str) -> bool:
    return not line.strip()
