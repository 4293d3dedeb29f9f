"""
Human-readable rendering of IR results.
"""

from rich.console import Console
from rich.text import Text

from ..core.types import IrResult, OutputLine, SourceLocation


def format_location(source: SourceLocation) -> str | None:
    """`file:line:column` with unknown parts left out, or None if nothing is known."""
    if not source.is_known:
        return None
    parts = [source.file or "<unknown>"]
    if source.line is not None:
        parts.append(str(source.line))
        if source.column is not None:
            parts.append(str(source.column))
    return ":".join(parts)


def format_line(line: OutputLine, show_source: bool = True) -> Text:
    text = Text(line.text)
    if show_source and line.source is not None:
        location = format_location(line.source)
        if location:
            text.append(f"  ; {location}", style="dim")
    return text


def print_result(result: IrResult, console: Console, show_source: bool = True) -> None:
    # IR is full of `[` and `]`; print as plain Text so rich never parses markup
    for line in result.asm:
        console.print(format_line(line, show_source), soft_wrap=True, highlight=False)
