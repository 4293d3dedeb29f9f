"""
View Command - Process LLVM IR into an annotated listing.

Filters, truncates and source-annotates an IR file the same way an
interactive IR pane would, printing either a readable listing or the JSON
result for editor integrations.
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from ...config import load_settings
from ...core.exceptions import IrLensError
from ...parsing.llvm_ir import create_default_parser
from ..formatting import print_result
from ..renderers import JsonRenderer
from ..utils import echo_error, read_input

logger = logging.getLogger(__name__)


@click.command()
@click.argument("file", default="-")
@click.option("-d", "--debug-calls/--no-debug-calls", default=None,
              help="Drop llvm.dbg.* intrinsic calls")
@click.option("--directives/--no-directives", default=None,
              help="Drop metadata declarations and module directives")
@click.option("--comments/--no-comments", default=None,
              help="Drop comment-only lines")
@click.option("--demangle/--no-demangle", default=None,
              help="Demangle symbol names with the configured demangler")
@click.option("--max-lines", type=click.IntRange(min=1), default=None,
              help="Output line cap (default from config, 5000)")
@click.option("-c", "--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="Config file (default: .irlens/config.yaml)")
@click.option("--no-source", is_flag=True, help="Hide source location annotations")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def view(
    file: str,
    debug_calls: bool | None,
    directives: bool | None,
    comments: bool | None,
    demangle: bool | None,
    max_lines: int | None,
    config_path: str | None,
    no_source: bool,
    as_json: bool,
):
    """
    Process an LLVM IR file (or stdin with '-').

    Flags that are not given fall back to `default_filters` in the config.
    """
    renderer = JsonRenderer("view")

    try:
        settings = load_settings(Path(config_path) if config_path else None)
        if max_lines is not None:
            settings = settings.model_copy(update={"max_lines_of_asm": max_lines})

        overrides = {
            "filter_debug_info": debug_calls,
            "filter_ir_metadata": directives,
            "comments": comments,
            "demangle": demangle,
        }
        filters = settings.default_filters.model_copy(
            update={k: v for k, v in overrides.items() if v is not None}
        )

        ir = read_input(file)
        parser = create_default_parser(settings)
        result = parser.process_ir(ir, filters)
    except IrLensError as e:
        logger.debug(f"view failed: {e}")
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(str(e))
        sys.exit(1)

    if as_json:
        renderer.render_success(result.to_dict())
    else:
        print_result(result, Console(highlight=False), show_source=not no_source)
