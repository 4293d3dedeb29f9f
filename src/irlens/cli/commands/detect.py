"""
Detect Command - Check whether text is LLVM IR with debug info.
"""

import sys

import click

from ...core.exceptions import IrLensError
from ...parsing.llvm_ir import is_llvm_ir
from ..renderers import JsonRenderer
from ..utils import echo_error, echo_success, echo_warning, read_input


@click.command()
@click.argument("file", default="-")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def detect(file: str, as_json: bool):
    """
    Report whether FILE looks like LLVM IR carrying debug info.

    Exits with status 0 when it does and 1 when it does not.
    """
    renderer = JsonRenderer("detect")

    try:
        detected = is_llvm_ir(read_input(file))
    except IrLensError as e:
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(str(e))
        sys.exit(1)

    if as_json:
        renderer.render_success({"file": file, "is_llvm_ir": detected})
    elif detected:
        echo_success(f"{file}: LLVM IR with debug info")
    else:
        echo_warning(f"{file}: not LLVM IR with debug info")

    sys.exit(0 if detected else 1)
