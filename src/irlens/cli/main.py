"""
irlens CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import detect, view


@click.group()
@click.version_option(package_name="irlens")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """irlens: LLVM IR post-processor.

    Filters compiler-emitted LLVM IR and annotates each instruction with
    the source location recorded in its debug metadata.

    \b
    Quick Start:
      clang -S -emit-llvm -g foo.c -o - | irlens view --debug-calls --directives
      irlens view foo.ll --json
      irlens detect foo.ll
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(view.view)
main.add_command(detect.detect)

if __name__ == "__main__":
    main()
