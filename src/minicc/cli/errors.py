"""
Unified CLI Error Handling
==========================

Maps minicc exceptions onto messages and exit codes for mcc and mcbuild.

| Exception                                   | Exit code      |
|---------------------------------------------|----------------|
| CompilerError                               | BUILD_ERROR    |
| ToolchainError                              | BUILD_ERROR    |
| click.BadParameter, missing/unreadable file | INVALID_ARGS   |
| anything else                               | INTERNAL_ERROR |
"""

import shlex
import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from minicc.errors import MiniCCError, ToolchainError
from minicc.compiler.errors import CompilerError


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Compilation, assembly, or link error
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


# Errors caused by what the user passed rather than by the build
USAGE_ERRORS = (click.BadParameter, FileNotFoundError, PermissionError)


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: str | None = None
) -> NoReturn:
    """
    Report an exception raised by a CLI tool and exit.

    Compiler diagnostics are printed as formatted by the compiler.
    Toolchain failures also show the command that was run, followed by
    whatever the tool wrote to stderr.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        error_type: Optional prefix for the error message (e.g., "Build")

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    prefix = f"{error_type} error: " if error_type else "Error: "

    if isinstance(error, CompilerError):
        # Already "file:line:col: error: ..." with source context
        click.echo(str(error), err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    if isinstance(error, ToolchainError):
        click.echo(f"{prefix}{error.message}", err=True)
        if error.command:
            click.echo(f"  command: {shlex.join(error.command)}", err=True)
        if error.stderr.strip():
            click.echo(error.stderr.rstrip(), err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    if isinstance(error, MiniCCError):
        click.echo(f"{prefix}{error}", err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    if isinstance(error, USAGE_ERRORS):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
