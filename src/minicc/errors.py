"""
minicc Error Hierarchy
======================

This module defines the root of the exception hierarchy for minicc.
All exceptions inherit from MiniCCError, allowing callers to catch every
toolchain-related error with a single except clause if desired.

Exception Hierarchy
-------------------
MiniCCError (base)
├── CompilerError (see minicc.compiler.errors)
│   ├── LexicalError - characters that cannot be tokenized
│   ├── CSyntaxError - grammar violations
│   ├── InvalidIntegerLiteralError - constant out of 32-bit range
│   └── CodeGenError - lowering preconditions violated
└── ToolchainError - the external assembler/linker failed

Design Philosophy
-----------------
Compiler errors capture source location information (filename, line,
column) so that messages point directly at the offending text:

    filename:line:column: error: description
        source_line_text
        ^
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MiniCCError(Exception):
    """
    Base exception for all minicc errors.

    All exceptions raised by the compiler and the build driver inherit
    from this class:

        try:
            compile_c(source)
        except MiniCCError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Toolchain Exceptions
# =============================================================================

class ToolchainError(MiniCCError):
    """
    The external assembler/linker could not produce an executable.

    Raised by the build driver when the configured tool is missing or
    exits with a non-zero status.

    Attributes:
        command: The command line that was run
        stderr: Captured diagnostic output of the tool (may be empty)
    """

    def __init__(
        self,
        message: str,
        command: Optional[list[str]] = None,
        stderr: str = "",
    ):
        self.message = message
        self.command = command or []
        self.stderr = stderr
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.stderr.strip():
            return f"{self.message}\n{self.stderr.rstrip()}"
        return self.message
