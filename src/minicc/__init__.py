"""
minicc - A Minimal C Compiler for x86-64
========================================

This package provides a small ahead-of-time compiler for a tiny subset
of C, together with command-line tools that turn its output into native
executables using the system toolchain.

Main Components
---------------
- **compiler**: lexer, parser, lowering and assembly emitter (mcc)
    Converts C source (.c) to x86-64 assembly (.s)

- **cli**: command-line tools
    `mcc` compiles to assembly, `mcbuild` also assembles and links the
    result with an external tool (gcc by default)

Quick Start
-----------
Compile source text:
    >>> from minicc import compile_c
    >>> asm = compile_c("int main(void) { return 2; }")

Or use the command-line tools:
    $ mcc return_2.c -o return_2.s
    $ mcbuild return_2.c -o return_2
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from minicc.errors import MiniCCError, SourceLocation, ToolchainError
from minicc.compiler import (
    Compiler,
    CompilerOptions,
    CompilerResult,
    CompilerError,
    compile_c,
    compile_file,
)

__all__ = [
    "__version__",
    # Errors
    "MiniCCError",
    "SourceLocation",
    "ToolchainError",
    "CompilerError",
    # Compiler
    "Compiler",
    "CompilerOptions",
    "CompilerResult",
    "compile_c",
    "compile_file",
]
