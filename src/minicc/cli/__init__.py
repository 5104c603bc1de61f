"""
minicc Command-Line Interface
=============================

This package provides command-line tools for minicc:

- **mcc**: compile C source to x86-64 assembly
- **mcbuild**: compile, then assemble and link with the system toolchain

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["mcc", "mcbuild"]
