"""
minicc Compiler Main Module
===========================

This module provides the main compiler interface. It orchestrates the
complete compilation process:

    Source → Lex → Parse → Lower → Render → Assembly

Usage
-----
Command line:
    $ mcc hello.c -o hello.s

Programmatic:
    >>> from minicc.compiler import compile_c
    >>> asm = compile_c('int main(void) { return 0; }')

Error Handling
--------------
Every stage is fatal-on-error. The first CompilerError raised by any
stage propagates unchanged to the caller; no partial result is
returned.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from minicc.compiler.lexer import Lexer, Token
from minicc.compiler.parser import Parser
from minicc.compiler.codegen import DEFAULT_TARGET, AssemblyEmitter, lower
from minicc.compiler.ast import Program
from minicc.compiler.asm_ast import AssemblyProgram

logger = logging.getLogger(__name__)


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        target: Target platform for assembly rendering ("linux" or "macos").
                Controls symbol decoration and the trailing stack note.
    """
    target: str = DEFAULT_TARGET


@dataclass
class CompilerResult:
    """
    Result of a compilation.

    Attributes:
        filename: Source filename
        tokens: Tokens produced by the lexer
        ast: Source abstract syntax tree
        assembly_ast: Lowered assembly tree
        assembly: Rendered assembly text
    """
    filename: str = ""
    tokens: list[Token] = field(default_factory=list)
    ast: Optional[Program] = None
    assembly_ast: Optional[AssemblyProgram] = None
    assembly: str = ""

    @property
    def token_count(self) -> int:
        return len(self.tokens)


class Compiler:
    """
    minicc compiler.

    Example:
        compiler = Compiler(CompilerOptions(target="linux"))
        result = compiler.compile_file("return_2.c")
        print(result.assembly)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()
        # Fail on a bad target before any source is read
        self._emitter = AssemblyEmitter(self.options.target)

    def compile_source(self, source: str, filename: str = "<input>") -> CompilerResult:
        """
        Compile C source code to assembly.

        Args:
            source: C source code string
            filename: Source filename for error messages

        Returns:
            CompilerResult holding every intermediate representation

        Raises:
            CompilerError: If any stage fails
        """
        result = CompilerResult(filename=filename)

        # Stage 1: Lexical analysis
        result.tokens = self._lex(source, filename)
        logger.debug(f"{filename}: lexed {result.token_count} tokens")

        # Stage 2: Parsing
        result.ast = self._parse(result.tokens, filename, source.split("\n"))
        logger.debug(f"{filename}: parsed function '{result.ast.function.name}'")

        # Stage 3: Lowering
        result.assembly_ast = lower(result.ast)
        logger.debug(
            f"{filename}: lowered to {len(result.assembly_ast.function.instructions)} instructions"
        )

        # Stage 4: Rendering
        result.assembly = self._emitter.emit(result.assembly_ast)
        logger.debug(f"{filename}: rendered {len(result.assembly)} bytes for {self.options.target}")
        return result

    def compile_file(self, filepath: str) -> CompilerResult:
        """
        Compile a C source file to assembly.

        Raises:
            CompilerError: If compilation fails
            FileNotFoundError: If source file not found
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding='utf-8')
        return self.compile_source(source, str(filepath))

    def _lex(self, source: str, filename: str) -> list[Token]:
        return list(Lexer(source, filename).tokenize())

    def _parse(self, tokens: list[Token], filename: str, source_lines: list[str]) -> Program:
        return Parser(tokens, filename, source_lines).parse()


# =============================================================================
# Convenience Functions
# =============================================================================

def compile_c(
    source: str,
    filename: str = "<input>",
    target: str = DEFAULT_TARGET,
) -> str:
    """
    Compile C source code to assembly text.

    This is the primary high-level interface for compiling.

    Raises:
        CompilerError: If compilation fails

    Example:
        >>> print(compile_c('int main(void) { return 42; }'))
            .globl main
        main:
            movl $42, %eax
            ret
            .section .note.GNU-stack,"",@progbits
        <BLANKLINE>
    """
    compiler = Compiler(CompilerOptions(target=target))
    return compiler.compile_source(source, filename).assembly


def compile_file(
    filepath: str,
    output_path: Optional[str] = None,
    target: str = DEFAULT_TARGET,
) -> str:
    """
    Compile a C source file to assembly text.

    Args:
        filepath: Path to C source file
        output_path: Optional path to write assembly output
        target: Target platform

    Raises:
        CompilerError: If compilation fails
        FileNotFoundError: If source file not found
    """
    compiler = Compiler(CompilerOptions(target=target))
    result = compiler.compile_file(filepath)

    if output_path:
        Path(output_path).write_text(result.assembly, encoding='utf-8')

    return result.assembly
