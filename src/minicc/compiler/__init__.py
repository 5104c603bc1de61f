"""
minicc Compiler
===============

This package implements a compiler for a minimal subset of C targeting
x86-64 assembly (GNU as, AT&T syntax).

The accepted language is a single parameterless function whose body
returns an integer constant:

    int main(void) {
        return 42;
    }

Pipeline
--------
    C Source → Lexer → Parser → AST → Lowering → Assembly AST → Emitter → Assembly

Each stage fully consumes its input before the next begins, and each
stage raises a CompilerError on the first problem it finds.

Usage
-----
>>> from minicc.compiler import compile_c
>>> asm_output = compile_c('int main(void) { return 42; }')

Language Subset
---------------
Supported:
- 'int' functions with '()' or '(void)' parameter lists
- A single 'return <decimal constant>;' statement
- '//' and '/* */' comments

Not supported:
- Operators (the '-', '~' and '!' glyphs are lexed but not parsed)
- Variables, multiple statements or functions, control flow
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Imports
# =============================================================================

from minicc.compiler.compiler import (
    Compiler,
    CompilerOptions,
    CompilerResult,
    compile_c,
    compile_file,
)
from minicc.compiler.errors import (
    CompilerError,
    LexicalError,
    UnexpectedCharacterError,
    CSyntaxError,
    UnexpectedTokenError,
    UnexpectedEndOfInputError,
    TrailingTokensError,
    InvalidIntegerLiteralError,
    CodeGenError,
    InvalidFunctionBodyError,
    UnsupportedExpressionError,
)
from minicc.compiler.lexer import Lexer, Token, TokenType, lex
from minicc.compiler.parser import Parser, parse, parse_source
from minicc.compiler.codegen import (
    AssemblyEmitter,
    CodeGenerator,
    TARGETS,
    lower,
    lower_operand,
    render,
)
from minicc.compiler.ast import (
    ASTNode,
    ASTPrinter,
    Program,
    FunctionDeclaration,
    Statement,
    ReturnStatement,
    Expression,
    Constant,
)
from minicc.compiler.asm_ast import (
    AssemblyProgram,
    AssemblyFunction,
    Instruction,
    Move,
    Return,
    Operand,
    Immediate,
    Register,
)

__all__ = [
    # Version
    "__version__",
    # Main API
    "Compiler",
    "CompilerOptions",
    "CompilerResult",
    "compile_c",
    "compile_file",
    # Errors
    "CompilerError",
    "LexicalError",
    "UnexpectedCharacterError",
    "CSyntaxError",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
    "TrailingTokensError",
    "InvalidIntegerLiteralError",
    "CodeGenError",
    "InvalidFunctionBodyError",
    "UnsupportedExpressionError",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "lex",
    # Parser
    "Parser",
    "parse",
    "parse_source",
    # Code Generator
    "AssemblyEmitter",
    "CodeGenerator",
    "TARGETS",
    "lower",
    "lower_operand",
    "render",
    # Source AST
    "ASTNode",
    "ASTPrinter",
    "Program",
    "FunctionDeclaration",
    "Statement",
    "ReturnStatement",
    "Expression",
    "Constant",
    # Assembly AST
    "AssemblyProgram",
    "AssemblyFunction",
    "Instruction",
    "Move",
    "Return",
    "Operand",
    "Immediate",
    "Register",
]
