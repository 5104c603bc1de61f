"""
Compiler Error Hierarchy
========================

This module defines the exception hierarchy for the minicc compiler.
All exceptions inherit from CompilerError, which itself inherits from
MiniCCError for consistent error handling across the package.

Exception Hierarchy
-------------------
CompilerError (base for all compiler errors)
├── LexicalError - characters that cannot be tokenized
│   └── UnexpectedCharacterError - character matches no token rule
├── CSyntaxError - parser grammar violations
│   ├── UnexpectedTokenError - wrong token at a grammar checkpoint
│   ├── UnexpectedEndOfInputError - token stream ran out
│   └── TrailingTokensError - tokens left after the function
├── InvalidIntegerLiteralError - constant does not fit a 32-bit int
└── CodeGenError - lowering preconditions violated
    ├── InvalidFunctionBodyError - body is not a return statement
    └── UnsupportedExpressionError - expression kind cannot be lowered

Every error is fatal: the pipeline stops at the first one and no
partial output is produced.

Error Message Format
--------------------
    main.c:1:24: error: unexpected character '@'
        int main() { return 42 @; }
                               ^
"""

from typing import Optional

from minicc.errors import MiniCCError, SourceLocation


# =============================================================================
# Base Compiler Exception
# =============================================================================

class CompilerError(MiniCCError):
    """
    Base exception for all compiler errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The actual source text at the error location
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            main.c:1:14: error: expected 'return', found identifier 'retur'
                int main() { retur 0; }
                             ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(CompilerError):
    """Source text that cannot be split into tokens."""
    pass


class UnexpectedCharacterError(LexicalError):
    """
    A character that starts no token.

    Also raised for '/' when it does not begin a comment, since
    division is not part of the language. In that case `char` and the
    location are those of the slash itself, not the character after it,
    and a '/' at end of input is reported the same way.

    Attributes:
        char: The offending character
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        hint = None
        if char == "/":
            hint = "'/' may only start a '//' or '/*' comment"
        super().__init__(
            f"unexpected character {char!r}",
            location=location,
            hint=hint,
            source_line=source_line,
        )


# =============================================================================
# Syntax Errors (Parser)
# =============================================================================

class CSyntaxError(CompilerError):
    """
    Grammar violation found by the parser.

    Examples:
        - Missing semicolon
        - Parameter list other than '()' or '(void)'
        - More than one function
    """
    pass


class UnexpectedTokenError(CSyntaxError):
    """The token at a grammar checkpoint is not the one required."""

    def __init__(
        self,
        expected: str,
        found: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.expected = expected
        self.found = found
        super().__init__(
            f"expected {expected}, found {found}",
            location=location,
            source_line=source_line,
        )


class UnexpectedEndOfInputError(CSyntaxError):
    """The token stream ended while a token was still required."""

    def __init__(
        self,
        expected: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.expected = expected
        super().__init__(
            f"expected {expected}, but found end of input",
            location=location,
            source_line=source_line,
        )


class TrailingTokensError(CSyntaxError):
    """Tokens remain after the closing brace of the function."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unexpected tokens after function declaration",
            location=location,
            hint="a translation unit holds exactly one function",
            source_line=source_line,
        )


class InvalidIntegerLiteralError(CompilerError):
    """
    Integer literal that is not a valid signed 32-bit value.

    Raised by the parser when the digit text of a constant exceeds
    2147483647.
    """

    def __init__(
        self,
        literal: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.literal = literal
        super().__init__(
            f"invalid integer literal '{literal}'",
            location=location,
            hint="integer constants must fit in a signed 32-bit int",
            source_line=source_line,
        )


# =============================================================================
# Code Generation Errors
# =============================================================================

class CodeGenError(CompilerError):
    """
    Error while lowering the source AST to the assembly AST.

    The parser only ever builds trees the lowering accepts, so these are
    reached only by hand-built or future AST shapes.
    """
    pass


class InvalidFunctionBodyError(CodeGenError):
    """Function body is not a return statement."""

    def __init__(self, body_kind: str, location: Optional[SourceLocation] = None):
        self.body_kind = body_kind
        super().__init__(
            f"invalid function body, expected a return statement, got {body_kind}",
            location=location,
        )


class UnsupportedExpressionError(CodeGenError):
    """Expression kind that has no operand lowering."""

    def __init__(self, expression_kind: str, location: Optional[SourceLocation] = None):
        self.expression_kind = expression_kind
        super().__init__(
            f"unsupported expression type: {expression_kind}",
            location=location,
        )
