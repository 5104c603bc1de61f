"""
minicc Lexer (Tokenizer)
========================

This module implements the lexer for the minicc C subset.
It converts source text into a list of tokens for the parser.

Token Categories
----------------
- Keywords: int, return, void
- Identifiers: function names
- Integer literals: decimal digit runs (the sign is a separate token)
- Delimiters: ( ) { } ;
- Unary operator glyphs: - ~ ! (lexed, not yet used by the grammar)

Keywords are recognized by maximal munch: the longest run of identifier
characters is scanned first and then looked up in the keyword table, so
`intX` and `returnValue` are identifiers.

Comments
--------
- Single-line: // comment
- Multi-line: /* comment */

A '/' that does not start a comment is an error; division is not part
of the language.

Example Usage
-------------
>>> from minicc.compiler.lexer import Lexer
>>> for token in Lexer('int main(void) { return 42; }', "test.c").tokenize():
...     print(token)
Token(INT, 'int', 1:1)
Token(IDENTIFIER, 'main', 1:5)
Token(LPAREN, '(', 1:9)
Token(VOID, 'void', 1:10)
Token(RPAREN, ')', 1:14)
Token(LBRACE, '{', 1:16)
Token(RETURN, 'return', 1:18)
Token(INTEGER_LITERAL, '42', 1:25)
Token(SEMICOLON, ';', 1:27)
Token(RBRACE, '}', 1:29)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator
import string

from minicc.errors import SourceLocation
from minicc.compiler.errors import UnexpectedCharacterError


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the minicc language.

    Keywords are distinguished from identifiers so the parser never
    compares identifier text.
    """

    # === Identifiers and Literals ===
    IDENTIFIER = auto()         # Function names
    INTEGER_LITERAL = auto()    # Decimal digit run

    # === Keywords ===
    INT = auto()                # int
    RETURN = auto()             # return
    VOID = auto()               # void

    # === Delimiters ===
    LPAREN = auto()             # (
    RPAREN = auto()             # )
    LBRACE = auto()             # {
    RBRACE = auto()             # }
    SEMICOLON = auto()          # ;

    # === Unary Operators ===
    MINUS = auto()              # -
    TILDE = auto()              # ~
    BANG = auto()               # !


# =============================================================================
# Keyword and Glyph Tables
# =============================================================================

KEYWORDS: dict[str, TokenType] = {
    "int": TokenType.INT,
    "return": TokenType.RETURN,
    "void": TokenType.VOID,
}

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
    "-": TokenType.MINUS,
    "~": TokenType.TILDE,
    "!": TokenType.BANG,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from C source code.

    Attributes:
        type: The TokenType classification
        value: The exact source text of the token
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        filename: Name of the source file
    """
    type: TokenType
    value: str
    line: int = 1
    column: int = 1
    filename: str = "<input>"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def describe(self) -> str:
        """
        Human-readable description used in diagnostics.

        Keywords and punctuation are quoted, identifiers and literals are
        prefixed by their kind: 'int', '{', identifier 'main', constant '42'.
        """
        if self.type == TokenType.IDENTIFIER:
            return f"identifier '{self.value}'"
        if self.type == TokenType.INTEGER_LITERAL:
            return f"constant '{self.value}'"
        return f"'{self.value}'"


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes minicc source code.

    The lexer is fatal-on-error: the first character that matches no
    token rule raises UnexpectedCharacterError and no further input is
    examined.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    DIGITS = string.digits

    WHITESPACE = " \n\r"

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        # Current position in source
        self._pos = 0
        self._line = 1
        self._column = 1

        # Track line start position for error reporting
        self._line_start_pos = 0

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source code.

        Yields:
            Token objects in source order

        Raises:
            UnexpectedCharacterError: If a character matches no token rule
        """
        while not self._at_end():
            self._skip_whitespace_and_comments()

            if self._at_end():
                break

            yield self._scan_token()

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """Character at current position + offset, or "" past the end."""
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character, tracking line/column."""
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> None:
        while not self._at_end():
            char = self._peek()

            if char in self.WHITESPACE:
                self._advance()
                continue

            if char == "/" and self._peek(1) == "/":
                self._skip_single_line_comment()
                continue

            if char == "/" and self._peek(1) == "*":
                self._skip_multi_line_comment()
                continue

            break

    def _skip_single_line_comment(self) -> None:
        # Consume the //
        self._advance()
        self._advance()

        # The newline itself is left for the whitespace skipper
        while not self._at_end() and self._peek() != "\n":
            self._advance()

    def _skip_multi_line_comment(self) -> None:
        """
        Skip a multi-line comment (/* ... */).

        An unterminated comment runs to the end of the input.
        """
        # Consume the /*
        self._advance()
        self._advance()

        while not self._at_end():
            if self._peek() == "*" and self._peek(1) == "/":
                self._advance()
                self._advance()
                return
            self._advance()

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> Token:
        start_line = self._line
        start_column = self._column

        char = self._peek()

        if char in self.IDENT_START:
            return self._scan_identifier(start_line, start_column)

        if char in self.DIGITS:
            return self._scan_integer(start_line, start_column)

        if char in SINGLE_CHAR_TOKENS:
            self._advance()
            return self._make_token(SINGLE_CHAR_TOKENS[char], char, start_line, start_column)

        # Anything else, including a '/' that did not open a comment
        raise UnexpectedCharacterError(
            char,
            SourceLocation(self.filename, start_line, start_column),
            self._get_current_line(),
        )

    def _scan_identifier(self, start_line: int, start_column: int) -> Token:
        """
        Scan an identifier or keyword.

        The whole run of identifier characters is consumed before the
        keyword table is consulted.
        """
        chars = []
        while self._peek() and self._peek() in self.IDENT_CHARS:
            chars.append(self._advance())

        name = "".join(chars)
        token_type = KEYWORDS.get(name, TokenType.IDENTIFIER)
        return self._make_token(token_type, name, start_line, start_column)

    def _scan_integer(self, start_line: int, start_column: int) -> Token:
        """Scan a decimal digit run, keeping the exact digit text."""
        chars = []
        while self._peek() and self._peek() in self.DIGITS:
            chars.append(self._advance())

        return self._make_token(
            TokenType.INTEGER_LITERAL, "".join(chars), start_line, start_column
        )

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start_line: int,
        start_column: int,
    ) -> Token:
        return Token(
            type=token_type,
            value=value,
            line=start_line,
            column=start_column,
            filename=self.filename,
        )

    def _get_current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start_pos:line_end]


# =============================================================================
# Convenience Functions
# =============================================================================

def lex(source: str, filename: str = "<input>") -> list[Token]:
    """
    Tokenize a complete source text.

    Args:
        source: Decoded contents of one translation unit
        filename: Source filename for error messages

    Returns:
        The tokens in source order (empty for empty input)

    Raises:
        UnexpectedCharacterError: On the first untokenizable character
    """
    return list(Lexer(source, filename).tokenize())
