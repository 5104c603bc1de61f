"""
minicc Recursive Descent Parser
===============================

This module implements the parser for the minicc C subset. It consumes
the token list produced by the lexer and builds the source AST.

Grammar (EBNF)
--------------
program    ::= function
function   ::= 'int' IDENTIFIER '(' 'void'? ')' '{' statement '}'
statement  ::= 'return' expression ';'
expression ::= INTEGER_LITERAL

The parser uses a single-token lookahead cursor and never backtracks.
There is no error recovery: the first grammar violation raises and no
partial tree is returned.

Example Usage
-------------
>>> from minicc.compiler.lexer import lex
>>> from minicc.compiler.parser import Parser
>>> program = Parser(lex('int main(void) { return 42; }')).parse()
>>> program.function.name
'main'
"""

from typing import Optional

from minicc.errors import SourceLocation
from minicc.compiler.lexer import Token, TokenType, lex
from minicc.compiler.ast import (
    Program,
    FunctionDeclaration,
    ReturnStatement,
    Constant,
)
from minicc.compiler.errors import (
    CSyntaxError,
    UnexpectedTokenError,
    UnexpectedEndOfInputError,
    TrailingTokensError,
    InvalidIntegerLiteralError,
)


# Largest value accepted for an integer literal (signed 32-bit)
INT32_MAX = 2**31 - 1


class Parser:
    """
    Recursive descent parser for minicc.

    Attributes:
        tokens: List of tokens to parse
        filename: Source filename for error reporting
    """

    # Diagnostic names for the token types the grammar asks for
    EXPECTED_NAMES = {
        TokenType.INT: "'int'",
        TokenType.RETURN: "'return'",
        TokenType.VOID: "'void'",
        TokenType.LPAREN: "'('",
        TokenType.RPAREN: "')'",
        TokenType.LBRACE: "'{'",
        TokenType.RBRACE: "'}'",
        TokenType.SEMICOLON: "';'",
        TokenType.IDENTIFIER: "identifier",
        TokenType.INTEGER_LITERAL: "integer literal",
    }

    def __init__(
        self,
        tokens: list[Token],
        filename: str = "<input>",
        source_lines: Optional[list[str]] = None,
    ):
        """
        Initialize the parser.

        Args:
            tokens: List of tokens from the lexer
            filename: Source filename for error messages
            source_lines: Original source lines for error context
        """
        self.tokens = tokens
        self.filename = filename
        self.source_lines = source_lines or []

        # Current position in token stream
        self._pos = 0

    def parse(self) -> Program:
        """
        Parse the token stream into an AST.

        Returns:
            Program owning the single function declaration

        Raises:
            CSyntaxError: On the first grammar violation
            InvalidIntegerLiteralError: If the constant overflows 32 bits
        """
        function = self._parse_function()

        if not self._at_end():
            extra = self._peek()
            raise TrailingTokensError(extra.location, self._get_source_line(extra.line))

        return Program(function, location=function.location)

    # =========================================================================
    # Grammar Rules
    # =========================================================================

    def _parse_function(self) -> FunctionDeclaration:
        int_token = self._expect(TokenType.INT)
        name_token = self._expect(TokenType.IDENTIFIER)
        self._expect(TokenType.LPAREN)
        self._parse_parameter_list()
        self._expect(TokenType.RPAREN)
        self._expect(TokenType.LBRACE)
        body = self._parse_statement()
        self._expect(TokenType.RBRACE)

        return FunctionDeclaration(
            name_token.value,
            body,
            location=int_token.location,
        )

    def _parse_parameter_list(self) -> None:
        """
        Accept an empty parameter list: '(void)' or '()'.

        'void' is consumed here; a ')' is left for the caller to expect.
        """
        if self._check(TokenType.VOID):
            self._advance()
            return
        if self._check(TokenType.RPAREN):
            return

        location = self._peek().location if not self._at_end() else self._end_location()
        raise CSyntaxError(
            "expected 'void' or ')' after '('",
            location,
            hint="functions take no parameters",
            source_line=self._get_source_line(location.line),
        )

    def _parse_statement(self) -> ReturnStatement:
        return_token = self._expect(TokenType.RETURN)
        value = self._parse_expression()
        self._expect(TokenType.SEMICOLON)
        return ReturnStatement(value, location=return_token.location)

    def _parse_expression(self) -> Constant:
        token = self._expect(TokenType.INTEGER_LITERAL)

        # Lexed literals are always digit runs; hand-built tokens may not be
        digits = token.value
        if not (digits.isascii() and digits.isdigit()) or int(digits) > INT32_MAX:
            raise InvalidIntegerLiteralError(
                token.value,
                token.location,
                self._get_source_line(token.line),
            )

        return Constant(int(digits), location=token.location)

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.tokens)

    def _peek(self) -> Token:
        return self.tokens[self._pos]

    def _advance(self) -> Token:
        token = self.tokens[self._pos]
        self._pos += 1
        return token

    def _check(self, token_type: TokenType) -> bool:
        return not self._at_end() and self._peek().type == token_type

    def _expect(self, token_type: TokenType) -> Token:
        """
        Expect and consume a specific token type.

        Raises:
            UnexpectedEndOfInputError: If the tokens are exhausted
            UnexpectedTokenError: If a different token is found
        """
        expected = self.EXPECTED_NAMES[token_type]

        if self._at_end():
            location = self._end_location()
            raise UnexpectedEndOfInputError(
                expected,
                location,
                self._get_source_line(location.line),
            )

        current = self._peek()
        if current.type != token_type:
            raise UnexpectedTokenError(
                expected,
                current.describe(),
                current.location,
                self._get_source_line(current.line),
            )

        return self._advance()

    def _end_location(self) -> SourceLocation:
        """Location just past the last token, for end-of-input errors."""
        if not self.tokens:
            return SourceLocation(self.filename, 1, 1)
        last = self.tokens[-1]
        return SourceLocation(last.filename, last.line, last.column + len(last.value))

    def _get_source_line(self, line: int) -> Optional[str]:
        """Get source line for error reporting."""
        if 0 < line <= len(self.source_lines):
            return self.source_lines[line - 1]
        return None


# =============================================================================
# Convenience Functions
# =============================================================================

def parse(tokens: list[Token], filename: str = "<input>") -> Program:
    """Parse a token list into a Program."""
    return Parser(tokens, filename).parse()


def parse_source(source: str, filename: str = "<input>") -> Program:
    """
    Lex and parse source text in one step.

    Errors carry the offending source line for context.
    """
    tokens = lex(source, filename)
    return Parser(tokens, filename, source.split("\n")).parse()
