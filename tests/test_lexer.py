# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the minicc lexer/tokenizer.
#
# Test coverage includes:
#   - Single-character delimiters and operator glyphs
#   - Keyword classification by maximal munch
#   - Identifiers and integer literals
#   - Comments (// and /* */)
#   - Whitespace handling and position tracking
#   - Error conditions
# =============================================================================

import pytest
from minicc.compiler.lexer import Lexer, Token, TokenType, lex
from minicc.compiler.errors import UnexpectedCharacterError, LexicalError


# =============================================================================
# Helper Function
# =============================================================================

def types(source: str) -> list:
    """Helper returning only the token types for a source string."""
    return [t.type for t in lex(source, "<test>")]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty input produces an empty token list."""
        assert lex("") == []

    def test_whitespace_only(self):
        """Spaces, newlines and carriage returns produce no tokens."""
        assert lex("  \n\r\n   ") == []

    def test_delimiters(self):
        """Each structural character is its own token."""
        assert types("{}();") == [
            TokenType.LBRACE,
            TokenType.RBRACE,
            TokenType.LPAREN,
            TokenType.RPAREN,
            TokenType.SEMICOLON,
        ]

    def test_unary_operator_glyphs(self):
        """'-', '~' and '!' are lexed even though the grammar ignores them."""
        tokens = lex("- ~ !")
        assert [t.type for t in tokens] == [TokenType.MINUS, TokenType.TILDE, TokenType.BANG]
        assert [t.value for t in tokens] == ["-", "~", "!"]

    def test_double_minus_is_two_tokens(self):
        """There is no decrement operator; '--' is two negations."""
        assert types("--") == [TokenType.MINUS, TokenType.MINUS]

    def test_tokens_are_immutable(self):
        """Tokens are frozen dataclasses."""
        token = lex("main")[0]
        with pytest.raises(AttributeError):
            token.value = "other"


# =============================================================================
# Keyword and Identifier Tests
# =============================================================================

class TestKeywordsAndIdentifiers:
    """Test keyword-table classification after maximal munch."""

    @pytest.mark.parametrize("text,expected", [
        ("int", TokenType.INT),
        ("return", TokenType.RETURN),
        ("void", TokenType.VOID),
    ])
    def test_keywords(self, text, expected):
        tokens = lex(text)
        assert len(tokens) == 1
        assert tokens[0].type == expected
        assert tokens[0].value == text

    @pytest.mark.parametrize("text", [
        "intX", "integer", "int_", "returnValue", "returns", "voidy", "_int", "Int", "RETURN",
    ])
    def test_keyword_prefixes_are_identifiers(self, text):
        """Words that merely start with a keyword are whole identifiers."""
        tokens = lex(text)
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.IDENTIFIER
        assert tokens[0].value == text

    def test_identifier_with_digits_and_underscores(self):
        tokens = lex("_my_func2")
        assert tokens == [Token(TokenType.IDENTIFIER, "_my_func2", 1, 1, "<input>")]

    def test_keyword_followed_by_delimiter(self):
        """Keywords end at the first non-identifier character."""
        assert types("int(") == [TokenType.INT, TokenType.LPAREN]
        assert types("return;") == [TokenType.RETURN, TokenType.SEMICOLON]

    def test_non_ascii_letter_rejected(self):
        """Identifiers are ASCII only."""
        with pytest.raises(UnexpectedCharacterError):
            lex("int mäin")


# =============================================================================
# Integer Literal Tests
# =============================================================================

class TestIntegerLiterals:
    """Test integer literal scanning."""

    def test_decimal_literal_keeps_text(self):
        tokens = lex("42")
        assert tokens[0].type == TokenType.INTEGER_LITERAL
        assert tokens[0].value == "42"

    def test_leading_zeros_preserved(self):
        """The literal holds the exact digit text."""
        assert lex("007")[0].value == "007"

    def test_large_literal_is_still_lexed(self):
        """Range checking is the parser's job."""
        assert lex("99999999999")[0].value == "99999999999"

    def test_negative_number_is_two_tokens(self):
        tokens = lex("-5")
        assert [t.type for t in tokens] == [TokenType.MINUS, TokenType.INTEGER_LITERAL]
        assert tokens[1].value == "5"

    def test_digits_then_letters_split(self):
        """A digit run stops at the first letter."""
        tokens = lex("123abc")
        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.INTEGER_LITERAL, "123"),
            (TokenType.IDENTIFIER, "abc"),
        ]


# =============================================================================
# Comment Tests
# =============================================================================

class TestComments:
    """Test comment skipping."""

    def test_single_line_comment(self):
        assert types("// comment\n42") == [TokenType.INTEGER_LITERAL]

    def test_single_line_comment_at_end(self):
        assert types("42 // trailing") == [TokenType.INTEGER_LITERAL]

    def test_multi_line_comment(self):
        assert types("/* comment\n\nstuff */42") == [TokenType.INTEGER_LITERAL]

    def test_multi_line_comment_with_stars(self):
        assert types("/** a * b **/ ;") == [TokenType.SEMICOLON]

    def test_comment_between_tokens(self):
        assert types("int/* x */main") == [TokenType.INT, TokenType.IDENTIFIER]

    def test_unterminated_multi_line_comment_consumes_rest(self):
        """An unclosed block comment swallows the remaining input."""
        assert types("int /* never closed } ;") == [TokenType.INT]

    def test_lone_slash_is_error(self):
        """Division is not supported; '/' must start a comment."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            lex("4 /x")
        assert exc_info.value.char == "/"
        assert exc_info.value.location.column == 3
        assert exc_info.value.hint == "'/' may only start a '//' or '/*' comment"

    def test_slash_at_end_of_input_is_error(self):
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            lex("42 /")
        assert exc_info.value.char == "/"
        assert exc_info.value.location.column == 4


# =============================================================================
# Position Tracking Tests
# =============================================================================

class TestPositions:
    """Test line and column tracking."""

    def test_token_location(self):
        tokens = lex("int main(void) {\n    return 42;\n}", "prog.c")
        ret = tokens[6]
        assert ret.type == TokenType.RETURN
        assert (ret.line, ret.column) == (2, 5)
        assert str(ret.location) == "prog.c:2:5"
        assert (tokens[-1].line, tokens[-1].column) == (3, 1)

    def test_crlf_line_endings(self):
        tokens = lex("int\r\nmain")
        assert tokens[1].line == 2


# =============================================================================
# Complete Function Tests
# =============================================================================

class TestCompleteFunction:
    """Test tokenizing whole programs."""

    def test_main_with_void(self):
        tokens = lex("int main(void) { return 42; }")
        assert [(t.type, t.value) for t in tokens] == [
            (TokenType.INT, "int"),
            (TokenType.IDENTIFIER, "main"),
            (TokenType.LPAREN, "("),
            (TokenType.VOID, "void"),
            (TokenType.RPAREN, ")"),
            (TokenType.LBRACE, "{"),
            (TokenType.RETURN, "return"),
            (TokenType.INTEGER_LITERAL, "42"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.RBRACE, "}"),
        ]

    def test_relexing_joined_token_text(self):
        """Re-lexing the space-joined token text gives the same tokens."""
        original = lex("int main(void){return 7;}")
        relexed = lex(" ".join(t.value for t in original))
        assert [(t.type, t.value) for t in relexed] == [(t.type, t.value) for t in original]

    def test_tokenize_is_lazy_generator(self):
        """Tokens before an error are produced before the error is raised."""
        stream = Lexer("int @").tokenize()
        assert next(stream).type == TokenType.INT
        with pytest.raises(UnexpectedCharacterError):
            next(stream)


# =============================================================================
# Error Condition Tests
# =============================================================================

class TestErrors:
    """Test lexical error reporting."""

    def test_unexpected_character(self):
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            lex("int main() { return 42 @; }", "bad.c")
        error = exc_info.value
        assert error.char == "@"
        assert str(error.location) == "bad.c:1:24"
        assert error.source_line == "int main() { return 42 @; }"

    def test_error_message_has_caret(self):
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            lex("@")
        lines = str(exc_info.value).splitlines()
        assert lines[0] == "<input>:1:1: error: unexpected character '@'"
        assert lines[1] == "    @"
        assert lines[2] == "    ^"

    def test_tab_is_not_whitespace(self):
        """Only space, newline and carriage return are skipped."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            lex("int\tmain")
        assert exc_info.value.char == "\t"

    def test_is_lexical_error(self):
        with pytest.raises(LexicalError):
            lex("#include")
