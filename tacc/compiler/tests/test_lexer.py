"""Tests for the tacc lexer."""

import logging

import pytest

from tacc.compiler.lexer import Lexer, LexerError
from tacc.compiler.tokens import TokenType


def lex(source: str):
    return Lexer(source).tokenize()


def types(source: str) -> list[TokenType]:
    return [t.type for t in lex(source)]


def values(source: str) -> list[str]:
    return [t.value for t in lex(source) if t.type != TokenType.EOF]


# --- Basics ---

class TestBasics:
    def test_empty_source_is_just_eof(self):
        tokens = lex("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF
        assert (tokens[0].line, tokens[0].col) == (1, 1)

    def test_declaration(self):
        assert types("int x = 5;") == [
            TokenType.KEYWORD, TokenType.IDENTIFIER, TokenType.OPERATOR,
            TokenType.NUMBER_LITERAL, TokenType.SEPARATOR, TokenType.EOF,
        ]

    def test_eof_always_last(self):
        assert types("x")[-1] == TokenType.EOF
        assert types("   \n  ")[-1] == TokenType.EOF

    def test_positions_are_one_based(self):
        tokens = lex("int x;\n  y = 1;")
        assert (tokens[0].line, tokens[0].col) == (1, 1)
        assert (tokens[1].line, tokens[1].col) == (1, 5)
        y = tokens[3]
        assert y.value == "y"
        assert (y.line, y.col) == (2, 3)

    def test_eof_position_after_last_char(self):
        tokens = lex("a\nbc")
        assert (tokens[-1].line, tokens[-1].col) == (2, 3)

    def test_set_source_rewinds(self):
        lexer = Lexer("int a;")
        lexer.tokenize()
        lexer.set_source("b")
        tokens = lexer.tokenize()
        assert [t.value for t in tokens] == ["b", ""]
        assert (tokens[0].line, tokens[0].col) == (1, 1)


# --- Keywords and identifiers ---

class TestKeywords:
    def test_type_keywords(self):
        assert types("int float char")[:3] == [TokenType.KEYWORD] * 3

    def test_std_string_is_one_keyword(self):
        tokens = lex("std::string s;")
        assert tokens[0].type == TokenType.KEYWORD
        assert tokens[0].value == "std::string"
        assert tokens[1].value == "s"

    def test_other_qualified_name_is_identifier(self):
        tokens = lex("foo::bar")
        assert tokens[0].type == TokenType.IDENTIFIER
        assert tokens[0].value == "foo::bar"

    def test_control_keywords(self):
        assert types("if else return for while")[:5] == [TokenType.KEYWORD] * 5

    def test_bool_and_null_literals(self):
        assert types("true false nullptr")[:3] == [
            TokenType.BOOL_LITERAL, TokenType.BOOL_LITERAL, TokenType.NULL_LITERAL,
        ]

    def test_identifier_with_underscore_and_digits(self):
        tokens = lex("_tmp2 x1")
        assert [t.type for t in tokens[:2]] == [TokenType.IDENTIFIER] * 2
        assert values("_tmp2 x1") == ["_tmp2", "x1"]

    def test_keyword_prefix_is_identifier(self):
        assert lex("integer")[0].type == TokenType.IDENTIFIER


# --- Literals ---

class TestLiterals:
    def test_integer(self):
        tokens = lex("42")
        assert tokens[0].type == TokenType.NUMBER_LITERAL
        assert tokens[0].value == "42"

    def test_float(self):
        tokens = lex("3.14")
        assert tokens[0].type == TokenType.FLOAT_LITERAL
        assert tokens[0].value == "3.14"

    def test_second_dot_ends_number(self):
        tokens = lex("1.2.3")
        assert [(t.type, t.value) for t in tokens[:2]] == [
            (TokenType.FLOAT_LITERAL, "1.2"),
            (TokenType.NUMBER_LITERAL, "3"),
        ]

    def test_string_keeps_quotes(self):
        tokens = lex('"hello world"')
        assert tokens[0].type == TokenType.STRING_LITERAL
        assert tokens[0].value == '"hello world"'

    def test_string_escaped_quote(self):
        tokens = lex(r'"say \"hi\""')
        assert tokens[0].value == r'"say \"hi\""'
        assert tokens[1].type == TokenType.EOF

    def test_unterminated_string_runs_to_end(self, caplog):
        with caplog.at_level(logging.WARNING):
            tokens = lex('"abc')
        assert tokens[0].type == TokenType.STRING_LITERAL
        assert tokens[0].value == '"abc'
        assert "unterminated string" in caplog.text

    def test_char(self):
        tokens = lex("'a'")
        assert tokens[0].type == TokenType.CHAR_LITERAL
        assert tokens[0].value == "'a'"

    def test_escaped_quote(self):
        tokens = lex(r"'\''")
        assert tokens[0].type == TokenType.CHAR_LITERAL
        assert tokens[0].value == "'\\'"
        assert tokens[1].type == TokenType.EOF

    def test_other_escapes_rejected(self):
        with pytest.raises(LexerError, match="Expected closing single quote"):
            lex(r"int c = '\n';")

    def test_unterminated_char_is_fatal(self):
        with pytest.raises(LexerError, match="Expected closing single quote"):
            lex("'ab'")

    def test_char_at_end_of_input_is_fatal(self):
        with pytest.raises(LexerError) as exc:
            lex("x = 'a")
        assert exc.value.line == 1
        assert exc.value.col == 5


# --- Operators and separators ---

class TestOperators:
    @pytest.mark.parametrize("op", ["==", "!=", "<=", ">="])
    def test_two_char_comparisons(self, op):
        tokens = lex(f"a {op} b")
        assert tokens[1].type == TokenType.OPERATOR
        assert tokens[1].value == op

    def test_logical_operators(self):
        assert values("a && b || c") == ["a", "&&", "b", "||", "c"]

    def test_operator_run_is_greedy(self):
        assert values("a +- b") == ["a", "+-", "b"]

    def test_equals_absorbs_one_equals(self):
        assert values("a === b") == ["a", "==", "=", "b"]

    def test_separators(self):
        assert types(";,(){}")[:6] == [TokenType.SEPARATOR] * 6


# --- Comments and unknown characters ---

class TestSkipping:
    def test_line_comment(self):
        assert values("x // comment\ny") == ["x", "y"]

    def test_block_comment(self):
        tokens = lex("x /* a\nb */ y")
        assert [t.value for t in tokens[:2]] == ["x", "y"]
        assert tokens[1].line == 2

    def test_unterminated_block_comment(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert values("x /* never closed") == ["x"]
        assert "unterminated block comment" in caplog.text

    def test_unknown_character_dropped(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert values("a @ b") == ["a", "b"]
        assert "unknown character" in caplog.text

    def test_lone_dot_dropped(self):
        assert values("1.2.3") == ["1.2", "3"]
