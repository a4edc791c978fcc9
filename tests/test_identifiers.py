"""Test identifiers, keywords, and real literals."""

import pytest

from gmsc.tokens import TokenKind

from .conftest import assert_kinds, assert_values


class TestIdentifiers:
    def test_simple(self, lex):
        tokens = lex("player")
        assert_kinds(tokens, [TokenKind.IDENTIFIER])
        assert_values(tokens, ["player"])

    def test_underscore_and_digits(self, lex):
        tokens = lex("_foo123")
        assert_kinds(tokens, [TokenKind.IDENTIFIER])
        assert_values(tokens, ["_foo123"])

    def test_mixed_case(self, lex):
        tokens = lex("obj_Player_2")
        assert_values(tokens, ["obj_Player_2"])

    def test_identifier_stops_at_operator(self, lex):
        tokens = lex("hp-1")
        assert_kinds(tokens, [TokenKind.IDENTIFIER, TokenKind.MINUS, TokenKind.REAL_LITERAL])


class TestKeywords:
    @pytest.mark.parametrize(
        "text,kind",
        [
            ("if", TokenKind.IF),
            ("else", TokenKind.ELSE),
            ("for", TokenKind.FOR),
            ("while", TokenKind.WHILE),
            ("do", TokenKind.DO),
            ("repeat", TokenKind.REPEAT),
            ("with", TokenKind.WITH),
            ("var", TokenKind.VAR),
            ("div", TokenKind.EUCL_DIVIDE),
            ("mod", TokenKind.EUCL_MODULO),
        ],
    )
    def test_keyword(self, lex, text, kind):
        tokens = lex(text)
        assert_kinds(tokens, [kind])
        assert_values(tokens, [None])

    @pytest.mark.parametrize("text", ["ifx", "iffy", "format", "done", "variable", "modulo", "divide", "else_"])
    def test_keyword_prefix_is_identifier(self, lex, text):
        tokens = lex(text)
        assert_kinds(tokens, [TokenKind.IDENTIFIER])
        assert_values(tokens, [text])

    def test_keyword_suffix_is_identifier(self, lex):
        tokens = lex("myvar")
        assert_values(tokens, ["myvar"])

    def test_keyword_followed_by_paren(self, lex):
        tokens = lex("if(x)")
        assert_kinds(
            tokens,
            [TokenKind.IF, TokenKind.PAREN_LEFT, TokenKind.IDENTIFIER, TokenKind.PAREN_RIGHT],
        )

    def test_keywords_are_case_sensitive(self, lex):
        tokens = lex("If")
        assert_kinds(tokens, [TokenKind.IDENTIFIER])

    def test_word_operators(self, lex):
        tokens = lex("a div b mod c")
        assert_kinds(
            tokens,
            [
                TokenKind.IDENTIFIER,
                TokenKind.EUCL_DIVIDE,
                TokenKind.IDENTIFIER,
                TokenKind.EUCL_MODULO,
                TokenKind.IDENTIFIER,
            ],
        )


class TestElseIf:
    def test_else_if(self, lex):
        tokens = lex("else if")
        assert_kinds(tokens, [TokenKind.ELSE_IF])

    def test_else_if_extra_whitespace(self, lex):
        tokens = lex("else \t if (x)")
        assert_kinds(
            tokens,
            [TokenKind.ELSE_IF, TokenKind.PAREN_LEFT, TokenKind.IDENTIFIER, TokenKind.PAREN_RIGHT],
        )

    def test_else_if_position(self, lex):
        tokens = lex("} else if")
        assert tokens[1][0].column == 3

    def test_else_ifx(self, lex):
        tokens = lex("else ifx")
        assert_kinds(tokens, [TokenKind.ELSE, TokenKind.IDENTIFIER])
        assert_values(tokens, [None, "ifx"])

    def test_else_newline_if(self, lex):
        tokens = lex("else\nif")
        assert_kinds(tokens, [TokenKind.ELSE, TokenKind.LINE_FEED, TokenKind.IF])

    def test_elseif_is_identifier(self, lex):
        tokens = lex("elseif")
        assert_kinds(tokens, [TokenKind.IDENTIFIER])


class TestRealLiterals:
    def test_integer(self, lex):
        tokens = lex("42")
        assert_kinds(tokens, [TokenKind.REAL_LITERAL])
        assert_values(tokens, ["42"])

    def test_decimal(self, lex):
        tokens = lex("12.34")
        assert_kinds(tokens, [TokenKind.REAL_LITERAL])
        assert_values(tokens, ["12.34"])

    def test_multiple_dots_accepted_verbatim(self, lex):
        tokens = lex("1.2.3")
        assert_kinds(tokens, [TokenKind.REAL_LITERAL])
        assert_values(tokens, ["1.2.3"])

    def test_trailing_dot(self, lex):
        tokens = lex("5.")
        assert_values(tokens, ["5."])

    def test_leading_dot_is_punctuation(self, lex):
        tokens = lex(".5")
        assert_kinds(tokens, [TokenKind.DOT, TokenKind.REAL_LITERAL])
        assert_values(tokens, [None, "5"])

    def test_member_access_with_digit(self, lex):
        tokens = lex("a.5")
        assert_kinds(tokens, [TokenKind.IDENTIFIER, TokenKind.DOT, TokenKind.REAL_LITERAL])
        assert_values(tokens, ["a", None, "5"])

    def test_lone_dot_is_punctuation(self, lex):
        tokens = lex(". x")
        assert_kinds(tokens, [TokenKind.DOT, TokenKind.IDENTIFIER])

    def test_number_then_identifier(self, lex):
        tokens = lex("3abc")
        assert_kinds(tokens, [TokenKind.REAL_LITERAL, TokenKind.IDENTIFIER])
        assert_values(tokens, ["3", "abc"])
