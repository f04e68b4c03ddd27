"""Tests for the high-level xmlminus API."""

from xmlminus.tokens import Token, TokenKind


class TestTokenizeFunction:
    """Tests for the tokenize() function."""

    def test_tokenize_returns_tokens(self) -> None:
        from xmlminus import tokenize

        tokens = tokenize("<a/>")
        assert [t.kind for t in tokens] == [
            TokenKind.OPEN,
            TokenKind.NAME,
            TokenKind.SLGT,
            TokenKind.END_OF_INPUT,
        ]

    def test_tokenize_twice_is_identical(self) -> None:
        from xmlminus import tokenize

        source = '<!-- c --><a x="1">one  two<b/></a>'
        assert tokenize(source) == tokenize(source)


class TestRecognizeFunction:
    """Tests for the recognize() function."""

    def test_recognize_empty_tag(self) -> None:
        from xmlminus import Derivation, recognize

        derivation = recognize("<a/>")
        assert isinstance(derivation, Derivation)
        assert "elementSuffix ::= />" in derivation.lines

    def test_recognize_matches_two_stage_run(self) -> None:
        from xmlminus import parse, recognize, tokenize

        source = "<a>text &lt; more</a>"
        assert recognize(source) == parse(tokenize(source))


class TestTokenValue:
    """Token is an immutable (kind, lexeme) pair."""

    def test_equality_by_kind_and_lexeme(self) -> None:
        assert Token(TokenKind.NAME, "a") == Token(TokenKind.NAME, "a")
        assert Token(TokenKind.NAME, "a") != Token(TokenKind.DATA, "a")

    def test_hashable(self) -> None:
        assert len({Token(TokenKind.NAME, "a"), Token(TokenKind.NAME, "a")}) == 1

    def test_frozen(self) -> None:
        import pytest

        token = Token(TokenKind.NAME, "a")
        with pytest.raises(AttributeError):
            token.lexeme = "b"  # type: ignore[misc]

    def test_repr_truncates_long_lexemes(self) -> None:
        token = Token(TokenKind.DATA, "x" * 40)
        assert repr(token) == f"Token(DATA, {'x' * 17 + '...'!r})"

    def test_kind_symbols(self) -> None:
        assert TokenKind.LTSL.symbol == "</"
        assert TokenKind.SLGT.symbol == "/>"
        assert TokenKind.END_OF_INPUT.symbol == "EOF"
