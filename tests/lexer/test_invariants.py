"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from xmlminus import tokenize
from xmlminus.errors import LexError
from xmlminus.lexer.patterns import WHITESPACE_CHARS
from xmlminus.tokens import TokenKind

# Alphabet dense in the characters the rules care about
markup_text = st.text(alphabet="<>/=\"'&;#!-ax1 \n\t", max_size=60)


def scan(source: str) -> tuple | None:
    """Tokenize, returning None when the lexer rejects the input."""
    try:
        return tokenize(source)
    except LexError:
        return None


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(markup_text)
    @settings(max_examples=300)
    def test_end_of_input_only_at_end(self, source: str) -> None:
        """END_OF_INPUT appears at most once, and only as the last token."""
        tokens = scan(source)
        if tokens is None:
            return
        positions = [i for i, t in enumerate(tokens) if t.kind is TokenKind.END_OF_INPUT]
        assert positions in ([], [len(tokens) - 1])

    @given(markup_text)
    @settings(max_examples=300)
    def test_never_produces_epsilon(self, source: str) -> None:
        tokens = scan(source)
        if tokens is None:
            return
        assert all(t.kind is not TokenKind.EPSILON for t in tokens)

    @given(markup_text)
    @settings(max_examples=300)
    def test_no_whitespace_in_data(self, source: str) -> None:
        """DATA fragments never contain or consist of whitespace."""
        tokens = scan(source)
        if tokens is None:
            return
        for token in tokens:
            if token.kind is TokenKind.DATA:
                assert token.lexeme
                assert WHITESPACE_CHARS.isdisjoint(token.lexeme)

    @given(markup_text)
    @settings(max_examples=300)
    def test_lexemes_appear_in_source_in_order(self, source: str) -> None:
        """Tokens are non-overlapping substrings in source order."""
        tokens = scan(source)
        if tokens is None:
            return
        pos = 0
        for token in tokens:
            if token.kind is TokenKind.END_OF_INPUT:
                continue
            found = source.find(token.lexeme, pos)
            assert found >= 0, f"{token!r} not found after offset {pos}"
            pos = found + len(token.lexeme)


class TestDeterminism:
    """Test that tokenization is deterministic."""

    @given(markup_text)
    @settings(max_examples=100)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        try:
            first = tokenize(source)
        except LexError as e:
            first = type(e)
        try:
            second = tokenize(source)
        except LexError as e:
            second = type(e)
        assert first == second


class TestWhitespaceInsensitivity:
    """Whitespace between tokens never changes the token sequence."""

    @given(
        st.lists(st.from_regex(r"[a-z][a-z0-9]{0,4}", fullmatch=True), min_size=1, max_size=8),
        st.sampled_from([" ", "  ", "\n", "\t", " \r\n "]),
    )
    @settings(max_examples=100)
    def test_content_spacing(self, words: list[str], sep: str) -> None:
        spaced = tokenize(f"<a>{sep.join(words)}</a>")
        single = tokenize(f"<a>{' '.join(words)}</a>")
        assert spaced == single
        assert [t.lexeme for t in spaced if t.kind is TokenKind.DATA] == words
