"""Tests for re-running Parser.parse() on the same instance.

parse() resets the cursor, the open-tag stack, the attribute set and the
recorded productions, so a parser can derive its sequence again even
after a failed run.
"""

import pytest

from xmlminus import Parser, tokenize
from xmlminus.errors import DuplicateAttributeError


class TestParserReset:
    """Test that parse() starts from a clean state."""

    def test_parse_twice_gives_same_derivation(self):
        parser = Parser(tokenize('<a x="1"><b/></a>'))
        first = parser.parse()
        second = parser.parse()

        assert first == second

    def test_position_reset_after_parse(self):
        parser = Parser(tokenize("<a/>"))
        parser.parse()
        assert parser._pos == parser._tokens_len

        parser._reset()
        assert parser._pos == 0
        assert parser._tag_names == []
        assert parser._productions == []

    def test_state_cleared_after_failure(self):
        parser = Parser(tokenize('<a><b x="1" x="2"/></a>'))
        with pytest.raises(DuplicateAttributeError):
            parser.parse()
        assert parser._tag_names == ["a", "b"]

        with pytest.raises(DuplicateAttributeError):
            parser.parse()
        assert parser._tag_names == ["a", "b"]

    def test_callback_sees_each_run(self):
        lines: list[str] = []
        parser = Parser(tokenize("<a/>"), on_production=lines.append)
        derivation = parser.parse()
        parser.parse()

        assert lines == list(derivation.lines) * 2
