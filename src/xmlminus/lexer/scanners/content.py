"""Scanners for names, quoted strings and element content."""

from __future__ import annotations

from xmlminus.errors import IllegalCharacterError
from xmlminus.lexer.patterns import (
    DATA_RE,
    DATA_SPLIT_RE,
    INVALID_CHARS,
    NAME_RE,
    STRING_RE,
)
from xmlminus.lexer.scanners.base import ScanWindowMixin
from xmlminus.tokens import Token, TokenKind


class ContentScannerMixin(ScanWindowMixin):
    """Mixin providing the NAME, STRING and DATA rules.

    NAME and DATA are told apart by what precedes them: text directly
    after ``>`` is element content, anything else that looks like a name
    is a name.

    """

    def _scan_name(self) -> list[Token] | None:
        """Scan a tag or attribute name.

        Raises:
            IllegalCharacterError: The run contains a forbidden punctuation
                character.
        """
        if self._follows(">"):
            return None
        m = self._match(NAME_RE)
        if m is None:
            return None
        text = m.group()
        if not INVALID_CHARS.isdisjoint(text):
            lineno, col = self._location()
            raise IllegalCharacterError(text, lineno, col)
        self._commit(m)
        return [self._token(TokenKind.NAME, text)]

    def _scan_string(self) -> list[Token] | None:
        """Scan a single- or double-quoted attribute value."""
        m = self._match(STRING_RE)
        if m is None:
            return None
        self._commit(m)
        return [self._token(TokenKind.STRING, m.group())]

    def _scan_data(self) -> list[Token] | None:
        """Scan element content following ``>``.

        Whitespace inside content is not significant: the run is split on
        whitespace and one DATA token is produced per fragment.
        """
        if not self._follows(">"):
            return None
        m = self._match(DATA_RE)
        if m is None:
            return None
        self._commit(m)
        return [
            self._token(TokenKind.DATA, fragment)
            for fragment in DATA_SPLIT_RE.split(m.group())
            if fragment
        ]
