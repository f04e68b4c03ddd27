"""Scan-window helpers shared by the scanner mixins."""

from __future__ import annotations

import re

from xmlminus.tokens import Token, TokenKind


class ScanWindowMixin:
    """Mixin providing position bookkeeping for scanners.

    Required Host Attributes:
        - _source: str
        - _source_len: int
        - _pos: int

    Every scanner method follows the same contract: return ``None`` if its
    rule does not match at ``_pos`` (position untouched), otherwise commit
    the position past the match and return the tokens it produced, which
    may be an empty list for skipped text.

    """

    _source: str
    _source_len: int
    _pos: int

    def _match(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        """Match pattern anchored at the current position."""
        return pattern.match(self._source, self._pos)

    def _commit(self, match: re.Match[str]) -> None:
        """Advance position past a successful match."""
        self._pos = match.end()

    def _follows(self, text: str) -> bool:
        """Check whether the current position is immediately preceded by text."""
        start = self._pos - len(text)
        return start >= 0 and self._source.startswith(text, start)

    def _location(self, pos: int | None = None) -> tuple[int, int]:
        """Return the 1-indexed (line, column) of a source position."""
        if pos is None:
            pos = self._pos
        lineno = self._source.count("\n", 0, pos) + 1
        col = pos - (self._source.rfind("\n", 0, pos) + 1) + 1
        return lineno, col

    @staticmethod
    def _token(kind: TokenKind, lexeme: str) -> Token:
        return Token(kind, lexeme)
