"""Scanners for text that never becomes a token: comments and whitespace."""

from __future__ import annotations

from xmlminus.lexer.patterns import COMMENT_RE, WHITESPACE_RE
from xmlminus.lexer.scanners.base import ScanWindowMixin
from xmlminus.tokens import Token


class SkipScannerMixin(ScanWindowMixin):
    """Mixin providing the comment and whitespace rules."""

    def _scan_comment(self) -> list[Token] | None:
        """Skip a ``<!-- ... -->`` comment."""
        m = self._match(COMMENT_RE)
        if m is None:
            return None
        self._commit(m)
        return []

    def _scan_whitespace(self) -> list[Token] | None:
        """Skip a whitespace run.

        A run directly after ``>`` belongs to element content and is left
        to the data scanner, which drops whitespace-only content anyway.
        """
        if self._follows(">"):
            return None
        m = self._match(WHITESPACE_RE)
        if m is None:
            return None
        self._commit(m)
        return []
