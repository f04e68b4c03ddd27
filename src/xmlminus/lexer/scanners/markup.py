"""Scanners for tag delimiters and attribute assignment."""

from __future__ import annotations

from xmlminus.errors import RepeatedAssignError
from xmlminus.lexer.patterns import ASSIGN_RE, CLOSE_RE, EQUALS_RUN_RE, OPEN_RE
from xmlminus.lexer.scanners.base import ScanWindowMixin
from xmlminus.tokens import Token, TokenKind


class MarkupScannerMixin(ScanWindowMixin):
    """Mixin providing the OPEN, CLOSE and ASSIGN rules.

    Required Host Attributes:
        - _strict: bool

    """

    _strict: bool

    def _scan_open(self) -> list[Token] | None:
        """Scan ``<`` or ``</``; ``<!`` is left for comments."""
        m = self._match(OPEN_RE)
        if m is None:
            return None
        self._commit(m)
        kind = TokenKind.LTSL if m.group() == "</" else TokenKind.OPEN
        return [self._token(kind, m.group())]

    def _scan_close(self) -> list[Token] | None:
        """Scan ``>`` or ``/>``; ``->`` is not a tag close."""
        m = self._match(CLOSE_RE)
        if m is None:
            return None
        self._commit(m)
        kind = TokenKind.SLGT if m.group() == "/>" else TokenKind.CLOSE
        return [self._token(kind, m.group())]

    def _scan_assign(self) -> list[Token] | None:
        """Scan an attribute ``=``.

        Any other run of ``=`` is handed to the parser as DATA, where it
        cannot fit the grammar inside a tag.

        Raises:
            RepeatedAssignError: In strict mode, for a run that is not a
                valid assignment.
        """
        m = self._match(ASSIGN_RE)
        if m is not None:
            self._commit(m)
            return [self._token(TokenKind.ASSIGN, m.group())]

        m = self._match(EQUALS_RUN_RE)
        if m is None:
            return None
        if self._strict:
            lineno, col = self._location()
            raise RepeatedAssignError(m.group(), lineno, col)
        self._commit(m)
        return [self._token(TokenKind.DATA, m.group())]
