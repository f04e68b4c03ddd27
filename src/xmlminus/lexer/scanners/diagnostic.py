"""Scanners that only exist to reject malformed input.

These rules sit at the end of the priority order: they fire only when no
token rule matched, and always raise.
"""

from __future__ import annotations

from xmlminus.errors import (
    IllegalAmpersandError,
    MalformedEmptyTagError,
    MalformedEndTagError,
)
from xmlminus.lexer.patterns import AMPERSAND_RE, EMPTY_TAG_SLASHES_RE, SLASH_RUN_RE
from xmlminus.lexer.scanners.base import ScanWindowMixin
from xmlminus.tokens import Token


class DiagnosticScannerMixin(ScanWindowMixin):
    """Mixin providing the error-detection rules."""

    def _scan_ampersand(self) -> list[Token] | None:
        """Reject an ``&`` outside an entity or character reference."""
        if self._match(AMPERSAND_RE) is None:
            return None
        raise IllegalAmpersandError(*self._location())

    def _scan_end_tag_slashes(self) -> list[Token] | None:
        """Reject extra slashes right after ``</``."""
        if not self._follows("</") or self._match(SLASH_RUN_RE) is None:
            return None
        raise MalformedEndTagError(*self._location())

    def _scan_empty_tag_slashes(self) -> list[Token] | None:
        """Reject stray slashes ahead of a later ``/>``."""
        if self._match(EMPTY_TAG_SLASHES_RE) is None:
            return None
        raise MalformedEmptyTagError(*self._location())
