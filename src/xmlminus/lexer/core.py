"""Ordered-rule lexer for XML-minus.

At each scan position the rules are tried in a fixed priority order and
the first one that matches wins. Comments and whitespace are consumed
without producing tokens.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from xmlminus.config import get_parse_config
from xmlminus.errors import EmptyInputError, UnrecognizedInputError
from xmlminus.lexer.scanners import (
    ContentScannerMixin,
    DiagnosticScannerMixin,
    MarkupScannerMixin,
    SkipScannerMixin,
)
from xmlminus.tokens import END_OF_INPUT_TOKEN, Token
from xmlminus.utils.logger import get_logger

logger = get_logger(__name__)

# Priority order of the recognition rules. Earlier rules win.
SCAN_ORDER: tuple[str, ...] = (
    "_scan_comment",
    "_scan_whitespace",
    "_scan_name",
    "_scan_string",
    "_scan_data",
    "_scan_open",
    "_scan_close",
    "_scan_assign",
    "_scan_ampersand",
    "_scan_end_tag_slashes",
    "_scan_empty_tag_slashes",
)


class Lexer(
    SkipScannerMixin,
    ContentScannerMixin,
    MarkupScannerMixin,
    DiagnosticScannerMixin,
):
    """Ordered-rule lexer for XML-minus documents.

    Usage:
            >>> lexer = Lexer('<a x="1">hi</a>')
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(OPEN, '<')
        Token(NAME, 'a')
        Token(NAME, 'x')
        Token(ASSIGN, '=')
        Token(STRING, '"1"')
        Token(CLOSE, '>')
        Token(DATA, 'hi')
        Token(LTSL, '</')
        Token(NAME, 'a')
        Token(CLOSE, '>')
        Token(END_OF_INPUT, '&$')

    If no rule matches at some position, scanning stops there and the
    stream ends without END_OF_INPUT, which the parser rejects. In strict
    mode an UnrecognizedInputError is raised instead.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_strict",
        "_scanners",
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Configuration is read from ContextVar at construction time.

        Args:
            source: Complete XML-minus document text
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._strict = get_parse_config().strict_lexing
        self._scanners: tuple[Callable[[], list[Token] | None], ...] = tuple(
            getattr(self, name) for name in SCAN_ORDER
        )

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time

        Raises:
            LexError: On the first lexical error; nothing is recovered.
        """
        if not self._source:
            raise EmptyInputError()

        while self._pos < self._source_len:
            tokens = self._scan_next()
            if tokens is None:
                self._stop_unrecognized()
                return
            yield from tokens

        yield END_OF_INPUT_TOKEN

    def _scan_next(self) -> list[Token] | None:
        """Apply the first rule that matches at the current position."""
        for scan in self._scanners:
            tokens = scan()
            if tokens is not None:
                return tokens
        return None

    def _stop_unrecognized(self) -> None:
        """Handle a position that no rule recognizes."""
        char = self._source[self._pos]
        lineno, col = self._location()
        if self._strict:
            raise UnrecognizedInputError(char, lineno, col)
        logger.warning(
            "Scanning stopped at %d:%d: no rule matches %r; token stream is truncated",
            lineno,
            col,
            char,
        )
