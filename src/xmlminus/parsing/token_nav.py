"""Token navigation utilities for the XML-minus parser.

Provides mixin for cursor movement over an immutable token sequence
and the terminal-matching operations of predictive descent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from xmlminus.errors import TokensExhaustedError, UnexpectedSymbolError
from xmlminus.tokens import EPSILON_TOKEN, Token, TokenKind

if TYPE_CHECKING:
    from collections.abc import Sequence


class TokenNavigationMixin:
    """Mixin providing token cursor and match methods.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _tokens_len: int (cached len(_tokens))
        - _pos: int

    The sequence is never modified; consuming a token moves ``_pos``.
    Once the cursor runs off the end the lookahead is the EPSILON sentinel.

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int

    @property
    def _lookahead(self) -> Token:
        """Next unconsumed token, or EPSILON when the sequence is used up."""
        if self._pos < self._tokens_len:
            return self._tokens[self._pos]
        return EPSILON_TOKEN

    def _predict(self, kind: TokenKind) -> bool:
        """Check whether the lookahead is of the given kind."""
        return self._lookahead.kind is kind

    def _peek(self, offset: int = 0) -> Token:
        """Read the token at offset from the cursor without consuming it.

        Raises:
            TokensExhaustedError: No token exists at that position.
        """
        pos = self._pos + offset
        if pos >= self._tokens_len:
            raise TokensExhaustedError(pos)
        return self._tokens[pos]

    def _advance(self) -> None:
        """Move the cursor past the lookahead."""
        if self._pos >= self._tokens_len:
            raise TokensExhaustedError(self._pos)
        self._pos += 1

    def _match_no_advance(self, kind: TokenKind) -> None:
        """Verify the lookahead kind without consuming it."""
        if not self._predict(kind):
            raise UnexpectedSymbolError(self._lookahead, (kind,))

    def _match(self, kind: TokenKind) -> Token:
        """Consume the lookahead if it is of the given kind, and return it."""
        self._match_no_advance(kind)
        token = self._tokens[self._pos]
        self._advance()
        return token
