"""Exception classes for xmlminus.

Provides the error taxonomy for both stages of recognition. Every error
is terminal for the current run: nothing is retried and there is no
partial result.

Each class carries an ``exit_code`` that the command line front end
reports as the process exit status.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xmlminus.tokens import Token, TokenKind


class XmlMinusError(Exception):
    """Base exception for all xmlminus errors.

    Subclass this for specific error categories.
    """

    exit_code: int = 1


# =========================================================================
# Lexical errors
# =========================================================================


class LexError(XmlMinusError):
    """Error while scanning the document text.

    Raised when the lexer meets text it must reject outright.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset

        location = ""
        if lineno is not None:
            location = f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class EmptyInputError(LexError):
    """The document is empty."""

    def __init__(self) -> None:
        super().__init__("Scanner error: the document is empty.")


class IllegalCharacterError(LexError):
    """A name-like run contains a forbidden punctuation character."""

    def __init__(
        self, text: str, lineno: int | None = None, col_offset: int | None = None
    ) -> None:
        self.text = text
        super().__init__(
            f"Scanner error: illegal character in token {text!r}.", lineno, col_offset
        )


class IllegalAmpersandError(LexError):
    """An ``&`` that does not start an entity or character reference."""

    def __init__(self, lineno: int | None = None, col_offset: int | None = None) -> None:
        super().__init__(
            "Scanner error: illegal usage of special symbol '&'.", lineno, col_offset
        )


class MalformedEndTagError(LexError):
    """Too many forward slashes at the start of an end tag."""

    def __init__(self, lineno: int | None = None, col_offset: int | None = None) -> None:
        super().__init__(
            "Scanner error: too many forward slashes in end tag.", lineno, col_offset
        )


class MalformedEmptyTagError(LexError):
    """Stray forward slashes before the close of an empty tag."""

    def __init__(self, lineno: int | None = None, col_offset: int | None = None) -> None:
        super().__init__(
            "Scanner error: too many forward slashes in empty tag.", lineno, col_offset
        )


class RepeatedAssignError(LexError):
    """A run of ``=`` that cannot be an attribute assignment.

    Only raised in strict lexing mode; by default the run is passed on
    to the parser, which rejects it.
    """

    def __init__(
        self, text: str, lineno: int | None = None, col_offset: int | None = None
    ) -> None:
        self.text = text
        super().__init__(
            f"Scanner error: misplaced assignment {text!r}.", lineno, col_offset
        )


class UnrecognizedInputError(LexError):
    """No recognition rule matches at the scan position.

    Only raised in strict lexing mode; by default scanning stops and the
    truncated sequence is left for the parser to reject.
    """

    def __init__(
        self, char: str, lineno: int | None = None, col_offset: int | None = None
    ) -> None:
        self.char = char
        super().__init__(
            f"Scanner error: cannot scan input starting at {char!r}.", lineno, col_offset
        )


# =========================================================================
# Parse errors
# =========================================================================


class ParseError(XmlMinusError):
    """Error during parsing of the token sequence.

    Raised when the parser rejects the document.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnexpectedSymbolError(ParseError):
    """The lookahead fits no grammar alternative at a decision point."""

    def __init__(self, found: Token, expected: Iterable[TokenKind] = ()) -> None:
        """Initialize syntax error.

        Args:
            found: The offending lookahead token
            expected: Token kinds that would have been accepted here
        """
        self.found = found
        self.expected = tuple(expected)

        message = f"Syntax error: unexpected symbol {_describe(found)}"
        if self.expected:
            wanted = ", ".join(repr(kind.symbol) for kind in self.expected)
            message += f"; expected {wanted}"
        super().__init__(message + ".")


class TagMismatchError(ParseError):
    """An end tag names a different element than its start tag."""

    exit_code = 2

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Error - End tag name mismatch: expected {expected!r} but found {found!r}."
        )


class DuplicateAttributeError(ParseError):
    """Two attributes of the same tag share a name."""

    exit_code = 3

    def __init__(self, name: str, tag: str | None = None) -> None:
        self.name = name
        self.tag = tag
        within = f"tag {tag!r}" if tag is not None else "current tag"
        super().__init__(
            f"Error - Detected duplicate attribute name {name!r} within {within}."
        )


class TrailingInputError(ParseError):
    """Tokens remain after the document was fully derived."""

    def __init__(self, found: Token) -> None:
        self.found = found
        super().__init__(
            f"Error - Unexpected symbol {_describe(found)} encountered at end of file."
        )


class TokensExhaustedError(ParseError):
    """The parser tried to read past the end of the token sequence.

    Signals a truncated or malformed sequence rather than a well-formed
    rejection.
    """

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(
            f"Fatal error while parsing: token sequence exhausted at position {position}."
        )


class NestingDepthError(ParseError):
    """Elements are nested deeper than the configured limit."""

    def __init__(self, depth: int) -> None:
        self.depth = depth
        super().__init__(f"Error - Element nesting exceeds the limit of {depth}.")


def _describe(token: Token) -> str:
    """Render a token for diagnostics, e.g. ``'b' (NAME)``."""
    if token.lexeme:
        return f"{token.lexeme!r} ({token.kind.symbol})"
    return token.kind.symbol
