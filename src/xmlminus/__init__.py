"""
xmlminus: recognizer for the XML-minus markup language

Decides whether a document belongs to XML-minus, a small fixed subset of
XML, and produces the leftmost derivation that generates it. Recognition
runs in two stages: an ordered-rule tokenizer, then a predictive descent
parser over an LL(1) grammar that also checks tag-name matching and
attribute-name uniqueness.

Quick Start:
    >>> from xmlminus import recognize
    >>> derivation = recognize('<note to="you">hi</note>')
    >>> print(derivation.lines[-1])
    endTag ::= </ NAME >

    >>> # Or run the two stages yourself
    >>> from xmlminus import parse, tokenize
    >>> tokens = tokenize("<a/>")
    >>> derivation = parse(tokens, on_production=print)

Errors:
    Every failure raises a subclass of XmlMinusError: LexError from the
    tokenizer, ParseError from the parser.
"""

from collections.abc import Callable

from xmlminus.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from xmlminus.derivation import Derivation
from xmlminus.errors import (
    DuplicateAttributeError,
    EmptyInputError,
    IllegalAmpersandError,
    IllegalCharacterError,
    LexError,
    MalformedEmptyTagError,
    MalformedEndTagError,
    NestingDepthError,
    ParseError,
    RepeatedAssignError,
    TagMismatchError,
    TokensExhaustedError,
    TrailingInputError,
    UnexpectedSymbolError,
    UnrecognizedInputError,
    XmlMinusError,
)
from xmlminus.lexer import Lexer
from xmlminus.parser import Parser, parse
from xmlminus.parsing import Production
from xmlminus.tokens import Token, TokenKind
from xmlminus.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def tokenize(document: str) -> tuple[Token, ...]:
    """Scan a whole document into its token sequence.

    Args:
        document: Complete XML-minus document text

    Returns:
        Tokens in source order; a clean scan ends with END_OF_INPUT.

    Raises:
        LexError: On the first lexical error.

    Example:
        >>> [t.kind.name for t in tokenize("<a/>")]
        ['OPEN', 'NAME', 'SLGT', 'END_OF_INPUT']
    """
    tokens = tuple(Lexer(document).tokenize())
    logger.debug("Scanned %d characters into %d tokens", len(document), len(tokens))
    return tokens


def recognize(
    document: str,
    *,
    on_production: Callable[[str], object] | None = None,
) -> Derivation:
    """Tokenize and parse a document in one call.

    Args:
        document: Complete XML-minus document text
        on_production: Optional callback receiving each production line

    Returns:
        The leftmost derivation of the document.

    Raises:
        XmlMinusError: If the document is not well-formed XML-minus.
    """
    return parse(tokenize(document), on_production=on_production)


class Recognizer:
    """Reusable recognizer bound to one configuration.

    Usage:
        >>> recognizer = Recognizer(strict_lexing=True)
        >>> derivation = recognizer("<a></a>")
        >>> len(derivation)
        7

    Thread Safety:
        Sets config via ContextVar (thread-local) for the duration of each
        call. Safe to use from several threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        strict_lexing: bool = False,
        max_nesting_depth: int | None = None,
    ) -> None:
        options: dict[str, object] = {"strict_lexing": strict_lexing}
        if max_nesting_depth is not None:
            options["max_nesting_depth"] = max_nesting_depth
        self._config = ParseConfig.from_dict(options)

    @property
    def config(self) -> ParseConfig:
        """Configuration applied on every call."""
        return self._config

    def __call__(
        self,
        document: str,
        *,
        on_production: Callable[[str], object] | None = None,
    ) -> Derivation:
        """Recognize a document under this recognizer's configuration."""
        with parse_config_context(self._config):
            return recognize(document, on_production=on_production)

    def tokenize(self, document: str) -> tuple[Token, ...]:
        """Tokenize a document under this recognizer's configuration."""
        with parse_config_context(self._config):
            return tokenize(document)

    def parse(
        self,
        tokens: tuple[Token, ...],
        *,
        on_production: Callable[[str], object] | None = None,
    ) -> Derivation:
        """Parse a token sequence under this recognizer's configuration."""
        with parse_config_context(self._config):
            return parse(tokens, on_production=on_production)


__all__ = [
    # Core API
    "tokenize",
    "parse",
    "recognize",
    "Recognizer",
    "Lexer",
    "Parser",
    # Values
    "Token",
    "TokenKind",
    "Production",
    "Derivation",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "XmlMinusError",
    "LexError",
    "EmptyInputError",
    "IllegalCharacterError",
    "IllegalAmpersandError",
    "MalformedEndTagError",
    "MalformedEmptyTagError",
    "RepeatedAssignError",
    "UnrecognizedInputError",
    "ParseError",
    "UnexpectedSymbolError",
    "TagMismatchError",
    "DuplicateAttributeError",
    "TrailingInputError",
    "TokensExhaustedError",
    "NestingDepthError",
    "__version__",
]
