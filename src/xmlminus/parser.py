"""Predictive recursive descent parser for XML-minus.

Consumes the token sequence produced by the Lexer and derives it from
the LL(1) grammar in `xmlminus.parsing.grammar`, one method per
non-terminal. The lookahead token alone selects each alternative; there
is no backtracking.

Besides the grammar, the parser enforces two rules the grammar cannot
express, using state it owns:

- an open-tag-name stack, so every end tag names its start tag;
- a per-tag attribute-name set, so no tag repeats an attribute.

Element nesting lives on the open-tag stack, not the call stack, so
document depth is bounded only by ``max_nesting_depth`` when it is set.

Thread Safety:
Parser instances are not thread-safe. Create one per token sequence.
Configuration is read from ContextVar (thread-local).

"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from xmlminus.config import get_parse_config
from xmlminus.derivation import Derivation
from xmlminus.errors import (
    DuplicateAttributeError,
    NestingDepthError,
    TagMismatchError,
    TrailingInputError,
    UnexpectedSymbolError,
)
from xmlminus.parsing import Production, TokenNavigationMixin
from xmlminus.tokens import Token, TokenKind
from xmlminus.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(TokenNavigationMixin):
    """Recursive descent parser for XML-minus.

    Usage:
        >>> parser = Parser(tokenize("<a></a>"))
        >>> for line in parser.parse().lines:
        ...     print(line)
        document ::= element EOF
        element ::= < elementPrefix
        elementPrefix ::= NAME attribute elementSuffix
        attribute ::= EPSILON
        elementSuffix ::= > elementOrData endTag
        elementOrData ::= EPSILON
        endTag ::= </ NAME >

    Each applied production is also passed to ``on_production`` as soon
    as it is chosen, so callers can stream the derivation.

    """

    __slots__ = (
        "_tokens",
        "_tokens_len",
        "_pos",
        "_tag_names",
        "_attribute_names",
        "_productions",
        "_on_production",
        "_max_depth",
    )

    def __init__(
        self,
        tokens: Sequence[Token],
        on_production: Callable[[str], object] | None = None,
    ) -> None:
        """Initialize parser with a token sequence.

        Args:
            tokens: Token sequence, normally ending with END_OF_INPUT
            on_production: Optional callback receiving each production line
        """
        self._tokens = tuple(tokens)
        self._tokens_len = len(self._tokens)
        self._on_production = on_production
        self._max_depth = get_parse_config().max_nesting_depth
        self._reset()

    def _reset(self) -> None:
        self._pos = 0
        self._tag_names: list[str] = []
        self._attribute_names: set[str] = set()
        self._productions: list[Production] = []

    def parse(self) -> Derivation:
        """Derive the token sequence from the start symbol.

        Returns:
            The leftmost derivation of the document.

        Raises:
            ParseError: On the first violation; the run is not resumed.
        """
        self._reset()
        self._document()

        if not self._predict(TokenKind.EPSILON):
            raise TrailingInputError(self._lookahead)

        logger.debug(
            "Derived %d tokens in %d steps", self._tokens_len, len(self._productions)
        )
        return Derivation(tuple(self._productions))

    def _emit(self, production: Production) -> None:
        """Record that a production was applied."""
        self._productions.append(production)
        if self._on_production is not None:
            self._on_production(production.value)

    # =========================================================================
    # Non-terminals
    # =========================================================================

    def _document(self) -> None:
        """document ::= element EOF"""
        self._emit(Production.DOCUMENT)
        self._element()
        self._match(TokenKind.END_OF_INPUT)

    def _element(self) -> None:
        """element ::= < elementPrefix

        Child elements are derived by `_element_or_data`, which tracks
        nesting on the open-tag stack instead of the call stack.
        """
        outer = len(self._tag_names)
        self._start_element()
        self._element_or_data(outer)

    def _start_element(self) -> None:
        self._emit(Production.ELEMENT)
        self._match(TokenKind.OPEN)
        self._element_prefix()

    def _element_prefix(self) -> None:
        """elementPrefix ::= NAME attribute elementSuffix

        The tag name is pushed before it is consumed so the end tag (if
        any) can be checked against it.
        """
        self._emit(Production.ELEMENT_PREFIX)
        name = self._peek()
        self._match_no_advance(TokenKind.NAME)
        self._tag_names.append(name.lexeme)
        if self._max_depth is not None and len(self._tag_names) > self._max_depth:
            raise NestingDepthError(self._max_depth)
        self._match(TokenKind.NAME)
        self._attribute()
        self._element_suffix()

    def _attribute(self) -> None:
        """attribute ::= NAME = STRING attribute | EPSILON

        The right recursion is applied as a loop; each attribute still
        records one production.
        """
        while self._predict(TokenKind.NAME):
            name = self._lookahead.lexeme
            if name in self._attribute_names:
                tag = self._tag_names[-1] if self._tag_names else None
                raise DuplicateAttributeError(name, tag)
            self._attribute_names.add(name)

            self._emit(Production.ATTRIBUTE)
            self._match(TokenKind.NAME)
            self._match(TokenKind.ASSIGN)
            self._match(TokenKind.STRING)

        # Attribute names are scoped to one tag
        self._attribute_names.clear()
        self._emit(Production.ATTRIBUTE_EMPTY)

    def _element_suffix(self) -> None:
        """elementSuffix ::= > elementOrData endTag | />

        After ``>`` the element stays on the open-tag stack; its content
        and end tag are left to the enclosing `_element_or_data` loop.
        """
        if self._predict(TokenKind.CLOSE):
            self._emit(Production.ELEMENT_SUFFIX_CONTENT)
            self._match(TokenKind.CLOSE)
        elif self._predict(TokenKind.SLGT):
            self._emit(Production.ELEMENT_SUFFIX_EMPTY)
            # Empty tag: nothing to match the name against
            self._tag_names.pop()
            self._match(TokenKind.SLGT)
        else:
            raise UnexpectedSymbolError(
                self._lookahead, (TokenKind.CLOSE, TokenKind.SLGT)
            )

    def _element_or_data(self, outer: int) -> None:
        """elementOrData ::= element elementOrData | DATA elementOrData | EPSILON

        Runs until every element opened above ``outer`` stack entries is
        closed. A child start tag opens a new level; EPSILON is followed
        by the end tag of the innermost open element. The productions
        come out in the same order as a recursive descent would emit them.
        """
        while len(self._tag_names) > outer:
            if self._predict(TokenKind.OPEN):
                self._emit(Production.CONTENT_ELEMENT)
                self._start_element()
            elif self._predict(TokenKind.DATA):
                self._emit(Production.CONTENT_DATA)
                self._match(TokenKind.DATA)
            else:
                self._emit(Production.CONTENT_EMPTY)
                self._end_tag()

    def _end_tag(self) -> None:
        """endTag ::= </ NAME >

        The name after ``</`` is inspected before anything is consumed and
        compared, case-sensitively, with the innermost open tag.
        """
        self._match_no_advance(TokenKind.LTSL)
        self._emit(Production.END_TAG)
        name = self._peek(1)
        expected = self._tag_names.pop()
        # Only a NAME is compared; other tokens fail the NAME match below
        if name.kind is TokenKind.NAME and name.lexeme != expected:
            raise TagMismatchError(expected, name.lexeme)
        self._match(TokenKind.LTSL)
        self._match(TokenKind.NAME)
        self._match(TokenKind.CLOSE)


def parse(
    tokens: Sequence[Token],
    *,
    on_production: Callable[[str], object] | None = None,
) -> Derivation:
    """Parse a token sequence into its leftmost derivation.

    Args:
        tokens: Output of `tokenize`
        on_production: Optional callback receiving each production line

    Raises:
        ParseError: If the sequence is not a well-formed document.
    """
    return Parser(tokens, on_production).parse()
