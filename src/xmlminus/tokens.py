"""Token and TokenKind definitions for the XML-minus lexer.

The lexer produces a sequence of Token objects that the parser consumes.
Each Token pairs a kind with the exact source text it matched.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    The value of each member is the grammar symbol used when printing
    productions and diagnostics.

    """

    NAME = "NAME"
    STRING = "STRING"
    DATA = "DATA"
    OPEN = "<"
    CLOSE = ">"
    LTSL = "</"  # start of an end tag
    SLGT = "/>"  # end of an empty tag
    ASSIGN = "="

    # Stream markers
    END_OF_INPUT = "EOF"  # appended by the lexer after a clean scan
    EPSILON = "EPSILON"  # synthesized by the parser once the sequence is used up

    @property
    def symbol(self) -> str:
        """Grammar symbol for this kind (``<``, ``NAME``, ``EOF``, ...)."""
        return self.value


# Lexeme carried by the END_OF_INPUT marker
END_OF_INPUT_LEXEME = "&$"


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: The token kind (from TokenKind enum)
        lexeme: The exact text matched in the source

    Tokens carry no source position; equality is by kind and lexeme.

    """

    kind: TokenKind
    lexeme: str

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.lexeme
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r})"


END_OF_INPUT_TOKEN = Token(TokenKind.END_OF_INPUT, END_OF_INPUT_LEXEME)
EPSILON_TOKEN = Token(TokenKind.EPSILON, "")
