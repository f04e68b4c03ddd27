"""Derivation trace produced by a successful parse.

Thread Safety:
Derivation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from xmlminus.parsing.grammar import Production


@dataclass(frozen=True, slots=True)
class Derivation:
    """Leftmost derivation of a document, one production per step.

    Usage:
            >>> derivation = recognize("<a/>")
            >>> print(derivation)
        document ::= element EOF
        element ::= < elementPrefix
        elementPrefix ::= NAME attribute elementSuffix
        attribute ::= EPSILON
        elementSuffix ::= />

    """

    productions: tuple[Production, ...]

    @property
    def lines(self) -> tuple[str, ...]:
        """Printed form of each step."""
        return tuple(p.value for p in self.productions)

    def count(self, production: Production) -> int:
        """Number of times a production was applied."""
        return sum(1 for p in self.productions if p is production)

    def __len__(self) -> int:
        return len(self.productions)

    def __iter__(self) -> Iterator[Production]:
        return iter(self.productions)

    def __str__(self) -> str:
        return "\n".join(self.lines)
