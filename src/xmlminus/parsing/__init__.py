"""Parsing subsystem for the XML-minus parser.

Public API:
Production: Grammar alternatives and their printed form
TokenNavigationMixin: Token cursor, lookahead and terminal matching

"""

from xmlminus.parsing.grammar import Production
from xmlminus.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "Production",
    "TokenNavigationMixin",
]
