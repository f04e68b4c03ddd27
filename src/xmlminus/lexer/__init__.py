"""Ordered-rule lexer for the XML-minus recognizer.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (rule order + scan loop)
├── patterns.py          # Character classes and compiled patterns
└── scanners/            # Rule scanners, one mixin per concern
    ├── base.py          # Position helpers shared by all scanners
    ├── skip.py          # Comments and whitespace
    ├── content.py       # NAME, STRING, DATA
    ├── markup.py        # OPEN/LTSL, CLOSE/SLGT, ASSIGN
    └── diagnostic.py    # Ampersand and slash errors

Usage:
    >>> from xmlminus.lexer import Lexer
    >>> for token in Lexer("<a/>").tokenize():
    ...     print(token)
Token(OPEN, '<')
Token(NAME, 'a')
Token(SLGT, '/>')
Token(END_OF_INPUT, '&$')

"""

from xmlminus.lexer.core import SCAN_ORDER, Lexer

__all__ = ["Lexer", "SCAN_ORDER"]
