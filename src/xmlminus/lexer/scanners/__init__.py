"""Rule scanners for the XML-minus lexer.

Each scanner is a mixin that provides the matchers for one concern.
The Lexer decides the order in which they are tried.
"""

from xmlminus.lexer.scanners.base import ScanWindowMixin
from xmlminus.lexer.scanners.content import ContentScannerMixin
from xmlminus.lexer.scanners.diagnostic import DiagnosticScannerMixin
from xmlminus.lexer.scanners.markup import MarkupScannerMixin
from xmlminus.lexer.scanners.skip import SkipScannerMixin

__all__ = [
    "ContentScannerMixin",
    "DiagnosticScannerMixin",
    "MarkupScannerMixin",
    "ScanWindowMixin",
    "SkipScannerMixin",
]
