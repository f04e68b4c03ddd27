"""Character classes and compiled patterns for the XML-minus lexer.

The classes form a closed rule set: no Unicode-aware classification is
attempted beyond what is listed here.

Usage:
    from xmlminus.lexer.patterns import INVALID_CHARS, NAME_RE

    m = NAME_RE.match(source, pos)
    if m and not INVALID_CHARS.isdisjoint(m.group()):
        ...
"""

import re

# Punctuation accepted by the name pattern only so that it can be rejected
INVALID_CHARS: frozenset[str] = frozenset("*+[](){}$@#;?,!%^`|~")

# Whitespace skipped between tokens
WHITESPACE_CHARS: frozenset[str] = frozenset(" \t\n\r")

_INVALID = "".join(re.escape(c) for c in sorted(INVALID_CHARS))

NAME_CHAR = rf"[a-zA-Z_:0-9\-.{_INVALID}]"

ORDINARY = r"[^<>\"'&]"
ENTITY = r"&(?:lt|gt|quot|apos|amp);"
CHARREF = r"&#[0-9]+;|&#x[0-9a-fA-F]+;"
CONTENT_CHAR = rf"(?:{ORDINARY}|{ENTITY}|{CHARREF})"

# Skipped units
COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
WHITESPACE_RE = re.compile(r"[ \t\n\r]+")

# Tokens
NAME_RE = re.compile(rf"{NAME_CHAR}+")
STRING_RE = re.compile(rf"\"(?:{CONTENT_CHAR}|')*\"|'(?:{CONTENT_CHAR}|\")*'")
DATA_RE = re.compile(rf"{CONTENT_CHAR}+(?<!=)")
OPEN_RE = re.compile(r"</?(?!!)")
CLOSE_RE = re.compile(r"/?(?<!-)>")
ASSIGN_RE = re.compile(r"(?<!=)=(?!=)(?=['\"\s])")

# Diagnostics
EQUALS_RUN_RE = re.compile(r"=+")
AMPERSAND_RE = re.compile(r"&+")
SLASH_RUN_RE = re.compile(r"/+")
EMPTY_TAG_SLASHES_RE = re.compile(r"/+(?=.*?/>)")

# Splits content runs into data fragments
DATA_SPLIT_RE = re.compile(r"\s+", re.ASCII)
