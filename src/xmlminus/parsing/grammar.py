"""XML-minus grammar productions.

The LL(1) grammar recognized by the parser:

    document      ::= element EOF
    element       ::= < elementPrefix
    elementPrefix ::= NAME attribute elementSuffix
    attribute     ::= NAME = STRING attribute  |  EPSILON
    elementSuffix ::= > elementOrData endTag   |  />
    elementOrData ::= element elementOrData    |  DATA elementOrData  |  EPSILON
    endTag        ::= </ NAME >

Each Production's value is the line printed when it is applied.
"""

from enum import Enum


class Production(Enum):
    """One alternative of one non-terminal."""

    DOCUMENT = "document ::= element EOF"
    ELEMENT = "element ::= < elementPrefix"
    ELEMENT_PREFIX = "elementPrefix ::= NAME attribute elementSuffix"
    ATTRIBUTE = "attribute ::= NAME = STRING attribute"
    ATTRIBUTE_EMPTY = "attribute ::= EPSILON"
    ELEMENT_SUFFIX_CONTENT = "elementSuffix ::= > elementOrData endTag"
    ELEMENT_SUFFIX_EMPTY = "elementSuffix ::= />"
    CONTENT_ELEMENT = "elementOrData ::= element elementOrData"
    CONTENT_DATA = "elementOrData ::= DATA elementOrData"
    CONTENT_EMPTY = "elementOrData ::= EPSILON"
    END_TAG = "endTag ::= </ NAME >"

    @property
    def nonterminal(self) -> str:
        """Left-hand side of the production."""
        return self.value.split(" ::= ", 1)[0]

    def __str__(self) -> str:
        return self.value
