#!/usr/bin/env python3
from enum import IntEnum, auto
from typing import Dict, Optional


class TokenType(IntEnum):
    """Token types

    Each TokenType represents a distinctly identifiable piece of text within the
    source code. These are assigned by the Scanner class as it processes the
    source in order to provide a consistently identifiable set of Tokens for
    a parser.

    The display name of a TokenType is its member name, which is stable and
    is what str() returns:
    str(TokenType.BANG_EQUAL)
    'BANG_EQUAL'
    """

    # Single-character tokens.
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    COMMA = auto()  # ,
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # One or two character tokens
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=

    # Literals
    IDENTIFIER = auto()  # fooVar
    STRING = auto()  # "foobar"
    NUMBER = auto()  # 42

    # Keywords
    # These words are identifiers reserved for use within the Lox language itself
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # End of file
    EOF = auto()  # \0

    @property
    def display_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        # IntEnum renders as the integer value on 3.11+.
        return self.display_name


# Used to map a scanned portion of the source text representing a keyword to
# its TokenType. Matching is exact and case sensitive.
KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}


def keyword(text: str) -> Optional[TokenType]:
    """Look up the keyword TokenType for a scanned word.

    Args:
        text: str. The complete scanned word, e.g. "class".

    Returns:
        type: Optional[TokenType]. The keyword's TokenType, or None if the text
            is not a reserved word ("classroom" is not).
    """

    return KEYWORDS.get(text)
