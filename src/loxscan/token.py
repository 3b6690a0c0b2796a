#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Union

from loxscan.token_type import TokenType

# Eagerly parsed value of a lexeme. NUMBER Tokens carry a float, STRING Tokens
# the text between the quotes, IDENTIFIER and keyword Tokens their own text,
# and all other Tokens None.
LiteralValue = Union[float, str, None]


@dataclass(frozen=True)
class Token:
    """Scanner Token

    A Token represents a "chunk" of text within the processed source code. These
    are returned by the Scanner and consumed by a parser.

    For example:
    var a = 2;

    Has 6 Tokens:
    Scanner("var a = 2;").scan_tokens()
    Token(TokenType.VAR,        "var", "var", 1)
    Token(TokenType.IDENTIFIER, "a",   "a",   1)
    Token(TokenType.EQUAL,      "=",   None,  1)
    Token(TokenType.NUMBER,     "2",   2.0,   1)
    Token(TokenType.SEMICOLON,  ";",   None,  1)
    Token(TokenType.EOF,        "",    None,  1)

    Args:
        type: TokenType. The type of Token being identified, see the TokenType
            enum for possible types.
        lexeme: str. Scanned source contents representing this Token, empty for
            the EOF Token.
        literal: LiteralValue. Eagerly evaluated Python representation of the
            lexeme if any, otherwise None.
        line: int. The line in the source code where this Token started.
    """

    type: TokenType
    lexeme: str
    literal: LiteralValue
    line: int

    def __repr__(self) -> str:
        return self.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        return self.type.display_name + " " + self.lexeme + " " + str(self.literal)
