#!/usr/bin/env python3
from typing import List

from loxscan.lexical_error import LexicalError
from loxscan.token import LiteralValue, Token
from loxscan.token_type import TokenType, keyword


class Scanner:
    """Lox Scanner

    This class scans a given source text and returns a list of Tokens, to be
    used by a parser to generate Expressions.

    To use:
    Scanner("var a = 2;").scan_tokens()
    [VAR var var,
     IDENTIFIER a a,
     EQUAL = None,
     NUMBER 2 2.0,
     SEMICOLON ; None,
     EOF  None]

    Scanning stops at the first error, which is raised as a LexicalError. There
    is no partial result.

    A Scanner holds the state of a single scan and can only be used once.

    Args:
        source: str. The lox source text to scan.

    Public Attributes:
        tokens: List[Token]. All scanned tokens.
        start: int. Start index in the source for the Token currently being scanned.
        current: int. The current index in the source, this will be combined with
            the start to generate the Token lexeme.
        line: int. Current line being scanned, this is incremented whenever a
            newline character is found in the source text.
        start_line: int. Line on which the Token currently being scanned started.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.tokens: List[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1
        self.scanned = False

    def scan_tokens(self) -> List[Token]:
        """Scan the source text and return all scanned Tokens.

        Returns:
            tokens: List[Token]. All scanned Tokens, always ending with a single
                TokenType.EOF Token.

        Raises:
            LexicalError: On an unexpected character, an unterminated string or
                an unterminated multiline comment.
            RuntimeError: If this Scanner has already been used.
        """

        if self.scanned:
            raise RuntimeError("Scanner has already scanned its source")
        self.scanned = True

        while not self.is_at_end():
            # Move the start position up to the current index prior to scanning
            # the next token
            self.start = self.current
            self.start_line = self.line
            self.scan_token()

        # Add the end-of-file token
        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def scan_token(self) -> None:
        """Scan the remaining text for a Token.

        This is called at the start of a scan and after all token matches, until
        the end of the text is reached, adding a matched Token after each pass.
        """

        c = self.advance()
        match c:
            # Single character Lexemes.
            case "(":
                self.add_empty_token(TokenType.LEFT_PAREN)
            case ")":
                self.add_empty_token(TokenType.RIGHT_PAREN)
            case "{":
                self.add_empty_token(TokenType.LEFT_BRACE)
            case "}":
                self.add_empty_token(TokenType.RIGHT_BRACE)
            case ",":
                self.add_empty_token(TokenType.COMMA)
            case ".":
                self.add_empty_token(TokenType.DOT)
            case "-":
                # Negative numbers are a MINUS followed by a NUMBER.
                self.add_empty_token(TokenType.MINUS)
            case "+":
                self.add_empty_token(TokenType.PLUS)
            case ";":
                self.add_empty_token(TokenType.SEMICOLON)
            case "*":
                self.add_empty_token(TokenType.STAR)
            # One or two character Lexemes, always take the longest.
            case "!":
                self.add_empty_token(
                    TokenType.BANG_EQUAL if self.match("=") else TokenType.BANG
                )
            case "=":
                self.add_empty_token(
                    TokenType.EQUAL_EQUAL if self.match("=") else TokenType.EQUAL
                )
            case "<":
                self.add_empty_token(
                    TokenType.LESS_EQUAL if self.match("=") else TokenType.LESS
                )
            case ">":
                self.add_empty_token(
                    TokenType.GREATER_EQUAL if self.match("=") else TokenType.GREATER
                )
            # Division or Comment.
            case "/":
                if self.match("/"):
                    # A comment goes until the end of the line. The newline
                    # itself is left for scan_token to count.
                    while self.peek() != "\n" and not self.is_at_end():
                        self.advance()
                elif self.match("*"):
                    self.block_comment()
                else:
                    self.add_empty_token(TokenType.SLASH)
            # Ignore whitespace.
            case " " | "\r" | "\t":
                pass
            case "\n":
                self.line += 1
            case '"':
                self.string()
            case _:
                if self.is_digit(c):
                    self.number()
                # Either a variable name (orchid) or a reserved word (or)
                elif self.is_alpha(c):
                    self.identifier()
                else:
                    raise LexicalError(self.line, f"Unexpected character '{c}'.")

    def identifier(self) -> None:
        """Scan and match an alphanumeric "identifier".

        An identifier can either be a reserved keyword or an identifier for
        something within a Lox source. Both carry their text as the literal.

        Examples:
        print  -> Token(TokenType.PRINT,      "print",  "print",  1)
        foobar -> Token(TokenType.IDENTIFIER, "foobar", "foobar", 1)
        """

        while self.is_alpha_numeric(self.peek()):
            self.advance()

        text = self.source[self.start : self.current]

        # Only the complete word is looked up, so "classroom" stays an identifier.
        type = keyword(text)
        if type is None:
            type = TokenType.IDENTIFIER

        self.add_token(type, text)

    def number(self) -> None:
        """Scan and match a number.

        Examples:
        4   -> Token(TokenType.NUMBER, "4",   4.0, 1)
        4.2 -> Token(TokenType.NUMBER, "4.2", 4.2, 1)
        4.  -> Token(TokenType.NUMBER, "4",   4.0, 1), Token(TokenType.DOT, ".", None, 1)
        """

        while self.is_digit(self.peek()):
            self.advance()

        # Look for a fractional part and a digit after it (ie .5).
        if self.peek() == "." and self.is_digit(self.peek_next()):
            # Consume the "."
            self.advance()

            while self.is_digit(self.peek()):
                self.advance()

        self.add_token(TokenType.NUMBER, float(self.source[self.start : self.current]))

    def string(self) -> None:
        """Scan a Lox string.

        A scanned string in Lox is between double quotation marks, and can include
        newlines. The lexeme will contain the quotes, and the Token will include
        the body without quotes. Escape sequences are not processed.

        Examples:
        "foo"      -> Token(TokenType.STRING, '"foo"',      "foo",      1)
        "foo\nbar" -> Token(TokenType.STRING, '"foo\nbar"', "foo\nbar", 1)

        Raises:
            LexicalError: If the source ends before the closing quote.
        """

        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1

            self.advance()

        if self.is_at_end():
            raise LexicalError(self.line, "Unterminated string.")

        # The closing ".
        self.advance()

        value = self.source[self.start + 1 : self.current - 1]
        self.add_token(TokenType.STRING, value)

    def block_comment(self) -> None:
        """Skip a /* ... */ comment, the opening /* has already been consumed.

        Block comments do not nest, the first */ closes the comment.

        Raises:
            LexicalError: If the source ends before the closing */.
        """

        while not self.is_at_end():
            if self.peek() == "*" and self.peek_next() == "/":
                self.advance()
                self.advance()
                return

            if self.peek() == "\n":
                self.line += 1

            self.advance()

        raise LexicalError(self.line, "Unterminated multiline comment.")

    def advance(self) -> str:
        """Retrieve the char at the Scanner's current position, then advance it.

        Returns:
            char: str. Character at Scanner's position prior to advancement.
        """

        current = self.source[self.current]
        self.current += 1
        return current

    def match(self, expected: str) -> bool:
        """Check for a given char at the current index and consume it if found.

        This is used for scanning multi-character lexemes such as != and ==.

        Args:
            expected: str. Expected char.

        Returns:
            matched: bool. Whether or not the char at the current index matched
                the expected char.
        """

        if self.is_at_end():
            return False
        if self.source[self.current] != expected:
            return False

        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return "\0"

        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"

        return self.source[self.current + 1]

    def is_alpha(self, c: str) -> bool:
        """Check if a given char is ASCII alphabetic or underscore [a-zA-Z_]"""

        return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"

    def is_alpha_numeric(self, c: str) -> bool:
        return self.is_alpha(c) or self.is_digit(c)

    def is_digit(self, c: str) -> bool:
        """Check if a given char is an ASCII digit [0-9]"""

        return "0" <= c <= "9"

    def add_empty_token(self, type: TokenType) -> None:
        """Add a Token with no eagerly parsed Python literal.

        Args:
            type: TokenType. Type of Token being added.
        """

        self.add_token(type, None)

    def add_token(self, type: TokenType, literal: LiteralValue = None) -> None:
        """Add a Token.

        This will use the start and current indexes in the Scanner to create a
        substring which represents the lexeme for this Token. The Token is
        placed on the line where its lexeme started.

        Args:
            type: TokenType. Type of Token being added.
            literal: LiteralValue. Eagerly evaluated Python representation of the
                lexeme if any, otherwise None.
        """

        text = self.source[self.start : self.current]

        self.tokens.append(Token(type, text, literal, self.start_line))
