#!/usr/bin/env python3


class LexicalError(Exception):
    """Exception representing an error that was encountered while scanning.

    Lexical errors immediately stop the Scanner, no Tokens are returned for the
    source. The caller decides how to report them, the CLI does so through
    Lox.lexical_error().

    Args:
        line: int. Line in the source where the error was encountered.
        message: str. Error message with details.
    """

    def __init__(self, line: int, message: str) -> None:
        super().__init__(message)
        self.line = line
        self.message = message
