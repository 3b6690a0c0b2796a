#!/usr/bin/env python3
import sys

from loxscan.lexical_error import LexicalError


class Lox:
    """Lox error reporting control class.

    The Scanner raises a LexicalError rather than reporting it itself, so this
    class is only used at the command line boundary to show errors to the user
    and to remember that one happened.

    Public Attributes:
        had_error: bool. Whether or not an error was reported via Lox.report()
            while scanning a Lox source. The CLI exits with 65 if this is True.
    """

    had_error = False

    @classmethod
    def lexical_error(cls, error: LexicalError) -> None:
        """Report a LexicalError raised by the Scanner to the user.

        Args:
            error: LexicalError. Error raised while scanning.
        """

        cls.report(error.line, "", error.message)

    @classmethod
    def report(cls, line: int, where: str, message: str) -> None:
        """Report an error to the user.

        Args:
            line: int. Line number where the error was encountered while scanning.
            where: str. String representation of where on the line the error occurred.
            message: str. Error message for the user, printed to stderr.
        """

        print(f"[line {line}] Error{where}: {message}", file=sys.stderr)
        cls.had_error = True
