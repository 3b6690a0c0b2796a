#!/usr/bin/env python3
import sys
from pathlib import Path
from typing import List, Optional

from loxscan.lexical_error import LexicalError
from loxscan.lox import Lox
from loxscan.scanner import Scanner
from loxscan.token import Token


def main(argv: Optional[List[str]] = None) -> None:
    """Main entrypoint for the Lox scanner.

    This function is invoked if this __init__.py is executed directly, or via
    the loxscan CLI entrypoint.

    With no arguments it will start an interactive prompt which prints the Tokens
    of each line entered.

    If the argument is a file, its Tokens will be printed.

    Otherwise, the following commands are provided:
    loxscan scan_prompt <- Run the interactive prompt
    loxscan scan <source_or_stdin> <- Scan a source string, - for stdin.
    loxscan scan_file <file> <- Scan a Lox source at a given path.
    """

    if argv is None:
        argv = sys.argv

    # First argument in argv is always the script itself in Python
    if len(argv) == 2:
        if argv[1] == "scan_prompt":
            scan_prompt()
            return

        scan_file(argv[1])
    elif len(argv) == 3:
        command = argv[1]
        match command:
            case "scan":
                source = argv[2]
                if source == "-":
                    try:
                        source = sys.stdin.read()
                    except KeyboardInterrupt:
                        return

                scan(source)
            case "scan_file":
                scan_file(argv[2])
            case _:
                print(f"unrecognized command: {command}", file=sys.stderr)
                sys.exit(66)
    elif len(argv) > 3:
        print("Usage: loxscan [command] [script]")
        sys.exit(64)
    else:
        scan_prompt()

    # Indicate an error in the exit code.
    if Lox.had_error:
        sys.exit(65)


def scan_file(path: str) -> None:
    script_path = Path(path)
    if not script_path.exists():
        print(f"File at {script_path} not found", file=sys.stderr)
        sys.exit(66)

    scan(script_path.read_text())


def scan_prompt() -> None:
    try:
        while True:
            line = input("> ")

            if not line:
                break

            scan(line)

            # Reset error flag since this is an interactive session.
            Lox.had_error = False
    except (KeyboardInterrupt, EOFError):
        return


def scan(source: str) -> List[Token]:
    """Scan a source and print each Token on its own line.

    A LexicalError is reported to the user instead of being raised, and no
    Tokens are printed for the source.

    Returns:
        tokens: List[Token]. The scanned Tokens, empty if there was an error.
    """

    try:
        tokens = Scanner(source).scan_tokens()
    except LexicalError as error:
        Lox.lexical_error(error)
        return []

    for token in tokens:
        print(token.to_string())

    return tokens


if __name__ == "__main__":
    main()
