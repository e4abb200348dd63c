"""pgsl command-line entry point.

Usage:
    pgsl tokenize <schema>              Display the token stream (debug)
    pgsl --help                         Show this message
    pgsl --version                      Show the installed version

Options:
    --debug                             Log lexer activity to stderr

The .pgl extension on <schema> is optional and the path is relative to the
current directory.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from pgsl.lexer import tokenize


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    if "--debug" in args:
        args = [a for a in args if a != "--debug"]
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    if len(args) < 1:
        print(__doc__.strip())
        return 1

    command = args[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from pgsl import __version__
        print(f"pgsl {__version__}")
        return 0

    if command != "tokenize":
        print(f"Error: unknown command '{command}'")
        print(__doc__.strip())
        return 1

    if len(args) < 2:
        print(f"Error: command '{command}' requires a schema argument")
        return 1

    return _cmd_tokenize(args[1])


def _cmd_tokenize(schema: str) -> int:
    """Display the token stream."""
    try:
        stream = asyncio.run(tokenize(schema))
    except OSError as e:
        print(f"Error: cannot read {e.filename or schema}: {e.strerror or e}")
        return 1

    for tok in stream:
        print(tok)
    return 0


if __name__ == "__main__":
    sys.exit(main())
