#!/usr/bin/env python3
"""
minigrep.py

Search a file line by line and print only the lines that contain a given
substring.

    minigrep <query> <filename>

Set CASE_INSENSITIVE (any value, also in a .env file) to ignore case.
"""
import os
import sys
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv


class ConfigError(ValueError):
    """Missing or invalid command-line arguments."""


@dataclass(frozen=True)
class Config:
    query: str
    filename: str
    case_sensitive: bool = True

    @classmethod
    def from_args(cls, args, environ=None) -> "Config":
        """Builds a Config from an argv-like sequence (argv[0] is the program name)."""
        if environ is None:
            environ = os.environ
        args = iter(args)
        next(args, None)

        query = next(args, None)
        if query is None:
            raise ConfigError("Didn't get a query string")

        filename = next(args, None)
        if filename is None:
            raise ConfigError("Didn't get a file name")

        # Presence is enough, even CASE_INSENSITIVE="" turns matching case-insensitive
        case_sensitive = "CASE_INSENSITIVE" not in environ

        return cls(query=query, filename=filename, case_sensitive=case_sensitive)


def lines(contents: str):
    """Yields the lines of contents without their terminators ("\\n" or "\\r\\n")."""
    if not contents:
        return
    *terminated, tail = contents.split("\n")
    for line in terminated:
        yield line[:-1] if line.endswith("\r") else line
    # An unterminated last line keeps a bare "\r"
    if tail:
        yield tail


def search(query: str, contents: str) -> list:
    """
    Case-sensitive line-by-line search.

    >>> search("le", "Example text with\\nmultiple lines\\nand some matches\\nto our query.")
    ['Example text with', 'multiple lines']
    """
    return [line for line in lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list:
    """
    Case-insensitive line-by-line search. Both sides are lowered with str.lower().

    >>> search_case_insensitive("LE", "Example text with\\nmultiple lines\\nand some matches\\nto our query.")
    ['Example text with', 'multiple lines']
    """
    query = query.lower()
    return [line for line in lines(contents) if query in line.lower()]


def run(config: Config, out=None) -> None:
    """Reads the whole file, searches it and prints the matching lines.

    OSError and UnicodeDecodeError are left to the caller.
    """
    if out is None:
        out = sys.stdout

    # newline="" so that only "\n" (and "\r\n") split lines, as in lines()
    with open(config.filename, encoding="utf-8", newline="") as fh:
        contents = fh.read()

    if config.case_sensitive:
        results = search(config.query, contents)
    else:
        results = search_case_insensitive(config.query, contents)

    for line in results:
        print(line, file=out)


def load_env() -> None:
    """Loads .env from the script directory first, then the current directory."""
    script_dir_env = pathlib.Path(__file__).parent / ".env"
    current_dir_env = pathlib.Path.cwd() / ".env"

    # Variables already set in the shell win over .env
    if script_dir_env.is_file():
        load_dotenv(dotenv_path=script_dir_env)
    elif current_dir_env.is_file():
        load_dotenv(dotenv_path=current_dir_env)
    else:
        load_dotenv()


def main(argv=None) -> int:
    load_env()

    try:
        config = Config.from_args(sys.argv if argv is None else argv)
    except ConfigError as err:
        print(f"Problem parsing arguments: {err}", file=sys.stderr)
        return 1

    try:
        run(config)
    except (OSError, UnicodeDecodeError) as err:
        print(f"Application error: {err}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
