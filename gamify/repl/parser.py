"""
FILE: gamify/repl/parser.py
PURPOSE: Parse user input into commands and arguments for the REPL
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
DEPENDENCIES:
  - shlex (for shell-like parsing with quotes)
  - dataclasses (for ParseResult)
  - typing (type hints)
NOTES:
  - Handles quoted strings: add "Read a book"
  - Long flags: --category special, --json
  - Known short flags expand to long ones: -c high -> category=high
  - Case-insensitive command names, case-preserving args
"""

import shlex
from dataclasses import dataclass, field
from typing import List, Dict


# Short flag -> long flag name
SHORT_FLAGS = {
    "c": "category",
}


@dataclass
class ParseResult:
    """
    Result of parsing a REPL command.

    Attributes:
        command: The command name (e.g., "add", "done", "tab")
        args: Positional arguments (e.g., ["Read", "a", "book"])
        flags: Flag arguments as dict (e.g., {"category": "special"})
        raw_input: Original input string
    """
    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, str | bool] = field(default_factory=dict)
    raw_input: str = ""

    @property
    def text(self) -> str:
        """Positional args joined back into a single name."""
        return " ".join(self.args)


def _flag_name(token: str):
    if token.startswith("--") and len(token) > 2:
        return token[2:]
    if token.startswith("-") and token[1:] in SHORT_FLAGS:
        return SHORT_FLAGS[token[1:]]
    return None


def parse_command(input_str: str) -> ParseResult:
    """
    Parse REPL input into command, args, and flags.

    Examples:
        >>> parse_command("add Read a book")
        ParseResult(command="add", args=["Read", "a", "book"], flags={})

        >>> parse_command('add "Slay the dragon" -c high')
        ParseResult(command="add", args=["Slay the dragon"], flags={"category": "high"})

        >>> parse_command("tab 2")
        ParseResult(command="tab", args=["2"], flags={})

    Notes:
        - Unclosed quotes fall back to whitespace splitting
        - A flag followed by another flag (or nothing) is boolean True
        - Empty input returns command="" with no args/flags
    """
    input_str = input_str.strip()
    if not input_str:
        return ParseResult(command="", raw_input=input_str)

    try:
        tokens = shlex.split(input_str)
    except ValueError:
        tokens = input_str.split()

    if not tokens:
        return ParseResult(command="", raw_input=input_str)

    command = tokens[0].lower()
    args: List[str] = []
    flags: Dict[str, str | bool] = {}

    i = 1
    while i < len(tokens):
        token = tokens[i]
        name = _flag_name(token)
        if name is None:
            args.append(token)
            i += 1
            continue

        if i + 1 < len(tokens) and _flag_name(tokens[i + 1]) is None:
            flags[name] = tokens[i + 1]
            i += 2
        else:
            flags[name] = True
            i += 1

    return ParseResult(command=command, args=args, flags=flags, raw_input=input_str)
