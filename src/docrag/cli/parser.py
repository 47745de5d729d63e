"""Command parser for the interactive shell."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class CommandType(Enum):
    """Types of commands."""

    ADD = auto()
    QUERY = auto()
    LIST = auto()
    REMOVE = auto()
    CONFIG = auto()
    HELP = auto()
    QUIT = auto()
    UNKNOWN = auto()


@dataclass
class ParsedCommand:
    """A parsed command with its arguments."""

    type: CommandType
    args: list[str]
    raw: str
    flags: dict[str, str | bool]

    def flag(self, *names: str) -> str | bool | None:
        """Return the first flag set under any of the given names."""
        for name in names:
            if name in self.flags:
                return self.flags[name]
        return None


class CommandParser:
    """Parse a line of shell input into a command.

    Anything that isn't a known command is treated as a question.
    """

    ALIASES: dict[str, CommandType] = {
        "add": CommandType.ADD,
        "load": CommandType.ADD,
        "query": CommandType.QUERY,
        "ask": CommandType.QUERY,
        "list": CommandType.LIST,
        "ls": CommandType.LIST,
        "docs": CommandType.LIST,
        "remove": CommandType.REMOVE,
        "rm": CommandType.REMOVE,
        "delete": CommandType.REMOVE,
        "config": CommandType.CONFIG,
        "settings": CommandType.CONFIG,
        "help": CommandType.HELP,
        "?": CommandType.HELP,
        "quit": CommandType.QUIT,
        "exit": CommandType.QUIT,
        "q": CommandType.QUIT,
    }

    # Flags that never take a value
    BOOLEAN_FLAGS = {"raw", "r", "force", "f", "essay", "e", "text", "t"}

    def parse(self, input_text: str) -> ParsedCommand:
        text = input_text.strip()
        if not text:
            return ParsedCommand(type=CommandType.UNKNOWN, args=[], raw=text, flags={})

        if text.startswith("/"):
            return self._parse_slash_command(text[1:])

        parts = text.split()
        first_word = parts[0].lower()

        if first_word in self.ALIASES:
            return self._parse_explicit_command(first_word, parts[1:], text)

        return ParsedCommand(type=CommandType.QUERY, args=[text], raw=text, flags={})

    def _parse_slash_command(self, text: str) -> ParsedCommand:
        """Parse a slash command like /help or /quit."""
        parts = text.split()
        if not parts:
            return ParsedCommand(type=CommandType.UNKNOWN, args=[], raw="/", flags={})
        cmd = parts[0].lower()

        if cmd in self.ALIASES:
            return self._parse_explicit_command(cmd, parts[1:], "/" + text)

        return ParsedCommand(type=CommandType.UNKNOWN, args=parts, raw="/" + text, flags={})

    def _parse_explicit_command(self, cmd: str, args: list[str], raw: str) -> ParsedCommand:
        """Split arguments into positionals and --long / -s flags."""
        cmd_type = self.ALIASES[cmd]
        flags: dict[str, str | bool] = {}
        positional_args: list[str] = []

        i = 0
        while i < len(args):
            arg = args[i]
            if arg.startswith("--"):
                key = arg[2:]
                if "=" in key:
                    k, v = key.split("=", 1)
                    flags[k] = v
                elif (
                    key not in self.BOOLEAN_FLAGS
                    and i + 1 < len(args)
                    and not args[i + 1].startswith("-")
                ):
                    flags[key] = args[i + 1]
                    i += 1
                else:
                    flags[key] = True
            elif arg.startswith("-") and len(arg) > 1:
                if len(arg) == 2:
                    key = arg[1]
                    if (
                        key not in self.BOOLEAN_FLAGS
                        and i + 1 < len(args)
                        and not args[i + 1].startswith("-")
                    ):
                        flags[key] = args[i + 1]
                        i += 1
                    else:
                        flags[key] = True
                else:
                    # -rf -> -r -f
                    for char in arg[1:]:
                        flags[char] = True
            else:
                positional_args.append(arg)
            i += 1

        return ParsedCommand(type=cmd_type, args=positional_args, raw=raw, flags=flags)
