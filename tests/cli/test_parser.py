"""Tests for the shell command parser."""

import pytest

from docrag.cli.parser import CommandParser, CommandType


class TestCommandParser:
    """Tests for CommandParser."""

    @pytest.fixture
    def parser(self) -> CommandParser:
        return CommandParser()

    # Explicit commands
    def test_parse_add(self, parser: CommandParser) -> None:
        result = parser.parse("add notes ./notes.md")
        assert result.type == CommandType.ADD
        assert result.args == ["notes", "./notes.md"]

    def test_parse_add_alias(self, parser: CommandParser) -> None:
        assert parser.parse("load notes ./notes.md").type == CommandType.ADD

    def test_parse_query(self, parser: CommandParser) -> None:
        result = parser.parse("ask what is python")
        assert result.type == CommandType.QUERY
        assert result.args == ["what", "is", "python"]

    @pytest.mark.parametrize("text", ["list", "ls", "docs"])
    def test_parse_list_aliases(self, parser: CommandParser, text: str) -> None:
        assert parser.parse(text).type == CommandType.LIST

    @pytest.mark.parametrize("text", ["remove notes", "rm notes", "delete notes"])
    def test_parse_remove_aliases(self, parser: CommandParser, text: str) -> None:
        result = parser.parse(text)
        assert result.type == CommandType.REMOVE
        assert result.args == ["notes"]

    def test_parse_config(self, parser: CommandParser) -> None:
        assert parser.parse("settings").type == CommandType.CONFIG

    @pytest.mark.parametrize("text", ["help", "?", "HELP"])
    def test_parse_help(self, parser: CommandParser, text: str) -> None:
        assert parser.parse(text).type == CommandType.HELP

    @pytest.mark.parametrize("text", ["quit", "exit", "q"])
    def test_parse_quit(self, parser: CommandParser, text: str) -> None:
        assert parser.parse(text).type == CommandType.QUIT

    # Slash commands
    def test_slash_command(self, parser: CommandParser) -> None:
        result = parser.parse("/rm notes")
        assert result.type == CommandType.REMOVE
        assert result.args == ["notes"]
        assert result.raw == "/rm notes"

    def test_unknown_slash_command(self, parser: CommandParser) -> None:
        result = parser.parse("/frobnicate now")
        assert result.type == CommandType.UNKNOWN
        assert result.args == ["frobnicate", "now"]

    def test_bare_slash(self, parser: CommandParser) -> None:
        assert parser.parse("/").type == CommandType.UNKNOWN

    # Natural language
    def test_question_becomes_query(self, parser: CommandParser) -> None:
        result = parser.parse("How does the embedder batch texts?")
        assert result.type == CommandType.QUERY
        assert result.args == ["How does the embedder batch texts?"]
        assert result.flags == {}

    def test_empty_input(self, parser: CommandParser) -> None:
        result = parser.parse("   ")
        assert result.type == CommandType.UNKNOWN
        assert result.raw == ""

    # Flags
    def test_value_flags(self, parser: CommandParser) -> None:
        result = parser.parse("query python -D notes --num-chunks 3")
        assert result.args == ["python"]
        assert result.flag("document", "D") == "notes"
        assert result.flag("num-chunks", "n") == "3"

    def test_equals_flag(self, parser: CommandParser) -> None:
        result = parser.parse("add notes --chunk-size=512 ./notes.md")
        assert result.flags["chunk-size"] == "512"
        assert result.args == ["notes", "./notes.md"]

    def test_boolean_flag_does_not_consume_next_word(self, parser: CommandParser) -> None:
        result = parser.parse("query --raw what is java")
        assert result.flag("raw", "r") is True
        assert result.args == ["what", "is", "java"]

    def test_text_flag_keeps_words_positional(self, parser: CommandParser) -> None:
        result = parser.parse("add notes -t Python is great")
        assert result.flag("text", "t") is True
        assert result.args == ["notes", "Python", "is", "great"]

    def test_combined_short_flags(self, parser: CommandParser) -> None:
        result = parser.parse("rm -rf notes")
        assert result.flags == {"r": True, "f": True}
        assert result.args == ["notes"]

    def test_trailing_value_flag_is_boolean(self, parser: CommandParser) -> None:
        result = parser.parse("query python --document")
        assert result.flags["document"] is True

    def test_missing_flag(self, parser: CommandParser) -> None:
        assert parser.parse("list").flag("raw") is None
