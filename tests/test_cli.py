# tests/test_cli.py
"""Tests for the CLI."""

import os

import pytest
from typer.testing import CliRunner

from docrag.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def data_dir(clean_env, fake_litellm):
    return os.path.join(clean_env, "data")


class TestCliBasics:
    def test_help(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "docrag" in result.output.lower()

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestConfigCommand:
    def test_config_shows_settings(self, runner, clean_env):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "chunk_size" in result.output
        assert "default_k" in result.output
        assert "No config file found" in result.output


class TestAddCommand:
    def test_add_help(self, runner):
        result = runner.invoke(app, ["add", "--help"])
        assert result.exit_code == 0
        assert "--essay" in result.output

    def test_add_text(self, runner, data_dir):
        result = runner.invoke(
            app, ["add", "--text", "Python is great.", "--name", "notes", "-d", data_dir]
        )
        assert result.exit_code == 0, result.output
        assert "Added" in result.output
        assert "notes" in result.output

    def test_add_twice_replaces(self, runner, data_dir):
        args = ["add", "--text", "Python.", "--name", "notes", "-d", data_dir]
        runner.invoke(app, args)
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert "Replaced" in result.output

    def test_add_nonexistent_file(self, runner, data_dir):
        result = runner.invoke(
            app, ["add", "--file", "/nonexistent/file.md", "--name", "x", "-d", data_dir]
        )
        assert result.exit_code != 0
        assert "not found" in result.output.lower()

    def test_add_two_sources(self, runner, data_dir):
        result = runner.invoke(app, ["add", "--essay", "--text", "x", "-d", data_dir])
        assert result.exit_code != 0
        assert "only one" in result.output

    def test_add_prompts_for_source_and_name(self, runner, data_dir, clean_env):
        path = os.path.join(clean_env, "notes.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write("Java is verbose.")

        result = runner.invoke(app, ["add", "-d", data_dir], input=f"2\n{path}\nnotes\n")

        assert result.exit_code == 0, result.output
        assert "Added" in result.output


class TestListCommand:
    def test_list_empty(self, runner, data_dir):
        result = runner.invoke(app, ["list", "-d", data_dir])
        assert result.exit_code == 0
        assert "No documents yet" in result.output

    def test_list_documents(self, runner, data_dir):
        runner.invoke(app, ["add", "-t", "Python.", "-n", "notes", "-d", data_dir])
        result = runner.invoke(app, ["list", "-d", data_dir])
        assert result.exit_code == 0
        assert "notes" in result.output


class TestQueryCommand:
    def test_query_raw(self, runner, data_dir, fake_litellm):
        runner.invoke(app, ["add", "-t", "Python is great.", "-n", "notes", "-d", data_dir])

        result = runner.invoke(app, ["query", "python", "--raw", "-d", data_dir])

        assert result.exit_code == 0, result.output
        assert "Sources:" in result.output
        assert "Python is great." in result.output
        fake_litellm["completion"].assert_not_called()

    def test_query_with_answer(self, runner, data_dir):
        runner.invoke(app, ["add", "-t", "Python is great.", "-n", "notes", "-d", data_dir])

        result = runner.invoke(app, ["query", "python", "-d", data_dir])

        assert result.exit_code == 0, result.output
        assert "Mock answer." in result.output

    def test_query_empty_library(self, runner, data_dir):
        result = runner.invoke(app, ["query", "python", "-d", data_dir])
        assert result.exit_code == 0
        assert "No results found." in result.output

    def test_query_unknown_document(self, runner, data_dir):
        runner.invoke(app, ["add", "-t", "Python.", "-n", "notes", "-d", data_dir])
        result = runner.invoke(app, ["query", "python", "-D", "missing", "-d", data_dir])
        assert result.exit_code != 0
        assert "Document not found" in result.output


class TestRemoveCommand:
    def test_remove_force(self, runner, data_dir):
        runner.invoke(app, ["add", "-t", "Python.", "-n", "notes", "-d", data_dir])

        result = runner.invoke(app, ["remove", "notes", "--force", "-d", data_dir])

        assert result.exit_code == 0
        assert "Removed notes" in result.output

    def test_remove_cancelled(self, runner, data_dir):
        runner.invoke(app, ["add", "-t", "Python.", "-n", "notes", "-d", data_dir])

        result = runner.invoke(app, ["remove", "notes", "-d", data_dir], input="n\n")

        assert result.exit_code == 0
        assert "Cancelled." in result.output

    def test_remove_nonexistent(self, runner, data_dir):
        runner.invoke(app, ["add", "-t", "Python.", "-n", "notes", "-d", data_dir])
        result = runner.invoke(app, ["remove", "missing", "-f", "-d", data_dir])
        assert result.exit_code != 0
        assert "not found" in result.output.lower()


class TestInteractiveCommand:
    def test_help_then_exit(self, runner, data_dir):
        result = runner.invoke(app, ["interactive", "-d", data_dir], input="help\nexit\n")
        assert result.exit_code == 0
        assert "Commands" in result.output
        assert "Bye." in result.output

    def test_session(self, runner, data_dir):
        session = "add notes --text Python is great\nls\nask python -r\nrm notes -f\nq\n"

        result = runner.invoke(app, ["interactive", "-d", data_dir], input=session)

        assert result.exit_code == 0, result.output
        assert "Added" in result.output
        assert "Python is great" in result.output
        assert "Removed notes" in result.output

    def test_errors_keep_shell_running(self, runner, data_dir):
        result = runner.invoke(
            app, ["interactive", "-d", data_dir], input="rm missing -f\nexit\n"
        )
        assert result.exit_code == 0
        assert "not found" in result.output.lower()
        assert "Bye." in result.output

    def test_end_of_input_exits(self, runner, data_dir):
        result = runner.invoke(app, ["interactive", "-d", data_dir], input="")
        assert result.exit_code == 0
        assert "Bye." in result.output
