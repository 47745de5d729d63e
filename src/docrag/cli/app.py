# src/docrag/cli/app.py
"""Command-line interface for docrag.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer), prompting for anything missing
2. Creates progress callbacks (for Rich display)
3. Calls commands module functions
4. Renders results with Rich
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from docrag import __version__
from docrag.cli.parser import CommandParser, CommandType, ParsedCommand
from docrag.commands import (
    AddResult,
    ConfirmRequest,
    ProgressUpdate,
    QueryResult,
    add,
    config_cmd,
    list_cmd,
    query,
    remove,
)
from docrag.config import load_env_file

app = typer.Typer(
    name="docrag",
    help="docrag - ask questions about your documents.",
    no_args_is_help=True,
)
console = Console()

SOURCE_CHOICES = ["URL", "File", "Sample essay"]
ALL_DOCUMENTS = "All documents"


def version_callback(value: bool) -> None:
    if value:
        console.print(f"docrag {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    if not verbose:
        # litellm and httpx are chatty at INFO
        for name in ("LiteLLM", "httpx"):
            logging.getLogger(name).setLevel(logging.WARNING)


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show debug logging.",
    ),
) -> None:
    """docrag - ask questions about your documents."""
    setup_logging(verbose)
    load_env_file()


def _choose(message: str, choices: list[str]) -> str:
    """Prompt for one of a numbered list of choices."""
    for i, choice in enumerate(choices, 1):
        console.print(f"  [cyan]{i}[/cyan]) {choice}")
    while True:
        answer = typer.prompt(message, default="1").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1]
        if answer in choices:
            return answer
        console.print(f"[red]Choose a number between 1 and {len(choices)}[/red]")


def _error(message: str | None) -> None:
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


# Add


def _run_add(
    name: str,
    location: str | None,
    text: str | None,
    essay: bool,
    chunk_size: int | None,
    data_dir: str | None,
    config_file: str | None,
) -> AddResult:
    """Run the add command, with a progress bar when attached to a terminal."""
    kwargs = dict(
        name=name,
        location=location,
        text=text,
        essay=essay,
        chunk_size=chunk_size,
        data_dir=data_dir,
        config_path=config_file,
    )
    if not console.is_terminal:
        return add.add(**kwargs)

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold]{task.fields[stage]:>10}", justify="right"),
        BarColumn(bar_width=20),
        TextColumn("{task.description}", style="dim"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("", total=None, stage="")

        def on_progress(update: ProgressUpdate) -> None:
            progress.update(
                task,
                stage=update.stage.value,
                description=update.message or "",
                total=None if update.total <= 1 else update.total,
                completed=update.current,
            )

        return add.add(**kwargs, on_progress=on_progress)


def _render_add_result(result: AddResult) -> None:
    if not result.success:
        _error(result.error)
    verb = "Replaced" if result.replaced else "Added"
    console.print(
        f"[green]{verb} [bold]{result.name}[/bold]: "
        f"{result.chunks} chunks from {result.characters:,} characters[/green]"
    )
    if result.source and result.source != "text":
        console.print(f"[dim]Source: {result.source}[/dim]")


@app.command(name="add")
def add_cmd(
    url: str = typer.Option(None, "--url", "-u", help="Fetch the document from a URL"),
    file: str = typer.Option(None, "--file", "-f", help="Read the document from a file"),
    essay: bool = typer.Option(False, "--essay", help="Use the sample essay"),
    text: str = typer.Option(None, "--text", "-t", help="Use the given text as the document"),
    name: str = typer.Option(None, "--name", "-n", help="Name to store the document under"),
    chunk_size: int = typer.Option(
        None, "--chunk-size", "-s", help="Maximum characters per chunk (default: from settings)"
    ),
    data_dir: str = typer.Option(
        None, "--data-dir", "-d", help="Data directory (default: from settings)"
    ),
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """Add a document from a URL, a file or the sample essay."""
    given = [s for s in (url, file, text) if s is not None] + (["essay"] if essay else [])
    if len(given) > 1:
        _error("Use only one of --url, --file, --text or --essay")

    if not given:
        choice = _choose("Source", SOURCE_CHOICES)
        if choice == "URL":
            url = typer.prompt("URL")
        elif choice == "File":
            file = typer.prompt("File path")
        else:
            essay = True

    if not name:
        default_name = "essay" if essay else None
        name = typer.prompt("Document name", default=default_name)

    result = _run_add(
        name=name,
        location=url or file,
        text=text,
        essay=essay,
        chunk_size=chunk_size,
        data_dir=data_dir,
        config_file=config_file,
    )
    _render_add_result(result)


# List


@app.command(name="list")
def list_cmd_handler(
    data_dir: str = typer.Option(
        None, "--data-dir", "-d", help="Data directory (default: from settings)"
    ),
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """List stored documents."""
    result = list_cmd.list_documents(data_dir=data_dir, config_path=config_file)

    if not result.success:
        _error(result.error)

    if not result.documents:
        console.print("[dim]No documents yet. Add one with 'docrag add'.[/dim]")
        return

    table = Table(title=f"Documents ({len(result.documents)})")
    table.add_column("Name", style="cyan")
    table.add_column("Chunks", justify="right")
    table.add_column("Characters", justify="right")
    table.add_column("Source", style="dim")
    table.add_column("Added", style="dim")

    for doc in result.documents:
        table.add_row(
            doc.name,
            str(doc.chunk_count),
            f"{doc.text_length:,}",
            doc.source or "",
            doc.created_at.strftime("%Y-%m-%d %H:%M") if doc.created_at else "",
        )

    console.print(table)


# Query


def _render_query_result(result: QueryResult) -> None:
    if not result.success:
        _error(result.error)

    if not result.results:
        console.print("[yellow]No results found.[/yellow]")
        return

    if result.answer:
        console.print(Panel(Markdown(result.answer), title="Answer", border_style="green"))
        console.print()

    console.print("[bold]Sources:[/bold]")
    for i, r in enumerate(result.results, 1):
        console.print(
            f"  [{i}] [cyan]{r.document}[/cyan] chunk {r.index} "
            f"[dim](score: {r.score:.3f})[/dim]"
        )
        preview = r.content[:100].replace("\n", " ")
        if len(r.content) > 100:
            preview += "..."
        console.print(f"      [dim]{preview}[/dim]")


@app.command(name="query")
def query_cmd(
    question: str = typer.Argument(None, help="Question to ask"),
    document: str = typer.Option(
        None, "--document", "-D", help="Document to search (default: all documents)"
    ),
    num_chunks: int = typer.Option(
        None, "--num-chunks", "-n", help="Number of chunks to retrieve (default: from settings)"
    ),
    raw: bool = typer.Option(
        False, "--raw", "-r", help="Show retrieved chunks without LLM synthesis"
    ),
    data_dir: str = typer.Option(
        None, "--data-dir", "-d", help="Data directory (default: from settings)"
    ),
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """Ask a question about one document or all of them."""
    if not question:
        if document is None:
            names = [
                doc.name
                for doc in list_cmd.list_documents(
                    data_dir=data_dir, config_path=config_file
                ).documents
            ]
            if names:
                choice = _choose("Document", [ALL_DOCUMENTS, *names])
                document = None if choice == ALL_DOCUMENTS else choice
        question = typer.prompt("Question")

    result = query.query(
        question=question,
        document=document,
        k=num_chunks,
        raw=raw,
        data_dir=data_dir,
        config_path=config_file,
    )
    _render_query_result(result)


# Remove


@app.command(name="remove")
def remove_cmd(
    name: str = typer.Argument(..., help="Name of the document to remove"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
    data_dir: str = typer.Option(
        None, "--data-dir", "-d", help="Data directory (default: from settings)"
    ),
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """Remove a document and all its chunks."""

    def cli_confirm(request: ConfirmRequest) -> bool:
        if request.details:
            console.print(f"[yellow]{request.details}[/yellow]")
        return typer.confirm(request.message)

    result = remove.remove(
        name=name,
        data_dir=data_dir,
        config_path=config_file,
        on_confirm=None if force else cli_confirm,
    )

    if not result.success:
        if result.error == "Cancelled.":
            console.print("Cancelled.")
            return
        _error(result.error)

    console.print(f"[green]Removed {result.name} ({result.chunks_removed} chunks)[/green]")


# Config


@app.command(name="config")
def config_cmd_handler(
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(config_path=config_file)

    if not result.success:
        _error(result.error)

    table = Table(title="docrag Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    table.add_row("provider", result.provider, "yaml" if result.config_path else "default")
    table.add_row("llm_model", result.llm_model or "", "")
    table.add_row("embedding_model", result.embedding_model or "", "")
    table.add_row("data_dir", result.data_dir, "")
    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    console.print(table)
    if result.config_path:
        console.print(f"[dim]Config file: {result.config_path}[/dim]")
    else:
        console.print("[dim]No config file found; using defaults.[/dim]")


# Interactive shell

SHELL_HELP = """\
[bold]Commands[/bold]
  add NAME PATH_OR_URL       Add a document (also: add NAME --essay, add NAME --text ...)
  list                       List documents
  query [-d DOC] [-n K] Q    Ask a question (anything else is also treated as a question)
  remove NAME [-f]           Remove a document
  config                     Show configuration
  help                       Show this help
  exit                       Leave the shell"""


def _int_flag(value: str | bool | None) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except ValueError:
        console.print(f"[red]Not a number: {value}[/red]")
        raise typer.Exit(1) from None


def _dispatch(command: ParsedCommand, data_dir: str | None, config_file: str | None) -> bool:
    """Run one shell command. Returns False when the shell should exit."""
    if command.type == CommandType.QUIT:
        return False

    if command.type == CommandType.HELP:
        console.print(SHELL_HELP)
    elif command.type == CommandType.LIST:
        list_cmd_handler(data_dir=data_dir, config_file=config_file)
    elif command.type == CommandType.CONFIG:
        config_cmd_handler(config_file=config_file)
    elif command.type == CommandType.ADD:
        if not command.args:
            console.print("[yellow]Usage: add NAME PATH_OR_URL[/yellow]")
            return True
        as_text = bool(command.flag("text", "t"))
        result = _run_add(
            name=command.args[0],
            location=command.args[1] if len(command.args) > 1 and not as_text else None,
            text=" ".join(command.args[1:]) if as_text else None,
            essay=bool(command.flag("essay", "e")),
            chunk_size=_int_flag(command.flag("chunk-size", "s")),
            data_dir=data_dir,
            config_file=config_file,
        )
        _render_add_result(result)
    elif command.type == CommandType.QUERY:
        question = " ".join(command.args)
        if not question:
            console.print("[yellow]Usage: query QUESTION[/yellow]")
            return True
        document = command.flag("document", "d")
        result = query.query(
            question=question,
            document=document if isinstance(document, str) else None,
            k=_int_flag(command.flag("num-chunks", "n")),
            raw=bool(command.flag("raw", "r")),
            data_dir=data_dir,
            config_path=config_file,
        )
        _render_query_result(result)
    elif command.type == CommandType.REMOVE:
        if not command.args:
            console.print("[yellow]Usage: remove NAME[/yellow]")
            return True
        remove_cmd(
            name=command.args[0],
            force=bool(command.flag("force", "f")),
            data_dir=data_dir,
            config_file=config_file,
        )
    else:
        console.print(f"[yellow]Unknown command: {command.raw}. Type 'help'.[/yellow]")

    return True


@app.command(name="interactive")
def interactive_cmd(
    data_dir: str = typer.Option(
        None, "--data-dir", "-d", help="Data directory (default: from settings)"
    ),
    config_file: str = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """Start an interactive shell."""
    parser = CommandParser()
    console.print(f"[bold]docrag {__version__}[/bold] - type 'help' for commands, 'exit' to quit.")

    while True:
        try:
            line = typer.prompt("docrag", prompt_suffix="> ", default="", show_default=False)
        except typer.Abort:
            console.print()
            break

        command = parser.parse(line)
        if command.type == CommandType.UNKNOWN and not command.raw:
            continue

        try:
            if not _dispatch(command, data_dir, config_file):
                break
        except typer.Exit:
            # Errors are already printed; keep the shell running
            continue

    console.print("[dim]Bye.[/dim]")
