"""CLI entry point for javadoc-lexer.

Invoked as::

    javadoc-lexer [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m javadoc_lexer.cli.main

Commands
--------
tokens      Lex a comment and dump its tokens
check       Verify round-trip and tag balance of a comment
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from javadoc_lexer.grammar.tokens import Token

console = Console()
err_console = Console(stderr=True)


def _read_source(path: str) -> str:
    """Read a comment from a file (``-`` for stdin), exiting on error."""
    if path == "-":
        text = click.get_text_stream("stdin").read()
    else:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            err_console.print(f"[red]Error:[/red] File not found: {path}")
            sys.exit(1)
        except OSError as exc:
            err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
            sys.exit(1)
    # Files usually end with a newline after */ and may indent the comment.
    return text.strip()


def _kind_color(kind_name: str) -> str:
    """Map a TokenKind name to a Rich color string."""
    if kind_name in ("BEGIN_JAVADOC", "END_JAVADOC"):
        return "magenta"
    if kind_name == "FOOTER_JAVADOC_TAG_START":
        return "green"
    if kind_name in ("WHITESPACE", "FORCED_NEWLINE"):
        return "dim"
    if kind_name == "LITERAL":
        return "white"
    return "cyan"


def _tokens_table(tokens: list[Token], title: str) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", min_width=12)
    table.add_column("Text")
    for index, token in enumerate(tokens):
        color = _kind_color(token.kind.name)
        # Text() keeps tag-like content such as "[b]" from being read as markup.
        table.add_row(str(index), Text(token.kind.name, style=color), Text(repr(token.text)))
    return table


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="javadoc-lexer")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log lexer diagnostics")
def cli(verbose: bool) -> None:
    """Lossless tokenizer for Javadoc-style documentation comments."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from javadoc_lexer import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]javadoc-lexer[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# tokens command
# ---------------------------------------------------------------------------


@cli.command(name="tokens")
@click.argument("file", type=click.Path(exists=False, allow_dash=True))
@click.option("--raw", is_flag=True, default=False, help="Skip the literal-joining pass")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def tokens_command(file: str, raw: bool, output_format: str, output: str | None) -> None:
    """Lex a Javadoc comment and dump its tokens.

    FILE holds a single comment starting with /** and ending with */.
    Use - to read from stdin.
    """
    from javadoc_lexer import JavadocLexError, lex, lex_raw
    from javadoc_lexer.serializer import TokenSerializer

    source = _read_source(file)
    try:
        tokens = lex_raw(source) if raw else lex(source)
    except JavadocLexError as exc:
        err_console.print(f"[red]Lex error[/red] in {file}: {exc}")
        sys.exit(1)

    output_format = output_format.lower()
    if output_format == "table":
        if output:
            err_console.print("[red]Error:[/red] --output requires --format json or yaml")
            sys.exit(1)
        console.print(_tokens_table(tokens, title=f"Tokens: {file}"))
        console.print(f"\n[bold]{len(tokens)}[/bold] token(s)")
        return

    serializer = TokenSerializer()
    if output_format == "json":
        text = serializer.to_json(tokens, indent=2)
    else:
        text = serializer.to_yaml(tokens)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Tokens written to[/green] {output}")
    else:
        console.print(Syntax(text, output_format, line_numbers=False))


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("file", type=click.Path(exists=False, allow_dash=True))
def check_command(file: str) -> None:
    """Verify that a comment lexes losslessly and its regions are closed.

    FILE holds a single comment starting with /** and ending with */.
    Exits with status 1 if the round-trip fails or an inline tag,
    <pre> or <table> is left open.
    """
    from javadoc_lexer import JavadocLexError, Lexer, detokenize, join_adjacent_literals

    source = _read_source(file)
    try:
        lexer = Lexer(source)
        raw_tokens = list(lexer.raw_tokens())
    except JavadocLexError as exc:
        err_console.print(f"[red]Lex error[/red] in {file}: {exc}")
        sys.exit(1)
    joined = join_adjacent_literals(raw_tokens)

    problems: list[str] = []
    if detokenize(raw_tokens) != source:
        problems.append("raw tokens do not reproduce the input")
    for name, depth in (
        ("inline tag", lexer.brace_depth),
        ("<pre>", lexer.pre_depth),
        ("<table>", lexer.table_depth),
    ):
        if depth:
            problems.append(f"{depth} unclosed {name}")

    table = Table(show_header=False, box=None)
    table.add_row("Raw tokens", str(len(raw_tokens)))
    table.add_row("Joined tokens", str(len(joined)))
    table.add_row(
        "Joined whitespace",
        "[green]unchanged[/green]" if detokenize(joined) == source else "[yellow]collapsed[/yellow]",
    )
    console.print(table)

    if problems:
        for problem in problems:
            console.print(f"[red]FAIL[/red] {file}: {problem}")
        sys.exit(1)
    console.print(f"[green]OK[/green] {file}")


if __name__ == "__main__":
    cli()
