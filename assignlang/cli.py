"""Command line entry point: ``assignlang run FILE`` and ``assignlang tokens FILE``."""

import sys
import time

import typer

from assignlang.error.error import InterpreterException
from assignlang.interpreter import execute
from assignlang.scanner.scanner import Scanner

app = typer.Typer(
    help="Evaluate programs made of integer assignments.",
    no_args_is_help=True,
    add_completion=False,
)


def read_source(file: str) -> str:
    """Read the program from `file`, or from standard input when `file` is "-".

    Exits with code 1 if the file cannot be read.
    """
    if file == "-":
        return sys.stdin.read()
    try:
        with open(file, "r", encoding="utf8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError):
        typer.echo(f"Bad source file. Unable to read from: {file}", err=True)
        raise typer.Exit(code=1)


def report(exception: InterpreterException, context: bool, color: bool) -> None:
    typer.echo(str(exception), err=True)
    if context:
        typer.echo(exception.error.context(color=color), err=True)


@app.command()
def run(
    file: str = typer.Argument(..., help="Source file to run, or '-' for standard input."),
    timing: bool = typer.Option(False, "--time", help="Report how long the run took."),
    context: bool = typer.Option(
        False, "--context/--no-context", help="Show the source lines around an error."
    ),
    color: bool = typer.Option(True, "--color/--no-color", help="Highlight errors in color."),
) -> None:
    """Run a program, printing every variable as it is assigned."""
    program = read_source(file)

    start = time.perf_counter()
    try:
        execute(program, {}, typer.echo)
    except InterpreterException as e:
        report(e, context, color)
        raise typer.Exit(code=1)
    end = time.perf_counter()

    if timing:
        typer.echo(f"Successfully Executed: Took {int((end - start) * 1000)} ms.")


@app.command()
def tokens(
    file: str = typer.Argument(..., help="Source file to scan, or '-' for standard input."),
    context: bool = typer.Option(
        False, "--context/--no-context", help="Show the source lines around an error."
    ),
    color: bool = typer.Option(True, "--color/--no-color", help="Highlight errors in color."),
) -> None:
    """Print the tokens of a program, one per line."""
    program = read_source(file)

    try:
        scanned = Scanner(program).scan()
    except InterpreterException as e:
        report(e, context, color)
        raise typer.Exit(code=1)

    for token in scanned:
        typer.echo(
            f"{token.type.name:<9} {token.text!r:<12} {token.span.start_ln}:{token.span.start_col + 1}"
        )


def main() -> None:
    app(prog_name="assignlang")
