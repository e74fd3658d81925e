"""CLI for flatcalc.

Usage:
    python -m flatcalc demo                        # Evaluate the demo expression
    python -m flatcalc eval "1 + 4 * -2"           # Evaluate one expression
    python -m flatcalc eval "1 + 3" --tree --json  # ...with the AST, as JSON
    python -m flatcalc tokens "4 + (12 / 2)"       # Show the token table
    python -m flatcalc tree "4 + (12 / 2)"         # Show the AST
    python -m flatcalc run expressions.txt         # Evaluate one per line
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.markup import escape

from flatcalc.environment import load_settings, make_console
from flatcalc.errors import ExpressionError
from flatcalc.parser import Parser
from flatcalc.render import format_result, render_outcomes, render_tokens, render_tree
from flatcalc.runner import evaluate_expression, evaluate_file
from flatcalc.scanner import Scanner

app = typer.Typer(
    name="flatcalc",
    help="Evaluate integer expressions where + - * / share one precedence level",
    no_args_is_help=True,
)


@app.command("demo")
def cmd_demo() -> None:
    """Evaluate the demo expression (FLATCALC_DEMO_EXPRESSION, default 5+6*6)."""
    settings = load_settings()
    outcome = evaluate_expression(settings.demo_expression)
    if not outcome.ok:
        console = make_console(settings, stderr=True)
        console.print(f"[red]Failed to evaluate {escape(outcome.expression)}[/red]")
        console.print(f"[red]{escape(format_result(outcome))}[/red]")
        raise typer.Exit(1)
    typer.echo(format_result(outcome))


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression to evaluate (e.g., '1 + 4 * -2')"),
    tree: bool = typer.Option(False, "--tree", "-t", help="Also print the expression tree"),
    as_json: bool = typer.Option(False, "--json", help="Print the outcome as JSON"),
) -> None:
    """Evaluate a single expression."""
    settings = load_settings()
    console = make_console(settings, stderr=True)

    parser = Parser()
    outcome = evaluate_expression(expression, parser)

    if as_json:
        typer.echo(json.dumps(outcome.to_dict(), indent=2))
    elif outcome.ok:
        typer.echo(format_result(outcome))
    else:
        console.print(f"[red]{escape(format_result(outcome))}[/red]")

    if outcome.ok and (tree or settings.show_tree):
        render_tree(parser.parse_tree(expression), make_console(settings))

    if not outcome.ok:
        raise typer.Exit(1)


@app.command("tokens")
def cmd_tokens(
    expression: str = typer.Argument(help="Expression to tokenise"),
) -> None:
    """Show the tokens the scanner extracts from an expression."""
    settings = load_settings()
    try:
        tokens = Scanner().tokenise(expression)
    except ExpressionError as e:
        make_console(settings, stderr=True).print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    render_tokens(tokens, make_console(settings))


@app.command("tree")
def cmd_tree(
    expression: str = typer.Argument(help="Expression to parse"),
) -> None:
    """Show the expression tree without evaluating it."""
    settings = load_settings()
    try:
        node = Parser().parse_tree(expression)
    except ExpressionError as e:
        make_console(settings, stderr=True).print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    render_tree(node, make_console(settings))


@app.command("run")
def cmd_run(
    path: Path = typer.Argument(help="Text file with one expression per line"),
    as_json: bool = typer.Option(False, "--json", help="Print outcomes as JSON"),
) -> None:
    """Evaluate every expression in a file. Blank lines and # comments are skipped."""
    settings = load_settings()
    console = make_console(settings, stderr=True)

    if not path.is_file():
        console.print(f"[red]No such file: {escape(str(path))}[/red]")
        raise typer.Exit(1)

    outcomes = evaluate_file(path)

    if as_json:
        typer.echo(json.dumps([o.to_dict() for o in outcomes], indent=2))
    else:
        render_outcomes(outcomes, make_console(settings))

    if any(not o.ok for o in outcomes):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
