"""Rich rendering for tokens, expression trees and evaluation outcomes."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from flatcalc.models import Binary, EvalOutcome, Literal, Node, Token, Unary


def format_result(outcome: EvalOutcome) -> str:
    """``"<expression> = <value>"`` on success, ``"Error: <message>"`` otherwise."""
    if outcome.ok:
        return f"{outcome.expression} = {outcome.value}"
    return f"Error: {outcome.error}"


def render_tokens(tokens: Sequence[Token], console: Console) -> None:
    """Render a token sequence as a table."""
    table = Table(title="Tokens", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Operation", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Raw", style="green")

    for i, token in enumerate(tokens):
        value = "--" if token.value is None else str(token.value)
        table.add_row(str(i), token.operation.name, value, escape(repr(token.raw)))

    console.print(table)


def _describe(node: Node) -> tuple[str, list[Node]]:
    """Label for ``node`` and the children to show under it.

    A run of negations is shown as one ``neg xN`` entry.
    """
    if isinstance(node, Literal):
        return f"[green]{node.value}[/green]", []
    if isinstance(node, Unary):
        depth = 0
        while isinstance(node, Unary):
            depth += 1
            node = node.operand
        label = "neg" if depth == 1 else f"neg x{depth}"
        return f"[yellow]{label}[/yellow]", [node]
    if isinstance(node, Binary):
        return f"[bold cyan]{node.operator.value}[/bold cyan]", [node.left, node.right]
    raise TypeError(f"not an expression node: {node!r}")


def build_tree(node: Node) -> Tree:
    """Build a rich Tree mirroring the AST rooted at ``node``."""
    label, children = _describe(node)
    root = Tree(label)
    pending = [(root, children)]
    while pending:
        branch, children = pending.pop()
        for child in children:
            label, grandchildren = _describe(child)
            pending.append((branch.add(label), grandchildren))
    return root


def render_tree(node: Node, console: Console) -> None:
    console.print(build_tree(node))


def render_outcomes(outcomes: Sequence[EvalOutcome], console: Console) -> None:
    """Render a results table followed by a pass/fail summary line."""
    if not outcomes:
        console.print("[yellow]No expressions to evaluate.[/yellow]")
        return

    table = Table(title="Results", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Expression", min_width=16)
    table.add_column("Result", justify="right")
    table.add_column("Error", style="red")

    for i, outcome in enumerate(outcomes, 1):
        if outcome.ok:
            result = f"[green]{outcome.value}[/green]"
            error = ""
        else:
            result = f"[red]{outcome.verdict}[/red]"
            error = escape(f"{outcome.error_kind}: {outcome.error}")
        table.add_row(str(i), escape(outcome.expression), result, error)

    failed = sum(1 for o in outcomes if not o.ok)
    console.print()
    console.print(table)
    style = "green" if failed == 0 else "yellow"
    console.print(
        f"[{style}]{len(outcomes) - failed}/{len(outcomes)} evaluated, {failed} failed[/{style}]"
    )
