"""CLI entry point for genstack. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import sys

import click

from genstack.errors import StackError
from genstack.format import FormatOptions
from genstack.stack import Stack


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    default="warning",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Logging verbosity (default: warning)",
)
@click.pass_context
def main(ctx, log_level):
    """Exercise a generic LIFO stack from the command line."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
def demo():
    """Walk through the stack API on a handful of floats."""
    stack: Stack[float] = Stack.from_items([0.15, 1.5, 3.0])

    click.echo(stack.top())
    stack.top_ref().value = 3.14159

    click.echo(stack.pop())
    stack.pop()

    click.echo(stack.is_empty())
    click.echo(stack.has_items())
    click.echo(stack.length)
    click.echo(stack.capacity)

    stack.push(10.56)
    stack.push(20.99)
    click.echo(stack)

    options = FormatOptions(
        conversion=lambda item: f"{item:.1f}",
        start="(",
        separator=", ",
        end=")",
    )
    click.echo(stack.render(options))

    stack.clear()
    click.echo(stack)


@main.command()
@click.argument("items", nargs=-1)
@click.option("--start", default="[", help="Text written before the first item")
@click.option("--end", default="]", help="Text written after the last item")
@click.option("--sep", default=" ", help="Text written between items")
@click.option("--bottom-first", is_flag=True, help="Render from the bottom of the stack up")
@click.option("--precision", type=click.IntRange(min=0), default=None, help="Treat items as floats with N decimals")
@click.option("--pop", "pop_count", type=click.IntRange(min=0), default=0, help="Pop exactly N items before rendering")
def render(items, start, end, sep, bottom_first, precision, pop_count):
    """Push ITEMS in order and print the rendered stack."""
    if precision is not None:
        try:
            values = [float(item) for item in items]
        except ValueError as e:
            click.echo(f"Not a number: {e}", err=True)
            sys.exit(1)

        def conversion(item):
            return f"{item:.{precision}f}"

    else:
        values = list(items)
        conversion = str

    stack = Stack.from_items(values)
    try:
        for item in stack.pop_exact(pop_count):
            click.echo(f"popped {conversion(item)}", err=True)
    except StackError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    options = FormatOptions(
        conversion=conversion,
        start=start,
        end=end,
        separator=sep,
        top_first=not bottom_first,
    )
    click.echo(stack.render(options))
