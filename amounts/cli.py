# -*- coding: utf-8 -*-
"""
Amounts CLI
====================

Command line access to the default unit registry: convert and parse
amounts, inspect unit expressions and list registered units.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from amounts._version import __version__
from amounts.amount import Amount
from amounts.exceptions import AmountsException
from amounts.manager import get_manager
from amounts.units import Unit

app = typer.Typer(
    name="amounts",
    help="Amounts: dimension-safe quantities, conversions and formatting",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()


def _fail(exc: AmountsException) -> None:
    console.print(f"[red]{exc.message}[/red]", highlight=False)
    raise typer.Exit(1)


@app.command()
def version():
    """Show amounts version"""
    console.print(f"[bold green]amounts v{__version__}[/bold green]")


@app.command()
def convert(
    amount: str = typer.Argument(..., help='Amount to convert, e.g. "12,345.6789 m"'),
    unit: str = typer.Argument(..., help="Target unit name, symbol or expression"),
    decimals: Optional[int] = typer.Option(
        None, "--decimals", "-d", help="Round the result to this many decimals"
    ),
    locale: Optional[str] = typer.Option(
        None, "--locale", "-l", help="Locale of the input and output numbers"
    ),
    fmt: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format, e.g. NS or '#,##0.000 UN'"
    ),
):
    """Convert an amount to another unit"""
    try:
        parsed = Amount.parse(amount, locale)
        if parsed is None:
            console.print("[red]No amount given[/red]")
            raise typer.Exit(1)
        result = parsed.converted_to(Unit.parse(unit), decimals)
        text = result.format(fmt, locale)
    except AmountsException as exc:
        _fail(exc)
    console.print(text, markup=False, highlight=False)


@app.command()
def parse(
    expression: str = typer.Argument(..., help='Unit expression, e.g. "m³/h" or "1000*Kg"'),
):
    """Parse a unit expression and describe the resulting unit"""
    try:
        unit = Unit.parse(expression)
    except AmountsException as exc:
        _fail(exc)

    named = get_manager().resolve_to_named_unit(unit, False)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Name", unit.name)
    table.add_row("Symbol", unit.symbol)
    table.add_row("Factor", repr(unit.factor))
    table.add_row("Dimension", str(unit.unit_type) or "(none)")
    table.add_row("Named unit", named.name if named is not None else "-")
    console.print(table)


@app.command()
def units(
    dimension_of: Optional[str] = typer.Option(
        None, "--dimension-of", help="Only list units sharing this unit's dimension"
    ),
):
    """List registered units"""
    unit_type = None
    if dimension_of:
        try:
            unit_type = Unit.parse(dimension_of).unit_type
        except AmountsException as exc:
            _fail(exc)

    infos = get_manager().describe_units(unit_type)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Symbol", style="yellow")
    table.add_column("Factor", justify="right", style="green")
    table.add_column("Dimension")
    for info in infos:
        table.add_row(info.name, info.symbol, repr(info.factor), info.dimension_text)
    console.print(table)
    console.print(f"{len(infos)} units", highlight=False)


def main():
    """Main entry point for the amounts CLI command"""
    app()


if __name__ == "__main__":
    main()
