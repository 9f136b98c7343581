"""
IP prefix CLI commands.
"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ipprefix.config import get_config
from ipprefix.prefix.batch import apply_rows
from ipprefix.prefix.cast import PrefixCastOperator, ValueKind
from ipprefix.prefix.core import (
    format_prefix,
    is_subnet_of,
    make_prefix,
    subnet_max,
    subnet_min,
    subnet_range,
)
from ipprefix.prefix.errors import PrefixError, render_error
from ipprefix.prefix.parser import parse_address


def _fail(console: Console, error: PrefixError) -> None:
    message = render_error(error.error, get_config().detailed_errors)
    if message is None:
        message = error.kind.value
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    raise SystemExit(1)


def _load(console: Console, cidr: str):
    try:
        return make_prefix(cidr)
    except PrefixError as e:
        _fail(console, e)


@click.group()
def prefix():
    """IP prefix (CIDR) arithmetic."""
    pass


@prefix.command()
@click.argument("target")
@click.argument("prefix_length", type=int, required=False)
def make(target: str, prefix_length: int | None):
    """Canonicalize a network from CIDR text or an address and prefix length.

    Examples:
        ipprefix prefix make 192.168.1.5/24
        ipprefix prefix make 192.168.1.5 24
        ipprefix prefix make 2001:db8::1 32
    """
    console = Console()

    try:
        net = make_prefix(target, prefix_length)
    except PrefixError as e:
        _fail(console, e)

    low, high = subnet_range(net)

    table = Table(title=f"IP Prefix: {escape(target)}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Prefix", format_prefix(net))
    table.add_row("Version", f"IPv{net.version}")
    table.add_row("Network", str(net.network_address))
    table.add_row("Prefix Length", f"/{net.prefix_length}")
    table.add_row("Subnet Min", str(low))
    table.add_row("Subnet Max", str(high))
    table.add_row("Total Addresses", f"{high.value - low.value + 1:,}")

    console.print(table)


@prefix.command("min")
@click.argument("cidr")
def min_address(cidr: str):
    """Print the smallest address of a network.

    Examples:
        ipprefix prefix min 10.1.2.3/8
    """
    console = Console()
    console.print(str(subnet_min(_load(console, cidr))), highlight=False)


@prefix.command("max")
@click.argument("cidr")
def max_address(cidr: str):
    """Print the largest address of a network.

    Examples:
        ipprefix prefix max 10.0.0.0/8
        ipprefix prefix max ::/0
    """
    console = Console()
    console.print(str(subnet_max(_load(console, cidr))), highlight=False)


@prefix.command("range")
@click.argument("cidr")
def address_range(cidr: str):
    """Print the smallest and largest address of a network.

    Examples:
        ipprefix prefix range 192.168.0.0/16
    """
    console = Console()
    low, high = subnet_range(_load(console, cidr))
    console.print(str(low), highlight=False)
    console.print(str(high), highlight=False)


@prefix.command("subnet-of")
@click.argument("outer")
@click.argument("candidate")
def subnet_of(outer: str, candidate: str):
    """Check if an address or prefix lies within a network.

    CANDIDATE is treated as a prefix when it contains '/'.

    Examples:
        ipprefix prefix subnet-of 10.0.0.0/8 10.1.0.0/16
        ipprefix prefix subnet-of 10.0.0.0/8 10.1.2.3
    """
    console = Console()
    outer_net = _load(console, outer)

    try:
        if "/" in candidate:
            target = make_prefix(candidate)
        else:
            target = parse_address(candidate)
    except PrefixError as e:
        _fail(console, e)

    if is_subnet_of(outer_net, target):
        console.print(f"[green]Yes[/green] - {escape(candidate)} is within {escape(outer)}", highlight=False)
    else:
        console.print(f"[red]No[/red] - {escape(candidate)} is not within {escape(outer)}", highlight=False)


@prefix.command()
@click.argument("cidr")
def encode(cidr: str):
    """Print the 17-byte binary form of a prefix as hex.

    Examples:
        ipprefix prefix encode 10.0.0.0/8
    """
    console = Console()
    data = PrefixCastOperator().cast_from(_load(console, cidr), ValueKind.VARBINARY)
    console.print(data.hex(), highlight=False)


@prefix.command()
@click.argument("hex_value")
def decode(hex_value: str):
    """Decode a hex-encoded 17-byte prefix back to CIDR text.

    Examples:
        ipprefix prefix decode 00000000000000000000ffff0a00000008
    """
    console = Console()

    try:
        data = bytes.fromhex(hex_value)
    except ValueError:
        raise click.BadParameter(f"'{hex_value}' is not valid hex", param_hint="HEX_VALUE")

    caster = PrefixCastOperator()
    try:
        net = caster.cast_to(data, ValueKind.VARBINARY)
    except PrefixError as e:
        _fail(console, e)

    console.print(caster.cast_from(net, ValueKind.VARCHAR), highlight=False)


@prefix.command()
@click.argument("source", type=click.File("r"), default="-")
def batch(source):
    """Canonicalize one CIDR per line, reporting failures per row.

    Blank lines are skipped. Exits with status 1 if any row failed.

    Examples:
        ipprefix prefix batch networks.txt
        cat networks.txt | ipprefix prefix batch
    """
    console = Console()

    rows = [line.strip() for line in source if line.strip()]
    outcomes = apply_rows(make_prefix, rows)

    table = Table(title="IP Prefix Batch")
    table.add_column("Row", style="dim", justify="right")
    table.add_column("Input", style="white")
    table.add_column("Result", style="white")

    for row, outcome in zip(rows, outcomes):
        if outcome.ok:
            result = f"[green]{format_prefix(outcome.value)}[/green]"
        elif outcome.message is None:
            result = f"[red]{outcome.error_kind.value}[/red]"
        else:
            result = f"[red]{escape(outcome.message)}[/red]"
        table.add_row(str(outcome.index + 1), escape(row), result)

    console.print(table)

    failed = sum(1 for outcome in outcomes if not outcome.ok)
    console.print(f"[cyan]Rows:[/cyan] {len(outcomes)}  [red]Failed:[/red] {failed}")
    if failed:
        raise SystemExit(1)
