"""
IP range CLI commands.
"""

import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from iprange.config import get_settings
from iprange.core import new_range
from iprange.logging_config import setup_logging


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

logger = logging.getLogger(__name__)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
def main(debug: bool, log_file: str | None):
    """Inclusive IPv4/IPv6 address range utilities."""
    settings = get_settings()
    level = "DEBUG" if debug else settings.log_level
    if level not in LOG_LEVELS:
        level = "WARNING"
    setup_logging(level=level, log_file=log_file or settings.log_file)


@main.command()
@click.argument("start")
@click.argument("end")
def info(start: str, end: str):
    """Show family, size and canonical form of a range.

    Examples:
        iprange info 10.0.0.1 10.0.0.255
        iprange info ::1 ::ffff
    """
    console = Console()

    ip_range = new_range(start, end)
    if ip_range is None:
        console.print(f"[red]Error:[/red] {escape(start)}-{escape(end)} is not a valid range")
        raise SystemExit(1)

    table = Table(title=f"IP Range: {ip_range}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Family", ip_range.family.value)
    table.add_row("Start", str(ip_range.start))
    table.add_row("End", str(ip_range.end))
    table.add_row("Size", f"{ip_range.size():,}")
    table.add_row("Range", str(ip_range))

    console.print(table)


@main.command()
@click.argument("start")
@click.argument("end")
@click.argument("address")
def contains(start: str, end: str, address: str):
    """Check if a range contains an IP address.

    Examples:
        iprange contains 10.0.0.1 10.0.0.255 10.0.0.7
        iprange contains 10.0.0.1 10.0.0.255 ::ffff:10.0.0.7
    """
    console = Console()

    ip_range = new_range(start, end)
    if ip_range is None:
        console.print(f"[red]Error:[/red] {escape(start)}-{escape(end)} is not a valid range")
        raise SystemExit(1)

    logger.debug(f"Testing {address} against {ip_range!r}")
    if ip_range.contains(address):
        console.print(f"[green]Yes[/green] - {escape(address)} is within {ip_range}")
    else:
        console.print(f"[red]No[/red] - {escape(address)} is not within {ip_range}")


if __name__ == "__main__":
    main()
