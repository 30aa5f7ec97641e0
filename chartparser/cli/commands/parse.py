"""Chart text parsing command."""

import json

import click

from chartparser.cli.utils.table_formatter import format_record_table
from chartparser.exceptions import ChartParserError
from chartparser.parsers.distance_surface import parse


@click.command(name="parse")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON")
def parse_chart(source, as_json: bool):
    """Parse the distance, surface and track record from chart text lines"""
    lines = [line.rstrip("\r\n") for line in source]
    try:
        record = parse(lines)
    except ChartParserError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(record.to_dict(), indent=2))
    else:
        click.echo(format_record_table(record))
