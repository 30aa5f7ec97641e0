"""Distance commands.

Parses a single distance phrase or looks up the compact notation of a
distance in feet.
"""

import click

from chartparser.cli.utils.table_formatter import distance_rows, format_rows
from chartparser.exceptions import ChartParserError
from chartparser.parsers.compact import describe_compact, lookup_compact
from chartparser.parsers.distance_grammar import parse_race_distance


@click.command()
@click.argument("phrase", nargs=-1, required=True)
def distance(phrase: tuple[str, ...]):
    """Parse a spelled-out distance (e.g. "About One Mile")"""
    text = " ".join(phrase)
    try:
        race_distance = parse_race_distance(text)
    except ChartParserError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(format_rows(distance_rows(race_distance)))


@click.command()
@click.argument("feet", type=click.IntRange(min=0))
@click.option("--about", is_flag=True, default=False, help="Estimated (About) distance")
def compact(feet: int, about: bool):
    """Show the compact notation of a distance in feet"""
    if lookup_compact(feet) is None:
        click.echo(f"Not a standard distance: {feet} ft", err=True)
    click.echo(describe_compact(feet, exact=not about))
