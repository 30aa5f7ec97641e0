"""Click CLI main module."""

import logging

import click


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """Race chart distance/surface/track record parser CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# コマンドの登録
from chartparser.cli.commands.distance import compact, distance
from chartparser.cli.commands.parse import parse_chart

main.add_command(distance)
main.add_command(compact)
main.add_command(parse_chart)


__all__ = ["main"]
