import json
import logging

import click

from wktgpx import SEPARATOR, SOURCE_CRS, TARGET_CRS
from wktgpx.app import convert as convert_lines
from wktgpx.parsers import try_parse


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


@click.group()
@click.version_option()
@click.option('--log-level', envvar='WKTGPX_LOG_LEVEL', default='WARNING',
              type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Logging level. Skipped records are logged as warnings. "
                   "Default value: WARNING")
def main(log_level):
    logging.basicConfig(level=log_level.upper(),
                        format='%(levelname)s %(name)s: %(message)s')


@main.command()
@click.argument('input', default='gps.txt', type=click.File('r',
                encoding='utf-8'))
@click.argument('output', default='gps_out.txt', type=click.File('w',
                encoding='utf-8', lazy=False))
@click.option('--source-crs', envvar='WKTGPX_SOURCE_CRS', default=SOURCE_CRS,
              help="Coordinate reference system of the WKT geometries. "
                   "Default value: {}".format(SOURCE_CRS))
@click.option('--target-crs', envvar='WKTGPX_TARGET_CRS', default=TARGET_CRS,
              help="Coordinate reference system of the GPX output. "
                   "Default value: {}".format(TARGET_CRS))
@click.option('--separator', envvar='WKTGPX_SEPARATOR', default=SEPARATOR,
              help="Field separator of input and output lines. "
                   "Default value: {}".format(SEPARATOR))
def convert(input, output, source_crs, target_crs, separator):
    """Convert WKT track records to GPX.

    Each line of INPUT must have the form ``identifier|activities|wkt``.
    For every line with a non-empty LINESTRING or MULTILINESTRING a line
    ``activities|<gpx document>`` is written to OUTPUT. Lines that cannot
    be converted are logged and skipped.
    """
    try:
        stats = convert_lines(input, output, source_crs, target_crs,
                              separator)
    except OSError as e:
        raise click.ClickException(str(e))
    click.echo("Converted {} records ({} empty, {} failed)".format(
               stats.converted, stats.empty, stats.failed))


@main.command()
@click.argument('wkt')
def parse(wkt):
    """Parse a single WKT geometry and print its coordinates as JSON."""
    result = try_parse(wkt)
    if not result.ok:
        raise click.ClickException(str(result.error))
    click.echo("{} {}".format(result.geometry_type, result.layout.value))
    click.echo(json.dumps(result.coordinates))
