import logging

import attr

from wktgpx import SEPARATOR, SOURCE_CRS, TARGET_CRS
from wktgpx.errors import GPXError, RecordError, WKTError
from wktgpx.gpx import write_gpx
from wktgpx.parsers import try_parse
from wktgpx.record import Record


logger = logging.getLogger(__name__)


@attr.s
class Stats:
    """Counters for a conversion run."""
    converted = attr.ib(default=0)
    empty = attr.ib(default=0)
    failed = attr.ib(default=0)

    @property
    def total(self):
        return self.converted + self.empty + self.failed


def convert_line(line, source=SOURCE_CRS, target=TARGET_CRS,
                 separator=SEPARATOR):
    """Convert one ``identifier|activities|wkt`` line.

    Returns the output line ``activities|<gpx>`` without a trailing
    newline, or ``None`` if the geometry is empty. Raises
    :class:`~wktgpx.errors.RecordError` for a malformed line, a
    :class:`~wktgpx.errors.WKTError` for a malformed geometry and a
    :class:`~wktgpx.errors.GPXError` for a geometry that cannot be written
    as GPX.
    """
    record = Record.from_line(line, separator)
    result = try_parse(record.wkt)
    if not result.ok:
        raise result.error
    if result.is_empty:
        return None
    gpx = write_gpx(result.coordinates, result.geometry_type, source, target,
                    result.layout)
    return '{}{}{}'.format(record.activities, separator, gpx)


def convert(lines, out, source=SOURCE_CRS, target=TARGET_CRS,
            separator=SEPARATOR):
    """Convert an iterable of input lines, writing results to ``out``.

    Every line is handled on its own. A line that cannot be converted is
    logged and counted as failed, and processing continues with the next
    one. Blank lines are ignored. Returns a :class:`Stats` instance.
    """
    stats = Stats()
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            converted = convert_line(line, source, target, separator)
        except (GPXError, RecordError, WKTError) as e:
            logger.warning('Skipping line %d: %s', lineno, e)
            stats.failed += 1
            continue
        if converted is None:
            logger.info('Skipping line %d: empty geometry', lineno)
            stats.empty += 1
            continue
        out.write(converted + '\n')
        stats.converted += 1
    return stats
