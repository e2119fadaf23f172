import attr
from attr import validators

from wktgpx import SEPARATOR
from wktgpx.errors import RecordError


def strip_delimiters(term):
    """Remove the enclosing delimiters from the activities field.

    Activities are exported as a delimited list, for example
    ``{running,cycling}``. The first and last characters are dropped
    whatever they are.
    """
    return term[1:-1]


@attr.s(frozen=True)
class Record:
    """A single line of track input.

    A record can be created from a raw input line with
    :meth:`from_line`::

        r = Record.from_line('42|{running}|LINESTRING(0 0, 1 1)')
        r.activities  # 'running'

    """
    identifier = attr.ib(validator=validators.instance_of(str))
    activities = attr.ib(validator=validators.instance_of(str))
    wkt = attr.ib(validator=validators.instance_of(str))

    @classmethod
    def from_line(cls, line, separator=SEPARATOR):
        """Create a record from an ``identifier|activities|wkt`` line."""
        fields = line.rstrip('\r\n').split(separator)
        if len(fields) != 3:
            raise RecordError('Expected 3 fields separated by {!r}, got {}: '
                              '{!r}'.format(separator, len(fields), line))
        identifier, activities, wkt = fields
        return cls(identifier, strip_delimiters(activities), wkt)
