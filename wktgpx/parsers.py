from enum import Enum

import attr

from wktgpx import geometry
from wktgpx.errors import (UnsupportedGeometryError, WKTError,
                           WKTSyntaxError)
from wktgpx.lexer import Lexer, Token, TokenType


EMPTY = 'EMPTY'
GEOMETRYCOLLECTION = 'GEOMETRYCOLLECTION'


class Layout(Enum):
    """The coordinate layout declared by a geometry."""
    XY = 'XY'
    XYZ = 'XYZ'
    XYM = 'XYM'
    XYZM = 'XYZM'

    @property
    def dimensions(self):
        """Number of components in each coordinate."""
        return len(self.value)


LAYOUT_SUFFIXES = {
    'Z': Layout.XYZ,
    'M': Layout.XYM,
    'ZM': Layout.XYZM,
}


@attr.s(frozen=True)
class ParseResult:
    """Outcome of parsing a single WKT string.

    Exactly one of ``coordinates`` and ``error`` is set. Unlike the bare
    coordinate tree returned by :func:`parse`, a result carries the
    geometry type so consumers do not have to inspect nesting depth.
    """
    wkt = attr.ib()
    geometry_type = attr.ib(default=None)
    layout = attr.ib(default=Layout.XY)
    coordinates = attr.ib(default=None)
    error = attr.ib(default=None)

    @property
    def ok(self):
        return self.error is None

    @property
    def is_empty(self):
        return self.ok and not self.coordinates


class Parser:
    """Recursive descent parser for the LINESTRING subset of WKT.

    Supported geometries are ``LINESTRING`` and ``MULTILINESTRING`` with
    an optional ``Z``, ``M`` or ``ZM`` suffix, and any geometry type
    followed by ``EMPTY``. Each grammar rule is a sequence of
    :meth:`match` calls; a failed match is turned into a
    :class:`~wktgpx.errors.WKTSyntaxError` for the current token.

    A parser is good for exactly one call to :meth:`parse`.
    """
    def __init__(self, lexer):
        self.lexer = lexer
        self.token = Token(0, TokenType.START)
        self.layout = Layout.XY
        self.geometry_type = None

    def consume(self):
        """Replace the current token with the next one from the lexer."""
        self.token = self.lexer.next_token()

    def is_token_type(self, type):
        return self.token.type is type

    def match(self, type):
        """Consume the current token if it is of the given type."""
        if self.is_token_type(type):
            self.consume()
            return True
        return False

    def parse(self):
        """Parse the whole input and return the coordinate tree."""
        self.consume()
        coordinates = self._parse_geometry()
        if not self.is_token_type(TokenType.EOF):
            raise self._error()
        return coordinates

    def _parse_geometry(self):
        token = self.token
        if not self.match(TokenType.TEXT):
            raise self._error()
        self.geometry_type = token.value
        if self.geometry_type == GEOMETRYCOLLECTION:
            raise UnsupportedGeometryError(self.geometry_type,
                                           token.position, self.lexer.wkt)
        self.layout = self._parse_layout()
        if self._is_empty():
            return []
        if self.geometry_type == geometry.LINESTRING:
            return self._parse_line_string_text()
        elif self.geometry_type == geometry.MULTILINESTRING:
            return self._parse_multi_line_string_text()
        raise UnsupportedGeometryError(self.geometry_type, token.position,
                                       self.lexer.wkt)

    def _parse_layout(self):
        if self.is_token_type(TokenType.TEXT) and \
                self.token.value in LAYOUT_SUFFIXES:
            layout = LAYOUT_SUFFIXES[self.token.value]
            self.consume()
            return layout
        return Layout.XY

    def _is_empty(self):
        if self.is_token_type(TokenType.TEXT) and self.token.value == EMPTY:
            self.consume()
            return True
        return False

    def _parse_list(self, parse_item):
        """Parse one item, then any further items separated by commas."""
        items = [parse_item()]
        while self.match(TokenType.COMMA):
            items.append(parse_item())
        return items

    def _parse_point(self):
        coordinates = []
        for _ in range(self.layout.dimensions):
            token = self.token
            if not self.match(TokenType.NUMBER):
                raise self._error()
            coordinates.append(token.value)
        return coordinates

    def _parse_line_string_text(self):
        if self.match(TokenType.LEFT_PAREN):
            coordinates = self._parse_list(self._parse_point)
            if self.match(TokenType.RIGHT_PAREN):
                return coordinates
        raise self._error()

    def _parse_multi_line_string_text(self):
        if self.match(TokenType.LEFT_PAREN):
            coordinates = self._parse_list(self._parse_line_string_text)
            if self.match(TokenType.RIGHT_PAREN):
                return coordinates
        raise self._error()

    def _error(self):
        return WKTSyntaxError(self.token, self.lexer.wkt)


def parse(wkt):
    """Parse a WKT string into a nested list of coordinates.

    A ``LINESTRING`` gives a list of coordinates, a ``MULTILINESTRING`` a
    list of such lists and an ``EMPTY`` geometry an empty list::

        >>> parse('LINESTRING(0 0, 1 1)')
        [[0.0, 0.0], [1.0, 1.0]]

    Raises a subclass of :class:`~wktgpx.errors.WKTError` if the string
    cannot be parsed.
    """
    return Parser(Lexer(wkt)).parse()


def try_parse(wkt):
    """Parse a WKT string without raising on malformed input.

    Returns a :class:`ParseResult`. Lexical, syntax and unsupported
    geometry errors are returned in ``result.error``.
    """
    parser = Parser(Lexer(wkt))
    try:
        coordinates = parser.parse()
    except WKTError as e:
        return ParseResult(wkt, parser.geometry_type, parser.layout,
                           error=e)
    return ParseResult(wkt, parser.geometry_type, parser.layout,
                       coordinates)


def is_multi(coordinates):
    """Whether a coordinate tree is a ``MULTILINESTRING``."""
    return bool(coordinates) and bool(coordinates[0]) and \
        isinstance(coordinates[0][0], list)
