class WKTError(ValueError):
    """Base class for errors raised while reading a WKT string.

    Every error carries the position in the input where parsing stopped
    and the complete input string, so a bad line can be diagnosed from the
    log message alone.
    """
    def __init__(self, message, position, wkt):
        self.message = message
        self.position = position
        self.wkt = wkt
        super().__init__(message)


class LexError(WKTError):
    """An unrecognized character was encountered."""
    def __init__(self, character, position, wkt):
        self.character = character
        super().__init__('Unexpected character `{}` at position {} in `{}`'
                         .format(character, position, wkt), position, wkt)


class WKTSyntaxError(WKTError):
    """A token did not match what the grammar expects at this point."""
    def __init__(self, token, wkt):
        self.token = token
        super().__init__('Unexpected `{}` at position {} in `{}`'
                         .format(token.describe(), token.position, wkt),
                         token.position, wkt)


class UnsupportedGeometryError(WKTError):
    """The geometry type is outside the supported subset."""
    def __init__(self, geometry_type, position, wkt):
        self.geometry_type = geometry_type
        super().__init__('Not handled: {}'.format(geometry_type),
                         position, wkt)


class RecordError(ValueError):
    """An input line could not be split into a record."""
    pass


class GPXError(ValueError):
    """A parsed geometry could not be written as GPX."""
    pass
