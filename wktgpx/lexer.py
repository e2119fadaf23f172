from enum import Enum
import string

import attr

from wktgpx.errors import LexError


WHITESPACE = frozenset(' \t\r\n')
DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
EXPONENT = frozenset('eE')
SIGNS = frozenset('+-')


class TokenType(Enum):
    START = 0
    TEXT = 1
    LEFT_PAREN = 2
    RIGHT_PAREN = 3
    NUMBER = 4
    COMMA = 5
    EOF = 6


PUNCTUATION = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    ',': TokenType.COMMA,
}


@attr.s(frozen=True, slots=True)
class Token:
    """A classified lexical unit.

    ``value`` is the upper-cased keyword for ``TEXT`` tokens, a float for
    ``NUMBER`` tokens, the character itself for punctuation and ``None``
    for ``START`` and ``EOF``.
    """
    position = attr.ib()
    type = attr.ib(validator=attr.validators.instance_of(TokenType))
    value = attr.ib(default=None)

    def describe(self):
        """Render the token value for error messages."""
        if self.type is TokenType.EOF:
            return 'EOF'
        if self.type is TokenType.NUMBER:
            return repr(self.value)
        return str(self.value)


class Lexer:
    """Tokenize a WKT string.

    Call :meth:`next_token` repeatedly; once the input is exhausted every
    call returns an ``EOF`` token positioned at the end of the input::

        lexer = Lexer('LINESTRING(0 0, 1 1)')
        lexer.next_token()  # Token(position=0, type=TEXT, value='LINESTRING')

    """
    def __init__(self, wkt):
        self.wkt = wkt
        #: Index of the next unread character.
        self.index = 0

    def next_token(self):
        """Fetch and return the next token."""
        while self._peek() in WHITESPACE:
            self.index += 1
        position = self.index
        c = self._peek()
        if not c:
            return Token(position, TokenType.EOF)
        if c in PUNCTUATION:
            self.index += 1
            return Token(position, PUNCTUATION[c], c)
        if c in DIGITS or c == '.' or c == '-':
            return Token(position, TokenType.NUMBER, self._read_number())
        if c in LETTERS:
            return Token(position, TokenType.TEXT, self._read_text())
        raise LexError(c, position, self.wkt)

    def _peek(self):
        return self.wkt[self.index:self.index + 1]

    def _read_number(self):
        start = self.index
        decimal = self.wkt[start] == '.'
        scientific = False
        self.index += 1
        while True:
            c = self._peek()
            if c in DIGITS:
                pass
            elif c == '.' and not decimal and not scientific:
                decimal = True
            elif c in EXPONENT and not scientific:
                scientific = True
            elif c in SIGNS and self.wkt[self.index - 1] in EXPONENT:
                # A sign is only part of the number right after e/E.
                pass
            else:
                break
            self.index += 1
        text = self.wkt[start:self.index]
        try:
            return float(text)
        except ValueError:
            raise LexError(text, start, self.wkt) from None

    def _read_text(self):
        start = self.index
        while self._peek() in LETTERS:
            self.index += 1
        return self.wkt[start:self.index].upper()
