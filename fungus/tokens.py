""" The values a cell of a befunge program can hold.

Every character of a program is turned into a token. Characters with a
dedicated meaning map to an instruction, digits map to integer literals
and all other characters are kept as character literals, which only do
something in string mode.
"""

import enum
from collections import namedtuple


class Kind(enum.Enum):
    """ The different kinds of tokens """
    ADD = 'Add'
    SUBTRACT = 'Subtract'
    MULTIPLY = 'Multiply'
    DIVIDE = 'Divide'
    MODULO = 'Modulo'
    NOT = 'Not'
    GREATER = 'Greater'
    RIGHT = 'Right'
    LEFT = 'Left'
    UP = 'Up'
    DOWN = 'Down'
    RANDOM = 'Random'
    HORIZONTAL_IF = 'HorizontalIf'
    VERTICAL_IF = 'VerticalIf'
    STRING_MODE = 'StringMode'
    DUPLICATE = 'Duplicate'
    SWAP = 'Swap'
    DISCARD = 'Discard'
    PRINT_INT = 'PrintInt'
    PRINT_CHAR = 'PrintChar'
    READ_INT = 'ReadInt'
    READ_CHAR = 'ReadChar'
    BRIDGE = 'Bridge'
    GET = 'Get'
    PUT = 'Put'
    QUIT = 'Quit'
    INT = 'Int'
    NOOP = 'Noop'
    CHAR = 'Char'


class Token(namedtuple('Token', ['kind', 'value'])):
    """ An immutable cell value.

    Only integer literals (value 0 to 9) and character literals (a single
    character) carry a value, for all other kinds it is None.
    """
    __slots__ = ()

    def __new__(cls, kind, value=None):
        if kind is Kind.INT:
            assert value in range(10), 'Int literal must be a digit'
        elif kind is Kind.CHAR:
            assert isinstance(value, str) and len(value) == 1
        else:
            assert value is None, '{} has no value'.format(kind)
        return super().__new__(cls, kind, value)

    def __repr__(self):
        if self.value is None:
            return self.kind.value
        return '{}({})'.format(self.kind.value, self.value)


CHAR_TOKEN_MAP = {
    '+': Token(Kind.ADD),
    '-': Token(Kind.SUBTRACT),
    '*': Token(Kind.MULTIPLY),
    '/': Token(Kind.DIVIDE),
    '%': Token(Kind.MODULO),
    '!': Token(Kind.NOT),
    '`': Token(Kind.GREATER),
    '>': Token(Kind.RIGHT),
    '<': Token(Kind.LEFT),
    '^': Token(Kind.UP),
    'v': Token(Kind.DOWN),
    '?': Token(Kind.RANDOM),
    '_': Token(Kind.HORIZONTAL_IF),
    '|': Token(Kind.VERTICAL_IF),
    '"': Token(Kind.STRING_MODE),
    ':': Token(Kind.DUPLICATE),
    '\\': Token(Kind.SWAP),
    '$': Token(Kind.DISCARD),
    '.': Token(Kind.PRINT_INT),
    ',': Token(Kind.PRINT_CHAR),
    # Input instructions, reading from the input source:
    '&': Token(Kind.READ_INT),
    '~': Token(Kind.READ_CHAR),
    '#': Token(Kind.BRIDGE),
    'g': Token(Kind.GET),
    'p': Token(Kind.PUT),
    '@': Token(Kind.QUIT),
    ' ': Token(Kind.NOOP),
}

TOKEN_CHAR_MAP = {token: char for char, token in CHAR_TOKEN_MAP.items()}

NOOP = CHAR_TOKEN_MAP[' ']

DIGITS = frozenset('0123456789')


def char_to_token(character):
    """ Get the token a single program character stands for """
    if character in DIGITS:
        return Token(Kind.INT, int(character))
    try:
        return CHAR_TOKEN_MAP[character]
    except KeyError:
        return Token(Kind.CHAR, character)


def token_to_char(token):
    """ Get the character a token was parsed from """
    if token.kind is Kind.INT:
        return str(token.value)
    elif token.kind is Kind.CHAR:
        return token.value
    else:
        return TOKEN_CHAR_MAP[token]
