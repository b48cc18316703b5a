""" Befunge execution engine.

Epic esoteric language in 2D!

See also: https://en.wikipedia.org/wiki/Befunge

The interpreter owns a grid of tokens, a stack of signed 32-bit integers
and an instruction pointer that travels over the grid. Each call to
:meth:`Interpreter.step` executes the token under the pointer and then
moves the pointer one cell further, wrapping around the edges.
"""

import logging
import operator
import random
from collections import namedtuple
from .common import ExecutionError, SourceLocation
from .direction import Direction
from .tokens import Kind, NOOP, char_to_token, token_to_char


Snapshot = namedtuple(
    'Snapshot', ['grid', 'x', 'y', 'direction', 'stack', 'string_mode'])


def to_i32(value):
    """ Wrap an integer into the signed 32-bit range """
    value &= 0xFFFFFFFF
    if value & 0x80000000:
        value -= 0x100000000
    return value


def truncating_div(a, b):
    """ Divide, rounding toward zero """
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def truncating_mod(a, b):
    """ Remainder of a truncating division, it has the sign of a """
    return a - b * truncating_div(a, b)


def wrap(value, bound):
    """ Wrap a coordinate into [0, bound) """
    if bound <= 0:
        return 0
    return value % bound


class Interpreter:
    """ Befunge machine. """
    logger = logging.getLogger('befunge')

    def __init__(self, grid, input_source, rng=None, filename=None):
        self.grid = grid
        self.input_source = input_source
        self.rng = rng if rng is not None else random.Random()
        self.filename = filename
        self.verbose = False
        self.x = 0
        self.y = 0
        self.direction = Direction.RIGHT
        self.stack = []
        self.running = True
        self.string_mode = False
        self.last_output = ''
        self.steps = 0
        self.logger.debug('Created interpreter for %r', grid)

    @property
    def is_running(self):
        return self.running

    def location(self):
        """ Get the source location of the pointer """
        return SourceLocation.from_cell(
            self.x, self.y, filename=self.filename,
            source=self.grid.text_rows())

    def snapshot(self):
        """ Capture the grid, pointer and stack for display """
        return Snapshot(
            tuple(self.grid.text_rows()), self.x, self.y, self.direction,
            tuple(self.stack), self.string_mode)

    def run(self, max_steps=None, output=None):
        """ Run until the program halts or max_steps steps were taken.

        When output is given, the output of every step is written to it.
        Returns the number of steps taken.
        """
        steps = 0
        while self.running and (max_steps is None or steps < max_steps):
            self.step()
            steps += 1
            if output is not None and self.last_output:
                output.write(self.last_output)
        return steps

    def step(self):
        """ Execute a single token and move the pointer. """
        if not self.running:
            raise ExecutionError(
                'Cannot step a program that has halted', loc=self.location())

        self.last_output = ''
        token = self.grid.get(self.x, self.y)
        if token is None:
            # Only an empty grid has no token under the pointer
            token = NOOP

        if self.verbose:
            self.logger.debug(
                'at (%s, %s) execute %r', self.x, self.y, token)

        if self.string_mode:
            self.string_action(token)
        else:
            self.dispatch(token)

        self.move_pointer()
        self.steps += 1

        if not self.running:
            self.logger.debug('Program halted after %s steps', self.steps)

    def move_pointer(self):
        """ Advance the pointer, wrapping around per axis.

        Horizontal movement wraps against the width of the current row,
        vertical movement against the number of rows.
        """
        if self.direction.is_horizontal:
            bound = 0
            if self.y < self.grid.height:
                bound = self.grid.row_width(self.y)
            if bound == 0:
                bound = self.grid.width
            self.x = wrap(self.x + self.direction.dx, bound)
        else:
            self.y = wrap(self.y + self.direction.dy, self.grid.height)

    def string_action(self, token):
        """ In string mode, tokens push their character code """
        if token.kind is Kind.STRING_MODE:
            self.string_mode = False
        else:
            self.push(ord(token_to_char(token)))

    def dispatch(self, token):
        """ Execute a single token. """
        kind = token.kind
        if kind is Kind.ADD:
            self.binary_op(operator.add)
        elif kind is Kind.SUBTRACT:
            self.binary_op(operator.sub)
        elif kind is Kind.MULTIPLY:
            self.binary_op(operator.mul)
        elif kind is Kind.DIVIDE:
            self.binary_op(truncating_div)
        elif kind is Kind.MODULO:
            self.binary_op(truncating_mod)
        elif kind is Kind.NOT:
            self.push(1 if self.pop() == 0 else 0)
        elif kind is Kind.GREATER:
            self.binary_op(lambda lhs, rhs: 1 if lhs > rhs else 0)
        elif kind is Kind.RIGHT:
            self.direction = Direction.RIGHT
        elif kind is Kind.LEFT:
            self.direction = Direction.LEFT
        elif kind is Kind.UP:
            self.direction = Direction.UP
        elif kind is Kind.DOWN:
            self.direction = Direction.DOWN
        elif kind is Kind.RANDOM:
            self.direction = Direction.random(self.rng)
        elif kind is Kind.HORIZONTAL_IF:
            if self.pop() == 0:
                self.direction = Direction.RIGHT
            else:
                self.direction = Direction.LEFT
        elif kind is Kind.VERTICAL_IF:
            if self.pop() == 0:
                self.direction = Direction.DOWN
            else:
                self.direction = Direction.UP
        elif kind is Kind.STRING_MODE:
            self.string_mode = True
        elif kind is Kind.DUPLICATE:
            self.push(self.peek())
        elif kind is Kind.SWAP:
            a, b = self.pop(), self.pop()
            self.push(a)
            self.push(b)
        elif kind is Kind.DISCARD:
            self.pop()
        elif kind is Kind.PRINT_INT:
            self.emit('{} '.format(self.pop()))
        elif kind is Kind.PRINT_CHAR:
            self.emit(self.int_to_char(self.pop()))
        elif kind is Kind.READ_INT:
            self.push(self.input_source.read_int())
        elif kind is Kind.READ_CHAR:
            self.push(self.input_source.read_char())
        elif kind is Kind.BRIDGE:
            self.move_pointer()
        elif kind is Kind.GET:
            y, x = self.pop(), self.pop()
            cell = self.grid.get(x, y)
            self.push(0 if cell is None else ord(token_to_char(cell)))
        elif kind is Kind.PUT:
            y, x, value = self.pop(), self.pop(), self.pop()
            self.grid.set(x, y, char_to_token(self.int_to_char(value)))
        elif kind is Kind.QUIT:
            self.running = False
        elif kind is Kind.INT:
            self.push(token.value)
        elif kind in (Kind.NOOP, Kind.CHAR):
            pass
        else:  # pragma: no cover
            raise NotImplementedError('Invalid token: {}'.format(token))

    def binary_op(self, op):
        """ Pop rhs and then lhs, and push op(lhs, rhs).

        Division and modulo by zero do not trap, the input source is asked
        for the result instead.
        """
        rhs, lhs = self.pop(), self.pop()
        if rhs == 0 and op in (truncating_div, truncating_mod):
            self.logger.info(
                'Division by zero at (%s, %s), reading result from input',
                self.x, self.y)
            self.push(self.input_source.read_int())
        else:
            self.push(op(lhs, rhs))

    def int_to_char(self, value):
        """ Convert a stack value into a character """
        if value < 0 or value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
            raise ExecutionError(
                '{} is not a valid character code'.format(value),
                loc=self.location())
        return chr(value)

    def emit(self, text):
        self.last_output += text

    def push(self, value):
        self.stack.append(to_i32(value))

    def pop(self):
        if self.stack:
            return self.stack.pop()
        else:
            return 0

    def peek(self):
        if self.stack:
            return self.stack[-1]
        else:
            return 0
