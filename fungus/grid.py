""" The two dimensional program space.

The grid maps (x, y) coordinates onto tokens. Rows keep the length they
were given, while the width of the grid is the length of the longest row.
Any cell inside the grid bounds that was never written reads as a no-op,
which gives the illusion of a rectangular grid.
"""

import logging
from .common import GridError, SourceLocation
from .tokens import NOOP, char_to_token, token_to_char


class Grid:
    """ A growable grid of tokens """
    logger = logging.getLogger('grid')

    def __init__(self, rows=()):
        self._rows = [list(row) for row in rows]
        self._width = max((len(row) for row in self._rows), default=0)

    @classmethod
    def from_lines(cls, lines):
        """ Create a grid from lines of program text """
        return cls([char_to_token(c) for c in line] for line in lines)

    @classmethod
    def from_text(cls, text):
        """ Create a grid from program text, one row per line.

        Only a line feed, optionally preceded by a carriage return, ends a
        line. Any other character is a cell.
        """
        *lines, last = text.split('\n')
        lines = [line[:-1] if line.endswith('\r') else line for line in lines]
        if last:
            lines.append(last)
        return cls.from_lines(lines)

    def __repr__(self):
        return 'Grid({}x{})'.format(self.width, self.height)

    def __str__(self):
        return '\n'.join(self.text_rows())

    def text_rows(self):
        """ Get the program text of each row """
        return [
            ''.join(token_to_char(token) for token in row)
            for row in self._rows]

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return len(self._rows)

    def row_width(self, y):
        """ Get the number of cells stored in the given row """
        return len(self._rows[y])

    def rows(self):
        """ Iterate over copies of the rows """
        for row in self._rows:
            yield tuple(row)

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x, y):
        """ Get the token at the given cell.

        Returns None when the cell is outside the grid.
        """
        if not self.in_bounds(x, y):
            return None
        row = self._rows[y]
        if x < len(row):
            return row[x]
        else:
            return NOOP

    def set(self, x, y, token):
        """ Place a token at the given cell, growing the grid if needed """
        if x < 0 or y < 0:
            raise GridError(
                'Cannot write {} at negative cell ({}, {})'.format(
                    token, x, y),
                loc=SourceLocation.from_cell(max(x, 0), max(y, 0)))

        if y >= self.height or x >= self.width:
            self.logger.debug('Growing grid to hold cell (%s, %s)', x, y)

        # Expand the height to allow inserting at row y:
        while len(self._rows) <= y:
            self._rows.append([])

        # Expand the row with no-ops to make room for the new token:
        row = self._rows[y]
        if len(row) <= x:
            row.extend([NOOP] * (x + 1 - len(row)))

        row[x] = token
        self._width = max(self._width, x + 1)
