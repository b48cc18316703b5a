""" Errors, source locations and other shared bits. """

import os


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


def str2int(txt):
    """ Parse a decimal, 0x hexadecimal or 0b binary number """
    txt = txt.strip()
    for prefix, base in (('0x', 16), ('0b', 2)):
        if txt.startswith(prefix):
            return int(txt[len(prefix):], base)
    return int(txt)


class SourceLocation:
    """ A location that refers to a cell of a program.

    Rows and columns are one based, like in a text editor, while grid
    coordinates are zero based.
    """
    __slots__ = ['filename', 'row', 'col', 'source']

    def __init__(self, filename, row, col, source=None):
        self.filename = filename
        self.row = row
        self.col = col
        self.source = source

    @classmethod
    def from_cell(cls, x, y, filename=None, source=None):
        return cls(filename, y + 1, x + 1, source=source)

    def __repr__(self):
        return 'SourceLocation({!r}, {}, {})'.format(
            self.filename, self.row, self.col)

    def __str__(self):
        name = self.filename or '<program>'
        return '{}:{}:{}'.format(name, self.row, self.col)

    def get_source_lines(self):
        """ Return the program text as lines.

        The source is either the program text or its rows.
        """
        if self.source is None and self.filename:
            if os.path.exists(self.filename):
                with open(self.filename, 'r') as f:
                    self.source = f.read()
        if self.source is None:
            return []
        elif isinstance(self.source, str):
            return self.source.split('\n')
        return list(self.source)

    def print_message(self, message, lines=None, file=None):
        """ Print a message pointing at this location in the program """
        if lines is None:
            lines = self.get_source_lines()

        if self.filename:
            print('File : "{}"'.format(self.filename), file=file)

        print_message(lines, self.row, self.col, message, file=file)


def print_message(lines, row, col, message, file=None):
    """ Print a message below a cell, with two program rows around it """
    first, last = max(row - 2, 1), min(row + 2, len(lines))
    for r in range(first, last + 1):
        print('{:5} :{}'.format(r, lines[r - 1]), file=file)
        if r == row:
            marker = '      :' + ' ' * (col - 1)
            print(marker + '^', file=file)
            print(marker + '+---- ' + message, file=file)

    if row > len(lines):
        # Cells written beyond the program text have no row to show
        print('      : row {} column {}: {}'.format(row, col, message),
              file=file)


class FungusError(Exception):
    """ Fatal error raised while loading or executing a program """
    def __init__(self, msg, loc=None):
        super().__init__(msg)
        assert loc is None or isinstance(loc, SourceLocation)
        self.msg = msg
        self.loc = loc

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.msg)

    def print(self, file=None):
        """ Print the error, with program context when it has a location """
        if self.loc:
            self.loc.print_message(self.msg, file=file)
        else:
            print(self.msg, file=file)


class GridError(FungusError):
    """ Raised on writes the grid cannot accommodate """
    pass


class ExecutionError(FungusError):
    """ Raised when an instruction cannot be executed """
    pass
