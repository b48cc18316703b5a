"""
The api module contains a set of handy functions to load and run
befunge programs.
"""

import logging
import os
from .grid import Grid
from .inputs import BufferedInput
from .interpreter import Interpreter

# When using 'from fungus.api import *' include the following:
__all__ = ['load_program', 'run_program', 'befunge_to_text']


logger = logging.getLogger('api')


def load_program(source):
    """ Load a befunge program into a grid.

    The source can be a filename, a file like object or a string
    containing the program itself. A string is taken to be a filename
    when it holds no line break and names an existing file.
    """
    if isinstance(source, Grid):
        return source
    if hasattr(source, 'read'):
        text = source.read()
    elif _is_filename(source):
        with open(source, 'r', newline='') as f:
            text = f.read()
    else:
        text = source
    grid = Grid.from_text(text)
    logger.debug('Loaded program of %s rows, %s columns',
                 grid.height, grid.width)
    return grid


def _is_filename(source):
    return isinstance(source, str) and '\n' not in source \
        and os.path.isfile(source)


def run_program(source, input_source=None, output=None, max_steps=None,
                rng=None):
    """ Load and run a befunge program.

    When no input source is given, the program sees an empty input. The
    output of the program is written to output, if given.

    Returns the interpreter, which holds the final state of the program.

    >>> import io
    >>> f = io.StringIO()
    >>> interpreter = run_program('55+.@', output=f)
    >>> f.getvalue()
    '10 '

    """
    if input_source is None:
        input_source = BufferedInput()
    filename = source if _is_filename(source) else None
    grid = load_program(source)
    interpreter = Interpreter(grid, input_source, rng=rng, filename=filename)
    steps = interpreter.run(max_steps=max_steps, output=output)
    if interpreter.is_running:
        logger.warning('Program still running after %s steps', steps)
    else:
        logger.info('Program finished after %s steps', steps)
    return interpreter


def befunge_to_text(grid):
    """ Render a grid back into program text """
    return str(grid)
