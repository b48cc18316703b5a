""" The debugger model.

The debugger wraps an interpreter and adds breakpoints, a record of all
output so far and events that front-ends can subscribe to.
"""

import enum
import logging
from ..common import FungusError
from ..grid import Grid
from ..interpreter import Interpreter


class DebugState(enum.Enum):
    """ Debug states """
    STOPPED = 0
    RUNNING = 1
    FINISHED = 2


class Event:
    """ A list of handlers called when the event fires """
    def __init__(self):
        self._handlers = []

    def __call__(self):
        for handler in self._handlers:
            handler()

    def __iadd__(self, handler):
        assert callable(handler)
        self._handlers.append(handler)
        return self

    def __isub__(self, handler):
        self._handlers.remove(handler)
        return self


class Events:
    def __init__(self):
        self.on_stop = Event()
        self.on_start = Event()


class Debugger:
    """ Main interface to the debugger.

    Give it an interpreter that has not yet taken any steps, the initial
    program is remembered so that the debugger can restart it.
    """
    def __init__(self, interpreter):
        self.logger = logging.getLogger('dbg')
        self.events = Events()
        self.interpreter = interpreter
        self.breakpoints = set()
        self.output = ''
        if interpreter.is_running:
            self.status = DebugState.STOPPED
        else:
            self.status = DebugState.FINISHED
        self._program = Grid(interpreter.grid.rows())

    def __repr__(self):
        return 'Debugger({}, {})'.format(self.interpreter.grid, self.status)

    @property
    def is_finished(self):
        return self.status == DebugState.FINISHED

    @property
    def last_output(self):
        return self.interpreter.last_output

    def get_pointer(self):
        """ Get the cell under the instruction pointer """
        return self.interpreter.x, self.interpreter.y

    def snapshot(self):
        return self.interpreter.snapshot()

    # Start stop parts:
    def step(self):
        """ Execute a single instruction """
        self.nstep(1)

    def nstep(self, count):
        """ Execute count instructions, or until the program halts """
        if self._check_finished():
            return
        self.events.on_start()
        try:
            for _ in range(count):
                self._single_step()
                if self.is_finished:
                    break
        finally:
            self.events.on_stop()

    def run(self, max_steps=None):
        """ Run until a breakpoint is reached or the program halts """
        if self._check_finished():
            return 0
        self.logger.info('Run')
        self.status = DebugState.RUNNING
        self.events.on_start()
        steps = 0
        try:
            while not self.is_finished:
                self._single_step()
                steps += 1
                if self.get_pointer() in self.breakpoints:
                    self.logger.info(
                        'Breakpoint hit at (%s, %s)', *self.get_pointer())
                    break
                if max_steps is not None and steps >= max_steps:
                    self.logger.info('Stopped after %s steps', steps)
                    break
        finally:
            if self.status == DebugState.RUNNING:
                self.status = DebugState.STOPPED
            self.events.on_stop()
        return steps

    def restart(self):
        """ Start over with the original program.

        The input source is shared with the previous run, input that was
        consumed already is not replayed.
        """
        self.logger.info('Restart')
        old = self.interpreter
        self.interpreter = Interpreter(
            Grid(self._program.rows()), old.input_source,
            rng=old.rng, filename=old.filename)
        self.interpreter.verbose = old.verbose
        self.output = ''
        self.status = DebugState.STOPPED
        self.events.on_stop()

    def _check_finished(self):
        if self.is_finished:
            self.logger.warning('Program has finished, restart it first')
        return self.is_finished

    def _single_step(self):
        try:
            self.interpreter.step()
        except FungusError:
            self.status = DebugState.FINISHED
            raise
        self.output += self.interpreter.last_output
        if not self.interpreter.is_running:
            self.logger.info(
                'Program finished after %s steps', self.interpreter.steps)
            self.status = DebugState.FINISHED

    # Breakpoints:
    def set_breakpoint(self, x, y):
        self.logger.info('Setting breakpoint at (%s, %s)', x, y)
        if not self.interpreter.grid.in_bounds(x, y):
            self.logger.warning('Cell (%s, %s) is outside the grid', x, y)
        self.breakpoints.add((x, y))

    def clear_breakpoint(self, x, y):
        self.logger.info('Clearing breakpoint at (%s, %s)', x, y)
        if (x, y) in self.breakpoints:
            self.breakpoints.remove((x, y))
        else:
            self.logger.warning('No breakpoint at (%s, %s)', x, y)


def display_char(c):
    """ Show unprintable cells, such as written line feeds, as a dot """
    return c if c.isprintable() else '.'


def render_grid(snapshot):
    """ Render a snapshot as text lines, marking the pointer """
    lines = []
    for y, row in enumerate(snapshot.grid):
        line = ''.join(map(display_char, row))
        if y == snapshot.y:
            lines.append('>> ' + line)
            lines.append('   ' + ' ' * snapshot.x + '^')
        else:
            lines.append('   ' + line)
    return lines
