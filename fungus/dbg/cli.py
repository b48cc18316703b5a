""" Command line interface for the debugger """

import cmd
from .. import __version__ as fungus_version
from ..common import str2int, FungusError
from .debugger import DebugState, render_grid


class DebugCli(cmd.Cmd):
    """ Implement a console-based debugger interface. """
    prompt = 'DBG>'
    intro = 'fungus interactive debugger'

    def __init__(self, debugger, stdin=None, stdout=None):
        super().__init__(stdin=stdin, stdout=stdout)
        self.debugger = debugger
        if stdin is not None:
            self.use_rawinput = False

    def emit(self, *args):
        print(*args, file=self.stdout)

    def emptyline(self):
        """ Do not repeat the last command on an empty line """
        pass

    def do_quit(self, _):
        """ Quit the debugger """
        return True

    do_q = do_quit
    do_EOF = do_quit

    def do_info(self, _):
        """ Show some info about the debugger """
        text_status = {
            DebugState.STOPPED: 'Stopped',
            DebugState.RUNNING: 'Running',
            DebugState.FINISHED: 'Finished',
        }
        snapshot = self.debugger.snapshot()
        self.emit('Debugger:      ', self.debugger)
        self.emit('fungus version:', fungus_version)
        self.emit('Status:        ', text_status[self.debugger.status])
        self.emit('Pointer:       ', '({}, {})'.format(
            snapshot.x, snapshot.y))
        self.emit('Direction:     ', snapshot.direction.name)
        self.emit('String mode:   ', 'on' if snapshot.string_mode else 'off')

    def do_step(self, _):
        """ Single step the debugger """
        self.guarded(self.debugger.step)

    do_s = do_step

    def do_nstep(self, count):
        """ Take a number of steps: nstep count """
        try:
            count = str2int(count)
        except ValueError:
            self.emit('Usage: nstep count')
        else:
            self.guarded(self.debugger.nstep, count)

    def do_run(self, arg):
        """ Run until a breakpoint or the end: run [max_steps] """
        try:
            max_steps = str2int(arg) if arg.strip() else None
        except ValueError:
            self.emit('Usage: run [max_steps]')
        else:
            self.guarded(self.debugger.run, max_steps)

    def do_restart(self, _):
        """ Restart the program """
        self.debugger.restart()

    def do_stack(self, _):
        """ Show the stack, top first """
        stack = self.debugger.snapshot().stack
        if not stack:
            self.emit('<empty>')
        for value in reversed(stack):
            self.emit(value)

    def do_grid(self, _):
        """ Show the program with the pointer position """
        for line in render_grid(self.debugger.snapshot()):
            self.emit(line)

    def do_output(self, _):
        """ Show the program output so far """
        self.emit(self.debugger.output)

    def do_setbrk(self, arg):
        """ Set a breakpoint: setbrk x, y """
        cell = self.parse_cell(arg)
        if cell:
            self.debugger.set_breakpoint(*cell)

    def do_clrbrk(self, arg):
        """ Clear a breakpoint: clrbrk x, y """
        cell = self.parse_cell(arg)
        if cell:
            self.debugger.clear_breakpoint(*cell)

    def do_breakpoints(self, _):
        """ List all breakpoints """
        for x, y in sorted(self.debugger.breakpoints):
            self.emit('({}, {})'.format(x, y))

    def parse_cell(self, arg):
        try:
            x, y = map(str2int, arg.split(','))
        except ValueError:
            self.emit('Expected a cell as: x, y')
        else:
            return x, y

    def guarded(self, action, *args):
        """ Run a debugger action, reporting program errors """
        done = len(self.debugger.output)
        try:
            action(*args)
        except FungusError as ex:
            self.emit('Error: {}'.format(ex.msg))
        else:
            output = self.debugger.output[done:]
            if output:
                self.emit('Output:', repr(output))
