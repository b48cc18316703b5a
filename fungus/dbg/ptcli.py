""" Full screen debugger using prompt_toolkit. """

import logging
from prompt_toolkit import __version__ as ptk_version
from prompt_toolkit import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit, Window, VSplit
from prompt_toolkit.layout.controls import BufferControl
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style, merge_styles
from prompt_toolkit.styles.pygments import style_from_pygments_cls
from prompt_toolkit.widgets import Frame
from pygments.styles import get_style_by_name

from .. import __version__ as fungus_version
from ..common import logformat, FungusError
from .debugger import display_char


debugger_style = Style.from_dict({
    'pointer': 'reverse bold',
    'breakpoint': 'bg:ansired',
    'status': 'reverse',
    'title': 'bold',
})


class BufferLogHandler(logging.Handler):
    """ Handle log messages by putting them into a buffer """
    def __init__(self, buf):
        super().__init__()
        self._buf = buf

    def emit(self, record):
        txt = self.format(record)
        self._buf.text = txt + '\n' + self._buf.text


class PtDebugCli:
    """ Full screen debugger interface using prompt_toolkit. """
    logger = logging.getLogger('dbg')

    def __init__(self, debugger, input=None, output=None):
        self.debugger = debugger
        self.logs_buffer = Buffer(multiline=True)
        kb = KeyBindings()

        if not ptk_version.startswith('3.'):
            self.logger.warning(
                'We require prompt toolkit version 3.x, found %s',
                ptk_version)

        @kb.add(Keys.F10, eager=True)
        def quit_(event):
            event.app.exit()

        @kb.add(Keys.F9)
        def restart_(event):
            self.debugger.restart()

        @kb.add(Keys.F8)
        def clear_breakpoint_(event):
            self.debugger.clear_breakpoint(*self.debugger.get_pointer())

        @kb.add(Keys.F7)
        def set_breakpoint_(event):
            self.debugger.set_breakpoint(*self.debugger.get_pointer())

        @kb.add(Keys.F6)
        def step_(event):
            self.guarded(self.debugger.step)

        @kb.add(Keys.F5)
        def run_(event):
            self.guarded(self.debugger.run)

        title_text = (
            'Welcome to the fungus debugger version {} running in '
            'prompt_toolkit {}'.format(fungus_version, ptk_version))

        help_text = (
            'F5=run F6=step F7=set breakpoint F8=clear breakpoint '
            'F9=restart F10=exit')

        grid_window = Window(
            content=FormattedTextControl(self.get_grid_tokens),
            wrap_lines=False)
        stack_window = Window(
            content=FormattedTextControl(self.get_stack_tokens), width=13)
        output_window = Window(
            content=FormattedTextControl(self.get_output_tokens),
            wrap_lines=True)

        # Application layout:
        body = HSplit([
            Window(
                content=FormattedTextControl(
                    [('class:title', title_text)]),
                height=1),
            VSplit([
                Frame(body=grid_window, title='program'),
                Frame(body=stack_window, title='stack'),
            ]),
            Frame(body=output_window, title='output', height=8),
            Window(
                content=BufferControl(buffer=self.logs_buffer), height=2),
            Window(
                content=FormattedTextControl(self.get_status_tokens),
                height=1),
            Window(content=FormattedTextControl(help_text), height=1),
        ])
        layout = Layout(body)

        style = merge_styles([
            style_from_pygments_cls(get_style_by_name('vim')),
            debugger_style,
        ])

        self.log_handler = BufferLogHandler(self.logs_buffer)
        self.log_handler.setFormatter(logging.Formatter(fmt=logformat))
        self.log_handler.setLevel(logging.INFO)

        self.application = Application(
            layout=layout, style=style, key_bindings=kb, full_screen=True,
            input=input, output=output)
        self.debugger.events.on_stop += self.on_stop

    def cmdloop(self):
        root_logger = logging.getLogger()
        root_logger.addHandler(self.log_handler)
        try:
            self.application.run()
        finally:
            root_logger.removeHandler(self.log_handler)

    def guarded(self, action):
        """ Run a debugger action, logging program errors """
        try:
            action()
        except FungusError as ex:
            self.logger.error('Program error: %s', ex.msg)

    def on_stop(self):
        """ Handle stopped event. """
        self.application.invalidate()

    def get_grid_tokens(self):
        snapshot = self.debugger.snapshot()
        breakpoints = self.debugger.breakpoints
        tokens = []
        for y, line in enumerate(snapshot.grid):
            for x, c in enumerate(line):
                if (x, y) == (snapshot.x, snapshot.y):
                    style = 'class:pointer'
                elif (x, y) in breakpoints:
                    style = 'class:breakpoint'
                else:
                    style = ''
                tokens.append((style, display_char(c)))
            if y == snapshot.y and snapshot.x >= len(line):
                # The pointer is beyond the stored row content
                tokens.append(('', ' ' * (snapshot.x - len(line))))
                tokens.append(('class:pointer', ' '))
            tokens.append(('', '\n'))
        return tokens

    def get_stack_tokens(self):
        stack = self.debugger.snapshot().stack
        return [('', '{}\n'.format(value)) for value in reversed(stack)]

    def get_output_tokens(self):
        return [
            ('class:title', 'Last output: '),
            ('', '{}\n'.format(self.debugger.last_output)),
            ('class:title', 'Cumulative output:\n'),
            ('', self.debugger.output),
        ]

    def get_status_tokens(self):
        snapshot = self.debugger.snapshot()
        tokens = []
        tokens.append(
            ('class:status', 'STATUS={} '.format(self.debugger.status.name)))
        tokens.append(
            ('class:status', 'POINTER=({}, {}) '.format(
                snapshot.x, snapshot.y)))
        tokens.append(
            ('class:status', 'DIRECTION={} '.format(
                snapshot.direction.name)))
        if snapshot.string_mode:
            tokens.append(('class:status', 'STRING MODE '))
        return tokens
