""" Sources of input for a running program.

The interpreter asks an input source for a value when it executes the
``&`` and ``~`` instructions, and when it divides by zero. Input sources
may block until a value is available.
"""

import abc
import logging
from prompt_toolkit import prompt
from .tokens import DIGITS


class InputSource(metaclass=abc.ABCMeta):
    """ Input source interface """

    @abc.abstractmethod
    def read_int(self):
        """ Get the next integer """
        raise NotImplementedError()

    @abc.abstractmethod
    def read_char(self):
        """ Get the code of the next character """
        raise NotImplementedError()


class StreamInput(InputSource):
    """ Read input lazily from a text stream, a line at a time.

    Both read functions return -1 once the stream is exhausted.
    """
    logger = logging.getLogger('input')

    def __init__(self, f):
        self._f = f
        self._buffer = ''
        self._eof = False

    def _fill(self):
        """ Make sure there is something in the buffer, if possible """
        while not self._buffer and not self._eof:
            line = self.read_line()
            if line:
                self._buffer = line
            else:
                self.logger.debug('End of input reached')
                self._eof = True
        return bool(self._buffer)

    def read_line(self):
        """ Read one more line, an empty string signals end of input """
        return self._f.readline()

    def _peek(self):
        if self._fill():
            return self._buffer[0]

    def _take(self):
        c = self._peek()
        if c is not None:
            self._buffer = self._buffer[1:]
        return c

    def read_char(self):
        c = self._take()
        if c is None:
            return -1
        return ord(c)

    def read_int(self):
        negative = False
        # Skip anything that cannot start a number:
        while True:
            c = self._take()
            if c is None:
                return -1
            if c in DIGITS:
                break
            negative = c == '-'

        digits = [c]
        while self._peek() in DIGITS:
            digits.append(self._take())
        value = int(''.join(digits))
        return -value if negative else value


class BufferedInput(StreamInput):
    """ Input from a fixed text, useful for batch runs and tests """
    def __init__(self, text=''):
        super().__init__(None)
        self._buffer = text
        self._eof = True


class PromptInput(StreamInput):
    """ Ask the user for input interactively when it is needed """
    def __init__(self, message='input> '):
        super().__init__(None)
        self.message = message

    def read_line(self):
        try:
            return prompt(self.message) + '\n'
        except EOFError:
            return ''
