""" Options and logging setup shared by the command line tools. """

import argparse
import logging
import platform
import sys
from .. import __version__
from ..common import logformat, FungusError


version_text = 'fungus {} befunge interpreter, {} {} on {}'.format(
    __version__, platform.python_implementation(), platform.python_version(),
    platform.platform())


def log_level(name):
    """ Turn a level name such as 'info' or a number into a logging level """
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError('Invalid log level: {}'.format(name))
    return level


class OnceAction(argparse.Action):
    """ Store an option value, refusing a second occurrence """
    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest, None) is not None:
            raise argparse.ArgumentError(
                self, '{} can only be given once'.format(option_string))
        setattr(namespace, self.dest, values)


base_parser = argparse.ArgumentParser(add_help=False)
base_parser.add_argument(
    '--log', help='Console log level (debug, info, warning, error)',
    metavar='log-level', type=log_level, default='warning')
base_parser.add_argument(
    '--report', metavar='report-file', action=OnceAction,
    help='Write the complete log to this file',
    type=argparse.FileType('w'))
base_parser.add_argument(
    '--verbose', '-v', action='count', default=0,
    help='Log debug messages, give twice to trace every instruction')
base_parser.add_argument(
    '--version', '-V', action='version', version=version_text,
    help='Display version and exit')


class ColoredFormatter(logging.Formatter):
    """ Log formatter that wraps messages in vt100 color codes """
    level_colors = {
        logging.DEBUG: 36,
        logging.WARNING: 33,
        logging.ERROR: 31,
        logging.CRITICAL: 35,
    }

    def format(self, record):
        msg = super().format(record)
        color = self.level_colors.get(record.levelno)
        if color is None:
            return msg
        return '\033[1;{}m{}\033[0m'.format(color, msg)


class LogSetup:
    """ Context manager that attaches log handlers while a tool runs.

    Program errors and unreadable files raised inside the block are
    reported and turned into exit status 1.
    """
    def __init__(self, args):
        self.args = args
        self.logger = logging.getLogger()
        self.handlers = []

    def __enter__(self):
        self.logger.setLevel(logging.DEBUG)
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter(logformat))
        if self.args.verbose:
            console_handler.setLevel(logging.DEBUG)
        else:
            console_handler.setLevel(self.args.log)
        self.handlers.append(console_handler)

        if self.args.report:
            report_handler = logging.StreamHandler(self.args.report)
            report_handler.setFormatter(logging.Formatter(logformat))
            self.handlers.append(report_handler)

        for handler in self.handlers:
            self.logger.addHandler(handler)
        self.logger.debug('Log handlers attached')
        self.logger.info(version_text)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        failed = self.report(exc_value)

        self.logger.debug('Detaching log handlers')
        for handler in self.handlers:
            self.logger.removeHandler(handler)
        self.handlers = []
        if self.args.report:
            self.args.report.close()

        if failed:
            sys.exit(1)

    def report(self, exc):
        """ Log an error that ends the tool, return whether there was one """
        if isinstance(exc, FungusError):
            self.logger.error(exc.msg)
            if exc.loc:
                self.logger.error('at %s', exc.loc)
            exc.print(file=sys.stderr)
        elif isinstance(exc, FileNotFoundError):
            self.logger.error('File not found %s', exc)
        elif isinstance(exc, (OSError, UnicodeDecodeError)):
            self.logger.error('Cannot read program: %s', exc)
        else:
            return False
        return True
