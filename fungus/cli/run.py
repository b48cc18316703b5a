""" Befunge interpreter.

Run a befunge program:

.. code::

    $ fungus-run hello.bf

Or step through it in the full screen debugger:

.. code::

    $ fungus-run --debug hello.bf

"""

import argparse
import logging
import random
import sys
from .base import base_parser, LogSetup
from ..api import load_program
from ..dbg import Debugger, DebugCli
from ..dbg.ptcli import PtDebugCli
from ..inputs import BufferedInput, PromptInput, StreamInput
from ..interpreter import Interpreter


parser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    parents=[base_parser])
parser.add_argument(
    'program', help='the befunge program file to run')
parser.add_argument(
    '--debug', '-d', action='store_true', default=False,
    help='Runs the program in the full screen debugger')
parser.add_argument(
    '--console', action='store_true', default=False,
    help='Use the line based debugger instead of the full screen one')
parser.add_argument(
    '--input', metavar='input-file', type=argparse.FileType('r'),
    help='Read program input from this file instead of the terminal')
parser.add_argument(
    '--seed', type=int, help='Seed for the random direction instruction')
parser.add_argument(
    '--max-steps', type=int, metavar='N',
    help='Stop the program after this many steps')


def get_input_source(args):
    """ Select where the program reads its input from """
    if args.input:
        return BufferedInput(args.input.read())
    elif args.debug:
        logging.getLogger('run').warning(
            'No input file given, the program will see an empty input')
        return BufferedInput()
    elif sys.stdin.isatty():
        return PromptInput()
    else:
        return StreamInput(sys.stdin)


def run(args=None):
    """ Run a befunge program from the command line """
    args = parser.parse_args(args)
    with LogSetup(args):
        logger = logging.getLogger('run')
        with open(args.program, 'r', newline='') as f:
            grid = load_program(f)
        rng = random.Random(args.seed)
        interpreter = Interpreter(
            grid, get_input_source(args), rng=rng, filename=args.program)
        interpreter.verbose = args.verbose > 1
        if args.debug:
            debugger = Debugger(interpreter)
            if args.console:
                DebugCli(debugger).cmdloop()
            else:
                PtDebugCli(debugger).cmdloop()
        else:
            steps = interpreter.run(
                max_steps=args.max_steps, output=sys.stdout)
            sys.stdout.flush()
            if interpreter.is_running:
                logger.warning('Stopped after %s steps', steps)
            else:
                logger.info('Program finished after %s steps', steps)


if __name__ == '__main__':
    run()
