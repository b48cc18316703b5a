""" A Befunge interpreter implemented in pure Python.

Example usage:

>>> from fungus.api import run_program
>>> interpreter = run_program('55+.@', output=None)
>>> interpreter.is_running
False

"""

import sys

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 2, 0)
__version__ = '.'.join(map(str, __version_info__))

# Assert python version:
assert sys.version_info.major == 3, "Needs to be run in python version 3.x"
