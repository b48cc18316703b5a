""" Debugger module """

from .debugger import Debugger, DebugState
from .cli import DebugCli


__all__ = ['Debugger', 'DebugState', 'DebugCli']
