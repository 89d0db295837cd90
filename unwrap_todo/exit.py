# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from contextlib import AbstractContextManager, ContextDecorator
from sys import exit
from traceback import print_exception

from .panic import TodoError
from .typing import OptBaseExc, OptTraceback, OptTypeBaseExc


class ExitOnTodo(AbstractContextManager, ContextDecorator):
  '''
  Context manager to exit the process when an unhandled `todo` failure escapes the block.
  The message, prefixed with the call site, is written to stderr and the exit status is 1.
  If `dbg` is set, the full traceback is printed first.
  Other exceptions are not affected.

  This context manager can also be used as a decorator, e.g. on a script's `main` function.
  '''

  def __init__(self, dbg:bool=False) -> None:
    self.dbg = dbg

  def __enter__(self):
    pass

  def __exit__(self, exc_type:OptTypeBaseExc, exc_value:OptBaseExc, traceback:OptTraceback) -> None:
    if not isinstance(exc_value, TodoError): return
    if self.dbg: print_exception(exc_value)
    exit(exit_msg(exc_value))


def exit_msg(exc:TodoError) -> str:
  'Format the single-line diagnostic for `exc`.'
  if exc.src_loc is None: return f'todo: {exc}'
  return f'todo: {exc.src_loc.path}:{exc.src_loc.line}: {exc}'
