# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
The failures raised by `todo` when a value is absent or an error was never handled.
These are raised rather than returned: the call site is unfinished and is expected to be replaced by real handling.
'''

from typing import Any, NoReturn

from .meta import caller_src_loc, MetaprogrammingError, SrcLoc


none_msg = 'None handling not yet implemented'
err_msg_prefix = 'Err handling not yet implemented: '


class TodoError(NotImplementedError):
  '''
  Base class for failures raised by `todo`.
  `src_loc` is the location of the unfinished call site, if it could be determined.
  '''

  def __init__(self, msg:str, *, src_loc:SrcLoc|None=None) -> None:
    super().__init__(msg) # args is always exactly the message.
    self.src_loc = src_loc
    if src_loc is not None:
      self.add_note(f'todo call site: {src_loc}')

  def __reduce__(self) -> tuple:
    # The default rebuilds with `cls(*self.args)`, which does not match the subclass constructors.
    # Attributes, including `src_loc` and the notes, are restored from the instance dict.
    return (type(self), self._init_args(), self.__dict__)

  def _init_args(self) -> tuple:
    return self.args


class NoneTodo(TodoError):
  'Raised by `todo` when the value is absent.'

  def __init__(self, *, src_loc:SrcLoc|None=None) -> None:
    super().__init__(none_msg, src_loc=src_loc)

  def _init_args(self) -> tuple: return ()


class ErrTodo(TodoError):
  'Raised by `todo` when the value is an error; `err` is the original error payload.'

  def __init__(self, err:Any, *, src_loc:SrcLoc|None=None) -> None:
    super().__init__(err_msg_prefix + repr(err), src_loc=src_loc)
    self.err = err

  def _init_args(self) -> tuple: return (self.err,)


def todo_none(_steps:int=0) -> NoReturn:
  '''
  Raise `NoneTodo`, attributed to the caller.
  `_steps` is the number of additional frames to skip when the caller is itself a `todo` wrapper.
  '''
  raise NoneTodo(src_loc=_src_loc(_steps + 1))


def todo_err(err:Any, _steps:int=0) -> NoReturn:
  '''
  Raise `ErrTodo` for `err`, attributed to the caller.
  If `err` is an exception, it is chained as the cause so that the original traceback is shown.
  '''
  exc = ErrTodo(err, src_loc=_src_loc(_steps + 1))
  if isinstance(err, BaseException): raise exc from err
  raise exc


def _src_loc(steps:int) -> SrcLoc|None:
  try: return caller_src_loc(steps + 1)
  except MetaprogrammingError: return None # Stack too shallow.
