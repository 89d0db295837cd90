# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from typing import Any, overload, TypeVar

from .option import NothingType, Some
from .panic import todo_err, todo_none
from .result import Err, Ok


_T = TypeVar('_T')


@overload
def todo(value:Some[_T]|NothingType) -> _T: ...

@overload
def todo(value:Ok[_T]|Err[Any]) -> _T: ...

@overload
def todo(value:_T|None) -> _T: ...

def todo(value:Any) -> Any:
  '''
  Unwrap a value in prototype code, where handling of the absent or error case is not yet written.
  Returns the present or success value;
  raises `NoneTodo` for None and `Nothing`, and `ErrTodo` for `Err`.
  Any other value is present, and is returned unchanged.
  Nested containers are unwrapped one layer per call.
  '''
  if value is None: todo_none(1)
  if isinstance(value, (Some, Ok)): return value.value
  if isinstance(value, NothingType): todo_none(1)
  if isinstance(value, Err): todo_err(value.err, 1)
  return value
