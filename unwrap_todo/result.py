# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
A fallible container: either `Ok` holding a success value, or `Err` holding a failure payload.
Python functions normally raise instead of returning errors; `attempt` captures a raising call as a fallible value.
'''

from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar

from .panic import todo_err


_T = TypeVar('_T')
_E = TypeVar('_E')


@dataclass(frozen=True, repr=False)
class Ok(Generic[_T]):
  'A success value.'
  value:_T

  def __repr__(self) -> str: return f'Ok({self.value!r})'

  def __bool__(self) -> bool: return True

  def todo(self) -> _T:
    return self.value


@dataclass(frozen=True, repr=False)
class Err(Generic[_E]):
  'A failure payload. The payload can be any value; its repr is used in diagnostics.'
  err:_E

  def __repr__(self) -> str: return f'Err({self.err!r})'

  def __bool__(self) -> bool: return False

  def todo(self, _steps:int=0) -> NoReturn:
    todo_err(self.err, _steps + 1)


def attempt(fn:Callable[..., _T], *args:Any, exc:type[BaseException]|tuple[type[BaseException],...]=Exception,
 **kwargs:Any) -> Ok[_T]|Err[BaseException]:
  '''
  Call `fn` with `args` and `kwargs`, returning `Ok` of the returned value,
  or `Err` of the raised exception if it is an instance of `exc`.
  Exceptions that do not match `exc` propagate.
  '''
  if not callable(fn): raise TypeError(f'attempt: fn must be callable; received: {fn!r}')
  try: ret = fn(*args, **kwargs)
  except exc as e: return Err(e)
  return Ok(ret)
