# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
An explicit optional container.
Plain `T|None` values work with `todo` directly;
`Some` and `Nothing` are needed when the present value can itself be None or another optional.
'''

from dataclasses import dataclass
from enum import Enum
from typing import final, Generic, NoReturn, TypeVar

from .panic import todo_none


_T = TypeVar('_T')


@dataclass(frozen=True, repr=False)
class Some(Generic[_T]):
  'A present value.'
  value:_T

  def __repr__(self) -> str: return f'Some({self.value!r})'

  def __bool__(self) -> bool: return True

  def todo(self) -> _T:
    return self.value


@final
class NothingType(Enum):
  '''
  Singleton class for the absent value, `Nothing`.
  Like None, it is falsy; unlike None, it is distinct from a present value of None, i.e. `Some(None)`.
  '''
  Nothing = 0

  def __repr__(self) -> str: return 'Nothing'

  def __bool__(self) -> bool: return False

  def todo(self, _steps:int=0) -> NoReturn:
    todo_none(_steps + 1)


Nothing = NothingType.Nothing


def option(optional:_T|None) -> Some[_T]|NothingType:
  'Convert an implicit optional into `Some` or `Nothing`.'
  if optional is None: return Nothing
  return Some(optional)
