# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import inspect
from types import FrameType
from typing import NamedTuple


class MetaprogrammingError(Exception): pass


class SrcLoc(NamedTuple):
  'A source location: file path, line number, and the name of the enclosing function.'
  path:str
  line:int
  function:str

  def __str__(self) -> str: return f'{self.path}:{self.line} in {self.function}'


def caller_frame(steps:int) -> FrameType:
  '''
  Returns the call frame `steps` above the immediate caller.
  steps=0 is useful when calling this function from the module scope.
  steps=1 is useful when calling this function from a function that wants to know about its own caller.
  '''
  if steps < 0: raise ValueError(f'steps must be nonnegative; received: {steps!r}')
  f = inspect.currentframe() # This frame.
  if f is None: raise MetaprogrammingError('no current frame')
  f = f.f_back # Immediate caller's frame.
  if f is None: raise MetaprogrammingError('no caller frame')
  for i in range(steps):
    p = f
    f = f.f_back
    if f is None: raise MetaprogrammingError(f'no caller frame (step {i+1}); previous: {p!r}')
  return f


def caller_src_loc(steps:int) -> SrcLoc:
  '''
  Returns the source location of the frame `steps` above the immediate caller.
  The line is the line currently executing in that frame, i.e. the line of the pending call.
  '''
  f = caller_frame(steps + 1) # Skip this frame.
  return SrcLoc(f.f_code.co_filename, f.f_lineno, f.f_code.co_name)
