# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
unwrap_todo: unwrap optional and fallible values in prototype code,
failing loudly with a "not yet implemented" message where handling is still to be written.
'''

from .exit import ExitOnTodo
from .meta import caller_frame, caller_src_loc, MetaprogrammingError, SrcLoc
from .option import Nothing, NothingType, option, Some
from .panic import ErrTodo, NoneTodo, todo_err, todo_none, TodoError
from .result import attempt, Err, Ok
from .todo import todo
from .typing import Option, Result


__version__ = '0.1.0'
