# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from unwrap_todo import Err, ErrTodo, NoneTodo, Nothing, Ok, Some, todo, TodoError
from utest import utest, utest_exc, utest_val


utest(5, todo, 5)
utest('hey man', todo, 'hey man')
utest(0, todo, 0) # Falsy values are present.
utest('', todo, '')
utest_exc(NoneTodo(), todo, None)

utest(5, todo, Some(5))
utest(None, todo, Some(None))
utest_exc(NoneTodo(), todo, Nothing)

utest('hey man', todo, Ok('hey man'))
utest_exc(ErrTodo(727), todo, Err(727))

# Nested containers unwrap one layer per call.
utest(Some(Ok('hey man')), todo, Some(Some(Ok('hey man'))))
utest_val('hey man', todo(todo(todo(Some(Some(Ok('hey man')))))), desc='todo chain')


def todo_msg(value) -> str:
  try: todo(value)
  except TodoError as e: return str(e)
  raise AssertionError(f'todo did not raise for {value!r}')

utest('None handling not yet implemented', todo_msg, None)
utest('None handling not yet implemented', todo_msg, Nothing)
utest('Err handling not yet implemented: 727', todo_msg, Err(727))
utest("Err handling not yet implemented: 'bad input'", todo_msg, Err('bad input'))
utest('Err handling not yet implemented: ()', todo_msg, Err(()))


# The failures are reported as unimplemented functionality.
utest(True, lambda: issubclass(NoneTodo, NotImplementedError))
utest(True, lambda: issubclass(ErrTodo, NotImplementedError))


# The call site is the line that called `todo`.

def call_site_of(value) -> tuple:
  try:
    todo(value)
  except TodoError as e:
    assert e.src_loc is not None
    tb = e.__traceback__
    assert tb is not None
    return (e.src_loc.path, e.src_loc.line, e.src_loc.function), (tb.tb_frame.f_code.co_filename, tb.tb_lineno, 'call_site_of')
  raise AssertionError(f'todo did not raise for {value!r}')

for value in [None, Nothing, Err(1)]:
  act, exp = call_site_of(value)
  utest_val(exp, act, desc=f'call site of todo({value!r})')


# Cleanup in enclosing scopes runs while the failure propagates.

def cleanup_log(value) -> list[str]:
  log:list[str] = []
  try:
    try:
      todo(value)
      log.append('unreachable')
    finally:
      log.append('finally')
  except TodoError:
    log.append('caught')
  return log

utest(['finally', 'caught'], cleanup_log, None)
utest(['finally', 'caught'], cleanup_log, Err(727))
