#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, pathsep, walk
from os.path import join as path_join
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  # Test scripts import the package from the working tree.
  env['PYTHONPATH'] = pathsep.join(p for p in (getcwd(), environ.get('PYTHONPATH')) if p)

  ok = True
  for path in walk_ut_files(args.paths):
    print(path)
    c = run([executable, path], env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_ut_files(paths:list[str]) -> list[str]:
  'Return the sorted `.ut.py` file paths found under `paths`, skipping hidden directories.'
  found = []
  for root in paths:
    if root.endswith('.ut.py'):
      found.append(root)
      continue
    for dir_path, dir_names, file_names in walk(root):
      dir_names[:] = [n for n in dir_names if not n.startswith('.')]
      found.extend(path_join(dir_path, n) for n in file_names if n.endswith('.ut.py'))
  return sorted(found)


if __name__ == '__main__': main()
