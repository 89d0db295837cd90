# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='unwrap-todo',
  version='0.1.0',
  description='Unwrap optional and fallible values in prototype code, failing loudly where handling is not yet written.',
  long_description=open('readme.md').read(),
  long_description_content_type='text/markdown',
  license='CC0-1.0',
  python_requires='>=3.11',

  packages=['unwrap_todo'],
  extras_require={
    'test': ['utest'],
  },
)
