#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

TREEPATCH_PATH = HERE / "treepatch"


def get_version(path):
    "Read __version__ from a module without importing it."
    with open(path) as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M)
    return match.group(1)


VERSION = get_version(TREEPATCH_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='treepatch',
      version=VERSION,
      description='Compute RFC 6902 JSON Patches between two JSON-like trees',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.8',
      packages=find_packages(include=['treepatch', 'treepatch.*']),
      package_data={'treepatch': ['*.schema.json']},
      install_requires=[
          'colorama',
          'jsonpatch>=1.33',
          'jsonpointer>=2.0',
          'pydantic-core>=2.10',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'pytest>=7',
              'pytest-timeout',
              'jsonschema',
              'pydantic>=2',
          ],
      },
      entry_points={
          'console_scripts': [
              'treepatch = treepatch.__main__:main_dispatch',
              'treediff = treepatch.diffapp:main',
              'treeapply = treepatch.applyapp:main',
          ],
      },
    )
