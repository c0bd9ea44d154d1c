# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from ..log import TreeDepthError
from ..pointers import format_pointer


def default_max_depth():
    """Deepest nesting the recursive differ walks under the current recursion limit.

    Every level costs two frames (diff_value and a container differ), and
    some headroom is left for the caller's own stack.
    """
    return max(sys.getrecursionlimit() // 3, 1)


class DiffConfig:
    """Set of differs/options to pass around during a diff"""

    def __init__(self, *, array_differ=None, lowercase_paths=True, max_depth=None):
        if array_differ is None:
            from .generic import diff_arrays
            array_differ = diff_arrays
        if max_depth is None:
            max_depth = default_max_depth()

        self.array_differ = array_differ
        self.lowercase_paths = lowercase_paths
        self.max_depth = max_depth

    def check_depth(self, path):
        "Raise TreeDepthError when path is nested deeper than max_depth."
        if len(path) > self.max_depth:
            raise TreeDepthError(
                "Tree nested deeper than {} levels below '{}/...'.".format(
                    self.max_depth, format_pointer(path[:8])))
