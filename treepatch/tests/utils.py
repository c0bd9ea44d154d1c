# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import jsonpatch

from treepatch import diff
from treepatch.diffing.comparing import values_equal
from treepatch.diffing.config import DiffConfig
from treepatch.patch_format import is_valid_patch, to_json_patch


def check_diff_and_patch(a, b):
    "Check that applying diff(a, b) to a reproduces b, leaving a and b intact."
    a0 = copy.deepcopy(a)
    b0 = copy.deepcopy(b)

    # Paths are kept as is, lower-casing would break applying
    # to documents with upper case keys
    d = diff(a, b, config=DiffConfig(lowercase_paths=False))
    assert is_valid_patch(d)

    result = jsonpatch.apply_patch(a, to_json_patch(d))
    assert values_equal(result, b)

    assert a == a0
    assert b == b0
    return d


def check_symmetric_diff_and_patch(a, b):
    "Check that diff and patch round-trips from a to b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)


def ops(patch):
    "Reduce a patch to (op, path) pairs for compact assertions."
    return [(e["op"], e["path"]) for e in patch]
