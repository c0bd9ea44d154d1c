# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..log import TreeDepthError, debug
from ..patch_format import PatchBuilder
from ..pointers import ROOT, APPEND_MARKER, child_path, normalize_paths

from .comparing import ValueKind, value_kind, values_equal
from .config import DiffConfig

__all__ = ["diff", "diff_root", "diff_value", "diff_objects", "diff_arrays"]


def diff(a, b, config=None):
    """Compute the JSON Patch transforming json-like value a into b.

    Returns a list of add/remove/replace entries which, applied in
    order to a, reproduce b. Paths are lower-cased unless the config
    says otherwise.
    """
    if config is None:
        config = DiffConfig()

    di = PatchBuilder()
    diff_root(a, b, di, config)
    patch = di.validated()

    debug("Computed patch with %d entries", len(patch))
    if config.lowercase_paths:
        patch = normalize_paths(patch)
    return patch


def diff_root(a, b, di, config):
    """Diff a against b at the document root, appending entries to di.

    Running out of interpreter stack is reported as TreeDepthError,
    like nesting beyond config.max_depth.
    """
    try:
        diff_value(a, b, ROOT, di, config)
    except RecursionError:
        raise TreeDepthError(
            "Tree nested too deep to diff with the current recursion limit.")


def diff_value(a, b, path, di, config):
    """Emit entries for a single location, dispatching on value kind.

    A change of kind replaces the whole value without looking inside.
    Containers are never compared as a whole, equal subtrees simply
    produce no entries while being walked.
    """
    config.check_depth(path)

    kind = value_kind(a)
    if kind != value_kind(b):
        di.replace(path, b)
    elif kind == ValueKind.OBJECT:
        diff_objects(a, b, path, di, config)
    elif kind == ValueKind.ARRAY:
        config.array_differ(a, b, path, di, config)
    elif not values_equal(a, b):
        di.replace(path, b)


def diff_objects(a, b, path, di, config):
    """Compute diff of two mappings.

    Removed keys come first in the order of a, then added keys in the
    order of b, then keys present in both in the order of a. Added
    values are emitted whole, shared keys are diffed recursively.
    """
    for key in a:
        if key not in b:
            di.remove(child_path(path, key))

    for key in b:
        if key not in a:
            di.add(child_path(path, key), b[key])

    for key in a:
        if key in b:
            diff_value(a[key], b[key], child_path(path, key), di, config)


def diff_arrays(a, b, path, di, config):
    """Compute a positional diff of two sequences.

    Items are compared index by index. Surplus items in a are removed
    starting from the last index, so that every removal still points
    at an existing element. Surplus items in b are appended in order.
    No attempt is made to detect insertions or moves.
    """
    n = min(len(a), len(b))
    for i in range(n):
        diff_value(a[i], b[i], child_path(path, i), di, config)

    for i in reversed(range(n, len(a))):
        di.remove(child_path(path, i))

    for value in b[n:]:
        di.add(child_path(path, APPEND_MARKER), value)
