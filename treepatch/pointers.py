# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Pointer construction and normalization for emitted patches.

While diffing, a location is carried as a tuple of segments and only
serialized when an entry is emitted. Serialization follows RFC 6901,
so segments containing '~' or '/' are escaped.
"""

from jsonpointer import JsonPointer

# Segment addressing the position after the last array element
APPEND_MARKER = "-"

ROOT = ()


def child_path(parts, segment):
    "Extend a segment tuple with one more property name or index."
    return parts + (str(segment),)


def format_pointer(parts):
    "Join segments on the form ('foo', '0') into '/foo/0'."
    return JsonPointer.from_parts(list(parts)).path


def split_pointer(path):
    "Split a pointer on the form '/foo/0' into ['foo', '0']."
    return JsonPointer(path).parts


def normalize_path(path):
    return path.lower()


def normalize_paths(patch):
    """Return a copy of patch with every entry path lower-cased.

    Values are left untouched, only the addressing is folded.
    """
    normalized = []
    for e in patch:
        e = e.__class__(e)
        e["path"] = normalize_path(e["path"])
        normalized.append(e)
    return normalized
