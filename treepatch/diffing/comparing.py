# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
from collections.abc import Mapping

from ..log import TreeDepthError


class ValueKind:
    "Collection of the kinds a JSON value can have."
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def value_kind(value):
    """Classify a json-like value.

    Booleans are checked before numbers since bool is an int subclass
    in Python, but never a number in JSON.
    """
    if value is None:
        return ValueKind.NULL
    elif isinstance(value, bool):
        return ValueKind.BOOLEAN
    elif isinstance(value, (int, float)):
        return ValueKind.NUMBER
    elif isinstance(value, str):
        return ValueKind.STRING
    elif isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    elif isinstance(value, Mapping):
        return ValueKind.OBJECT
    raise TypeError(
        "Can only diff json-like values, got {}.".format(type(value).__name__))


def _canonical(value):
    # Fold numbers so that 1 and 1.0 serialize identically
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, Mapping):
        return {k: _canonical(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_canonical(v) for v in value]
    return value


def canonical_form(value):
    """Serialize value to a canonical compact JSON string.

    Object keys are sorted, integral floats are written as integers
    and no insignificant whitespace is emitted, so two values have the
    same canonical form exactly when they hold the same content.
    """
    try:
        return json.dumps(_canonical(value), sort_keys=True,
                          separators=(",", ":"), ensure_ascii=False)
    except RecursionError:
        raise TreeDepthError("Value nested too deep to serialize.")


def values_equal(a, b):
    "Structural equality of two json-like values."
    # Cheap cutoff before serializing whole subtrees
    if value_kind(a) != value_kind(b):
        return False
    return canonical_form(a) == canonical_form(b)
