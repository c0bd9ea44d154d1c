# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Conversion of domain objects to json-like value trees.

Serialization is delegated to pydantic-core, which handles pydantic
models, dataclasses, enums, datetimes, UUIDs, mappings and sequences.
Plain objects are converted through their public attributes.
"""

from collections.abc import Mapping

from pydantic_core import PydanticSerializationError, to_jsonable_python

from .log import debug


class ConversionError(TypeError):
    pass


def _public_attributes(obj):
    try:
        attributes = vars(obj)
    except TypeError:
        raise ConversionError(
            "Cannot convert object of type {} to json.".format(type(obj).__name__))
    return {k: v for k, v in attributes.items() if not k.startswith("_")}


def to_json_tree(obj, by_alias=True, exclude_none=False):
    """Convert obj to a tree of dicts, lists and scalars.

    Raises ConversionError if some part of obj has no json representation.
    """
    try:
        return to_jsonable_python(
            obj,
            by_alias=by_alias,
            exclude_none=exclude_none,
            fallback=_public_attributes,
        )
    except ConversionError:
        raise
    except (PydanticSerializationError, TypeError, ValueError) as e:
        debug("Conversion of %s failed: %s", type(obj).__name__, e)
        raise ConversionError(
            "Cannot convert object of type {} to json: {}".format(
                type(obj).__name__, e)) from e


def to_json_object(obj, **kwargs):
    "Convert obj like to_json_tree, requiring the result to be a json object."
    tree = to_json_tree(obj, **kwargs)
    if not isinstance(tree, Mapping):
        raise ConversionError(
            "Expected {} to convert to a json object, got {}.".format(
                type(obj).__name__, type(tree).__name__))
    return tree
