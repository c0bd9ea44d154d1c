# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Diffing of domain objects.

The objects are first converted to json trees, then diffed
with the generic differ starting at the root object.
"""

from ..log import debug
from ..mapping import to_json_object
from ..patch_format import PatchBuilder
from ..pointers import normalize_paths

from .config import DiffConfig
from .generic import diff_root

__all__ = ["populate", "make_patch"]


def populate(patch, original, modified, config=None):
    """Populate patch with entries which, applied to original, produce modified.

    original and modified are domain objects of the same shape (pydantic
    models, dataclasses, mappings or plain objects). Entries are appended
    to the list patch, after which every path in the list is lower-cased
    unless config says otherwise.
    """
    if config is None:
        config = DiffConfig()

    a = to_json_object(original)
    b = to_json_object(modified)

    before = len(patch)
    diff_root(a, b, PatchBuilder(patch), config)
    debug("Populated patch with %d entries for %s",
          len(patch) - before, type(original).__name__)

    if not patch:
        return
    if config.lowercase_paths:
        patch[:] = normalize_paths(patch)


def make_patch(original, modified, config=None):
    "Return a new patch transforming domain object original into modified."
    patch = []
    populate(patch, original, modified, config=config)
    return patch
