# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

import jsonpatch
import jsonpointer

from .log import PatchApplyError, PatchFormatError
from .patch_format import to_json_patch, to_patch_entries, validate_patch


__all__ = ["apply_patch", "make_patch_document", "patch_from_json"]


def make_patch_document(patch):
    """Wrap a list of patch entries in a jsonpatch.JsonPatch document.

    The document can be serialized with .to_string() or applied
    with .apply(obj).
    """
    validate_patch(patch)
    return jsonpatch.JsonPatch(to_json_patch(patch))


def apply_patch(obj, patch):
    """Produce a patched copy of obj with given patch entries.

    obj itself is never modified. Raises PatchFormatError for malformed
    patches and PatchApplyError when an entry does not fit obj.
    """
    document = make_patch_document(patch)
    try:
        return document.apply(obj, in_place=False)
    except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as e:
        raise PatchApplyError(str(e)) from e


def patch_from_json(text):
    "Load and validate a patch from its JSON text."
    try:
        data = json.loads(text)
    except ValueError as e:
        raise PatchFormatError("Patch is not valid JSON: {}".format(e)) from e
    return to_patch_entries(data)
