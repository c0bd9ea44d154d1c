# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from .log import PatchFormatError
from .pointers import format_pointer


class PatchEntry(dict):
    """For internal usage in treepatch library.

    Minimal class providing attribute access to patch entry keys.

    Entries stay plain dicts underneath, so a list of them can be
    passed to json.dump or to a JSON Patch engine as is.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"


def op_add(path, value):
    "Create a patch entry to add value at path."
    return PatchEntry(op=PatchOp.ADD, path=path, value=value)

def op_remove(path):
    "Create a patch entry to remove the value at path."
    return PatchEntry(op=PatchOp.REMOVE, path=path)

def op_replace(path, value):
    "Create a patch entry to replace the value at path with given value."
    return PatchEntry(op=PatchOp.REPLACE, path=path, value=value)


class PatchBuilder(object):
    """Ordered accumulator of patch entries.

    Paths are given as sequences of pointer segments and serialized
    on append. Values are deep-copied so the emitted patch never
    shares structure with the trees it was computed from.
    """

    OPS = (
        PatchOp.ADD,
        PatchOp.REMOVE,
        PatchOp.REPLACE,
        )

    def __init__(self, patch=None):
        self._patch = [] if patch is None else patch

    def validated(self):
        "Return the accumulated entries after checking they are well formed."
        validate_patch(self._patch)
        return self._patch

    def append(self, entry):
        # Simplifies some algorithms
        if entry is None:
            return

        # Typechecking (just for internal consistency checking)
        assert isinstance(entry, PatchEntry)
        assert "op" in entry
        assert entry.op in PatchBuilder.OPS
        assert isinstance(entry.path, str)

        self._patch.append(entry)

    def add(self, parts, value):
        self.append(op_add(format_pointer(parts), copy.deepcopy(value)))

    def remove(self, parts):
        self.append(op_remove(format_pointer(parts)))

    def replace(self, parts, value):
        self.append(op_replace(format_pointer(parts), copy.deepcopy(value)))


def is_valid_patch(patch):
    """Checks whether a patch (list of patch entries) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(patch)
    except PatchFormatError:
        return False
    return True


def validate_patch(patch):
    """Check whether a patch (list of patch entries) is well formed.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(patch, list):
        raise PatchFormatError("Patch must be a list.")
    for e in patch:
        validate_patch_entry(e)


def validate_patch_entry(e):
    """Check that e is a well formed add/remove/replace entry.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(e, dict):
        raise PatchFormatError("Patch entry '{}' is not a mapping.".format(e))

    op = e.get("op")
    if op not in PatchBuilder.OPS:
        raise PatchFormatError("Unknown patch op '{}'.".format(op))

    path = e.get("path")
    if not isinstance(path, str):
        raise PatchFormatError(
            "Patch entry path must be a string, not '{}'.".format(path))
    if path and not path.startswith("/"):
        raise PatchFormatError(
            "Patch entry path '{}' must be empty or start with '/'.".format(path))

    if op == PatchOp.REMOVE:
        if "value" in e:
            raise PatchFormatError("remove entry at '{}' carries a value.".format(path))
    elif "value" not in e:
        raise PatchFormatError("{} entry at '{}' is missing a value.".format(op, path))

    extra = set(e) - {"op", "path", "value"}
    if extra:
        raise PatchFormatError(
            "Unexpected keys {} in patch entry at '{}'.".format(sorted(extra), path))


def to_json_patch(patch):
    "Convert a list of patch entries to plain dicts, e.g. for json.dump."
    return [dict(e) for e in patch]


def to_patch_entries(patch):
    "Convert a list of plain dicts (e.g. from json.load) to validated patch entries."
    if not isinstance(patch, list):
        raise PatchFormatError("Patch must be a list.")
    entries = [PatchEntry(e) if isinstance(e, dict) else e for e in patch]
    validate_patch(entries)
    return entries
