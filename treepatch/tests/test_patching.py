# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

import jsonpatch
import pytest

from treepatch import apply_patch, diff, make_patch_document
from treepatch.log import PatchApplyError, PatchFormatError
from treepatch.patch_format import op_add, op_remove, op_replace
from treepatch.patching import patch_from_json


def test_apply_patch():
    doc = {"a": 1, "list": [1, 2, 3], "obj": {"x": "y"}}
    patch = [
        op_remove("/a"),
        op_add("/b", 2),
        op_replace("/obj/x", "z"),
        op_remove("/list/2"),
        op_remove("/list/1"),
        op_add("/list/-", 7),
    ]
    assert apply_patch(doc, patch) == {"b": 2, "list": [1, 7], "obj": {"x": "z"}}

    # Input is not modified
    assert doc == {"a": 1, "list": [1, 2, 3], "obj": {"x": "y"}}


def test_apply_patch_replace_root():
    assert apply_patch({"a": 1}, [op_replace("", [1, 2])]) == [1, 2]


def test_apply_diff_reproduces_target():
    a = {"name": "a", "items": [{"id": 1}, {"id": 2}, {"id": 3}], "gone": True}
    b = {"name": "b", "items": [{"id": 1, "new": []}], "extra": {"k": None}}
    assert apply_patch(a, diff(a, b)) == b


def test_apply_patch_errors():
    with pytest.raises(PatchApplyError):
        apply_patch({"a": 1}, [op_remove("/missing")])
    with pytest.raises(PatchApplyError):
        apply_patch({"a": [1]}, [op_remove("/a/5")])
    with pytest.raises(PatchFormatError):
        apply_patch({"a": 1}, [{"op": "copy", "from": "/a", "path": "/b"}])


def test_make_patch_document():
    patch = diff({"a": [1, 2]}, {"a": [1, 2, 3], "b": "c"})
    document = make_patch_document(patch)
    assert isinstance(document, jsonpatch.JsonPatch)
    assert json.loads(document.to_string()) == [
        {"op": "add", "path": "/b", "value": "c"},
        {"op": "add", "path": "/a/-", "value": 3},
    ]
    assert document.apply({"a": [1, 2]}) == {"a": [1, 2, 3], "b": "c"}


def test_patch_from_json():
    patch = patch_from_json('[{"op": "replace", "path": "/x", "value": 2}]')
    assert patch == [op_replace("/x", 2)]
    assert patch[0].op == "replace"

    with pytest.raises(PatchFormatError):
        patch_from_json('[{"op": "replace", ')
    with pytest.raises(PatchFormatError):
        patch_from_json('{"op": "replace", "path": "/x", "value": 2}')
