# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io

import colorama
import pytest

from treepatch import diff
from treepatch.log import PatchFormatError
from treepatch.patch_format import op_add, op_remove, op_replace
from treepatch.prettyprint import (
    PrettyPrintConfig, pretty_print_patch, pretty_print_patch_entry,
    pretty_print_document, pretty_print_file_patch,
)


def _config(use_color=False):
    return PrettyPrintConfig(out=io.StringIO(), use_color=use_color)


def test_pretty_print_entries():
    config = _config()
    pretty_print_patch([
        op_add("/items/-", {"id": 1, "tags": ["a"]}),
        op_remove("/old"),
        op_replace("", [1, 2]),
    ], config)
    text = config.out.getvalue()
    assert text == (
        "## appended /items:\n"
        "+  id: 1\n"
        "+  tags:\n"
        "+    [\"a\"]\n"
        "\n"
        "## deleted /old:\n"
        "-  old\n"
        "\n"
        "## replaced /:\n"
        "+  [1, 2]\n"
        "\n"
    )


def test_pretty_print_colors():
    config = _config(use_color=True)
    pretty_print_patch_entry(op_add("/a", None), config)
    text = config.out.getvalue()
    assert colorama.Fore.GREEN + "+  null" in text
    assert text.endswith(colorama.Style.RESET_ALL)


def test_pretty_print_unknown_op():
    with pytest.raises(PatchFormatError):
        pretty_print_patch_entry({"op": "move", "path": "/a"}, _config())


def test_pretty_print_file_patch_empty():
    config = _config()
    pretty_print_file_patch("a.json", "b.json", [], config)
    assert config.out.getvalue() == ""


def test_pretty_print_file_patch():
    config = _config()
    patch = diff({"a": 1}, {"a": 2})
    pretty_print_file_patch("a.json", "b.json", patch, config)
    lines = config.out.getvalue().splitlines()
    assert lines[0] == "treediff a.json b.json"
    assert lines[1] == "--- a.json  (no timestamp)"
    assert lines[2] == "+++ b.json  (no timestamp)"
    assert lines[3] == "## replaced /a:"
    assert lines[4] == "+  2"


def test_pretty_print_document():
    config = _config()
    pretty_print_document({"name": "x", "list": [], "nested": {"k": None}}, config)
    assert config.out.getvalue() == (
        "name: \"x\"\n"
        "list: []\n"
        "nested:\n"
        "  k: null\n"
    )
