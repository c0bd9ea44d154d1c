# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, populate, make_patch
from .mapping import to_json_tree, ConversionError
from .patch_format import to_json_patch
from .patching import apply_patch, make_patch_document


__all__ = [
    "__version__",
    "diff", "populate", "make_patch",
    "to_json_tree", "ConversionError",
    "to_json_patch",
    "apply_patch", "make_patch_document",
    ]
