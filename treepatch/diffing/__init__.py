# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import diff
from .models import populate, make_patch

__all__ = ["diff", "populate", "make_patch"]
