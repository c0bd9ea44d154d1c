# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import json
import os
import sys

import colorama

from .log import PatchFormatError
from .patch_format import PatchOp


# Indentation offset in pretty-print
IND = "  "

# Max line width used for deciding whether a list fits on one line
MAXWIDTH = 78

PATCH_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(" ")
    else:
        return "(no timestamp)"


def format_value(v):
    "Format a scalar as JSON text."
    return json.dumps(v, ensure_ascii=False)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, prefix+IND, config)
    elif isinstance(v, list) and v:
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        pretty_print_key_value(k, format_value(v), prefix, config)


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = json.dumps(li, ensure_ascii=False)
    if len(listr) < MAXWIDTH - len(prefix):
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          nested: value

    Keys are printed in their own order, which for json
    documents is the order they were written in.
    """
    for k, v in d.items():
        pretty_print_item(k, v, prefix, config)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed."""
    if isinstance(value, dict) and value:
        pretty_print_dict(value, prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        config.out.write("%s%s\n" % (prefix, format_value(value)))


def pretty_print_patch_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path or "/", config.RESET))


def pretty_print_patch_entry(e, config=DefaultConfig):
    op = e["op"]
    path = e["path"]

    if op == PatchOp.ADD:
        if path.endswith("/-"):
            pretty_print_patch_action("appended", path[:-2], config)
        else:
            pretty_print_patch_action("added", path, config)
        pretty_print_value(e["value"], config.ADD, config)

    elif op == PatchOp.REMOVE:
        pretty_print_patch_action("deleted", path, config)
        config.out.write("%s%s\n" % (config.REMOVE, path.rsplit("/", 1)[-1]))

    elif op == PatchOp.REPLACE:
        pretty_print_patch_action("replaced", path, config)
        pretty_print_value(e["value"], config.ADD, config)

    else:
        raise PatchFormatError("Unknown patch op {}".format(op))

    config.out.write(PATCH_ENTRY_END + config.RESET)


def pretty_print_patch(patch, config=DefaultConfig):
    "Pretty-print a list of patch entries."
    for e in patch:
        pretty_print_patch_entry(e, config)


patch_header = """\
treediff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_file_patch(afn, bfn, patch, config=DefaultConfig):
    """Pretty-print the patch between two json files

    Parameters
    ----------

    afn: str
        Filename of the before document
    bfn: str
        Filename of the after document
    patch: list
        The patch entries describing the transformation from before to after
    config: PrettyPrintConfig
        Config object determining where and how output is written
    """
    if patch:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(patch_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_patch(patch, config)


def pretty_print_document(doc, config=DefaultConfig):
    "Pretty-print a json document, e.g. the result of applying a patch."
    pretty_print_value(doc, "", config)
