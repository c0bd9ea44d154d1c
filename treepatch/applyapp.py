# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import sys

from .args import ConfigBackedParser, add_generic_args, add_filename_args, add_output_args
from .log import PatchApplyError, PatchFormatError, info
from .patching import apply_patch, patch_from_json
from .utils import (
    EXPLICIT_MISSING_FILE, Printer, read_document, write_document, setup_std_streams,
    )


_description = "Apply a patch from treediff to a JSON document."


def main_apply(args):
    before_filename = args.before
    patch_filename = args.patch
    output_filename = args.output

    for fn in (before_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    try:
        before = read_document(before_filename)
        with io.open(patch_filename, encoding="utf8") as patch_file:
            patch = patch_from_json(patch_file.read())
        after = apply_patch(before, patch)
    except (PatchFormatError, PatchApplyError) as e:
        print("Cannot apply patch: {}".format(e))
        return 1
    except ValueError as e:
        print("Invalid JSON document: {}".format(e))
        return 1
    info("Applied %d patch entries to %s", len(patch), before_filename)

    if output_filename:
        write_document(after, output_filename, indent=args.indent)
    else:
        write_document(after, Printer(), indent=args.indent)

    return 0


def _build_arg_parser(prog='treeapply'):
    """Creates an argument parser for the treeapply command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_output_args(parser)
    add_filename_args(parser, ["before", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_apply(arguments)


if __name__ == "__main__":
    sys.exit(main())
