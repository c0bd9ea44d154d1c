# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_output_args, add_prettyprint_args,
    add_filename_args, ConfigBackedParser, prettyprint_config_from_args,
    diff_config_from_args,
    )
from .diffing import diff
from .log import TreeDepthError, info
from .patch_format import to_json_patch
from .prettyprint import pretty_print_file_patch
from .utils import (
    EXPLICIT_MISSING_FILE, Printer, read_document, write_document, setup_std_streams,
    )


_description = "Compute the JSON Patch between two JSON documents."


def main_diff(args):
    """Main handler of diff CLI"""
    before = args.before
    after = args.after
    output = getattr(args, 'out', None)

    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (before, after):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1
    assert not (before == EXPLICIT_MISSING_FILE and after == EXPLICIT_MISSING_FILE), (
        'cannot diff %r against %r' % (before, after))

    try:
        a = read_document(before)
        b = read_document(after)
    except ValueError as e:
        print("Invalid JSON document: {}".format(e))
        return 1

    try:
        patch = diff(a, b, config=diff_config_from_args(args))
    except TreeDepthError as e:
        print(str(e))
        return 1
    info("Patch from %s to %s has %d entries", before, after, len(patch))

    if output:
        write_document(to_json_patch(patch), output, indent=args.indent)
    elif args.json:
        write_document(to_json_patch(patch), Printer(), indent=args.indent)
    else:
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_file_patch(before, after, patch, config)

    return 0


def _build_arg_parser(prog='treediff'):
    """Creates an argument parser for the treediff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_output_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["before", "after"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the patch is written to this file. "
             "Otherwise it is printed to the terminal.")
    parser.add_argument(
        '--json',
        action="store_true",
        default=False,
        help="print the patch as JSON instead of a readable summary.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
