# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import get_defaults_for_argparse, build_config, entrypoint_configurables
from .log import init_logging, set_treepatch_log_level


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser taking its defaults from the treepatch config files.

    The entrypoint is the first word of prog, so subcommand parsers
    built with prog="treediff ..." find the treediff section.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        if entrypoint in entrypoint_configurables:
            self.set_defaults(**get_defaults_for_argparse(entrypoint))
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    "Set the treepatch log level, also when the option is left out."

    def __init__(self, option_strings, dest, default=None, **kwargs):
        # argparse only calls __call__ for options present on the command line
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_treepatch_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_treepatch_log_level(getattr(logging, values))


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    "Print the effective config of the running command to stderr, then exit."

    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        section = entrypoint_configurables[parser.prog].__name__
        printable = modify_config_for_print(build_config(parser.prog))
        pretty_print_dict({section: printable}, config=PrettyPrintConfig(out=sys.stderr))
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all treepatch commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds a set of arguments for commands that compute patches.
    """
    parser.add_argument(
        '--preserve-case',
        dest='lowercase_paths',
        action="store_false",
        default=True,
        help="keep the case of property names in patch paths instead "
             "of lower-casing them.")


def add_output_args(parser):
    """Adds arguments controlling how JSON output is written.
    """
    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help="indentation of written JSON.")


filename_help = {
    "before": "The original JSON document filename.",
    "after":  "The modified JSON document filename.",
    "patch":  "The patch filename, output from treediff.",
    }


def add_filename_args(parser, names):
    """Add the before, after and patch positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        **kwargs
    )


def diff_config_from_args(arguments):
    from .diffing.config import DiffConfig
    return DiffConfig(
        lowercase_paths=getattr(arguments, 'lowercase_paths', True),
    )
