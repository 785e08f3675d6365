import argparse
import logging

from . import __version__
from .constants import cast_boolean, float_percent
from .fusion.constants import DEFAULTS as FUSION_DEFAULTS
from .util import filepath


class CustomHelpFormatter(argparse.ArgumentDefaultsHelpFormatter):
    """
    subclass the default help formatter to stop default printing for required arguments
    """

    def _format_args(self, action, default_metavar):
        if action.metavar is None:
            action.metavar = get_metavar(action.type)
        return super(CustomHelpFormatter, self)._format_args(action, default_metavar)

    def _get_help_string(self, action):
        if action.required:
            return action.help
        return super(CustomHelpFormatter, self)._get_help_string(action)

    def add_arguments(self, actions):
        # sort the arguments alphanumerically so they print in the help that way
        actions = sorted(actions, key=lambda x: getattr(x, 'option_strings'))
        super(CustomHelpFormatter, self).add_arguments(actions)


def get_metavar(arg_type):
    """
    For a given argument type, returns the string to be used for the metavar argument in add_argument

    Example:
        >>> get_metavar(bool)
        '{True,False}'
    """
    if arg_type in [bool, cast_boolean]:
        return '{True,False}'
    elif arg_type in [float_percent, float]:
        return 'FLOAT'
    elif arg_type == int:
        return 'INT'
    elif arg_type == filepath:
        return 'FILEPATH'
    return None


def augment_parser(arguments, parser, required=None):
    """
    Adds options to the argument parser. Separate function to facilitate the pipeline steps
    all having a similar look/feel
    """
    if required is None:
        required = set()

    for arg in arguments:
        if arg == 'help':
            parser.add_argument('-h', '--help', action='help', help='show this help message and exit')
        elif arg == 'version':
            parser.add_argument(
                '-v', '--version', action='version', version='%(prog)s version ' + __version__,
                help='Outputs the version number')
        elif arg == 'log':
            parser.add_argument('--log', help='redirect stdout to a log file', default=None)
        elif arg == 'log_level':
            parser.add_argument(
                '--log_level', help='level of logging to output', choices=['INFO', 'DEBUG'], default='INFO')
        elif arg == 'debug':
            parser.add_argument(
                '-D', '--debug', action='store_true', default=False,
                help='debug mode, extra verbose. Logs the intermediate alignment spans and junction mappings')
        elif arg == 'align_gff3':
            parser.add_argument(
                '--align_gff3', type=filepath, required=arg in required, metavar=get_metavar(filepath),
                help='gff3 alignment output. Alignments of a query transcript must be contiguous')
        elif arg == 'annot_gtf':
            parser.add_argument(
                '--annot_gtf', type=filepath, required=arg in required, metavar=get_metavar(filepath),
                help='transcript structures in gtf file format (may be gzipped)')
        elif arg == 'output':
            parser.add_argument(
                '-o', '--output', default=None, metavar='FILEPATH',
                help='path to the output file. The report is written to stdout when not given')
        elif arg in FUSION_DEFAULTS:
            value_type = FUSION_DEFAULTS.type(arg, type(FUSION_DEFAULTS[arg]))
            parser.add_argument(
                '--{}'.format(arg), default=FUSION_DEFAULTS[arg], type=value_type,
                help=FUSION_DEFAULTS.define(arg, ''), required=arg in required, metavar=get_metavar(value_type))
        else:
            raise KeyError('invalid argument', arg)


def log_level(args):
    """
    the logging level to use. Debug mode always logs everything
    """
    if args.get('debug', False):
        return logging.DEBUG
    return getattr(logging, args.get('log_level', 'INFO'))
