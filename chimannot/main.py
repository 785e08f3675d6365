#!python
import argparse
import logging
import platform
import sys
import time

from . import __version__
from . import config as _config
from . import util as _util
from .align.segment import read_alignments
from .annotate.file_io import load_annotations
from .annotate.index import AnnotationIndex
from .constants import EXIT_OK, ChimNamespace
from .fusion.constants import DEFAULTS as FUSION_DEFAULTS
from .fusion.evaluate import FusionEvaluator, header_line


def run(align_gff3, annot_gtf, output_fh, min_per_id=FUSION_DEFAULTS.min_per_id, log=_util.LOG, **kwargs):
    """
    map the alignments of the candidate fusion transcripts onto the reference annotation and write the report

    Args:
        align_gff3 (str): path to the gff3 alignments
        annot_gtf (str): path to the gtf reference annotation
        output_fh: file handle the report is written to
        min_per_id (float): minimum percent identity of an alignment span

    Returns:
        FusionEvaluator: the evaluator used, holds the error count for the run
    """
    genes = load_annotations(annot_gtf, log=log)
    index = AnnotationIndex.build(genes, log=log)

    log('mapping candidate fusion transcripts to gene annotations', time_stamp=True)
    evaluator = FusionEvaluator(genes, index, min_per_id=min_per_id, log=log)
    output_fh.write(header_line() + '\n')

    log('loading alignment data:', align_gff3, time_stamp=True)
    with open(align_gff3, 'r') as fh:
        for prediction in evaluator.process_alignments(read_alignments(fh)):
            output_fh.write(prediction.report_line() + '\n')

    if evaluator.error_count:
        log.warning('*** {} alignment errors were identified.'.format(evaluator.error_count), time_stamp=False)
    return evaluator


def main(argv=None):
    """
    sets up the parser and checks the validity of command line args, then runs the fusion mapping

    Args:
        argv (list): List of arguments, defaults to command line arguments
    """
    if argv is None:  # need to do at run time or patching will not behave as expected
        argv = sys.argv[1:]
    start_time = int(time.time())

    parser = argparse.ArgumentParser(formatter_class=_config.CustomHelpFormatter, add_help=False)
    required = parser.add_argument_group('required arguments')
    optional = parser.add_argument_group('optional arguments')
    _config.augment_parser(['align_gff3', 'annot_gtf'], required, required={'align_gff3', 'annot_gtf'})
    _config.augment_parser(
        ['help', 'version', 'log', 'log_level', 'debug', 'output'] + list(FUSION_DEFAULTS.keys()), optional)

    args = ChimNamespace(**parser.parse_args(argv).__dict__)

    log_conf = {'format': '{message}', 'style': '{', 'level': _config.log_level(args)}

    original_logging_handlers = logging.root.handlers[:]
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    if args.log:  # redirect the logging to a file
        log_conf['filename'] = args.log
    logging.basicConfig(**log_conf)

    _util.LOG('chimannot: {}'.format(__version__))
    _util.LOG('hostname:', platform.node(), time_stamp=False)
    _util.log_arguments(args)

    output = args.output
    log_to_file = args.log
    for init_arg in ['log', 'log_level', 'debug', 'output']:
        args.discard(init_arg)

    output_fh = sys.stdout if output is None else open(output, 'w')
    try:
        run(**args, output_fh=output_fh, log=_util.LOG)

        duration = int(time.time()) - start_time
        hours = duration - duration % 3600
        minutes = duration - hours - (duration - hours) % 60
        seconds = duration - hours - minutes
        _util.LOG(
            'run time (hh/mm/ss): {}:{:02d}:{:02d}'.format(hours // 3600, minutes // 60, seconds),
            time_stamp=False)
        _util.LOG('run time (s): {}'.format(duration), time_stamp=False)
        return EXIT_OK
    except Exception as err:
        if log_to_file:
            logging.exception(err)  # capture the error in the logging output file
        raise err
    finally:
        if output is not None:
            output_fh.close()
        else:
            output_fh.flush()
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        for handler in original_logging_handlers:
            logging.root.addHandler(handler)


if __name__ == '__main__':
    sys.exit(main())
