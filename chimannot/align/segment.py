"""
reading of the spliced alignments (gff3) and grouping of their segments by query transcript and alignment
"""
from collections import OrderedDict
import re

from ..error import AlignmentFormatError
from ..interval import Interval

GFF3_COLUMNS = ['chr', 'source', 'type', 'start', 'end', 'per_id', 'strand', 'phase', 'attributes']


class AlignmentSegment:
    """
    a single exon-level alignment record. Segments sharing the same alignment id are parts of one
    contiguous (spliced) alignment of the target transcript
    """

    def __init__(self, chr, start, end, strand, per_id, target, target_start, target_end, alignment_id):
        """
        Args:
            chr (str): the chromosome the segment is aligned to
            start (int): the genomic start (1-based inclusive)
            end (int): the genomic end (1-based inclusive)
            strand (str): the strand of the alignment
            per_id (float): percent identity (0-100)
            target (str): the query transcript id
            target_start (int): start of the aligned range wrt the query transcript
            target_end (int): end of the aligned range wrt the query transcript
            alignment_id (str): the alignment this segment is a part of
        """
        self.chr = chr
        self.start = int(start)
        self.end = int(end)
        self.strand = strand
        self.per_id = float(per_id)
        self.target = target
        self.target_start = int(target_start)
        self.target_end = int(target_end)
        self.alignment_id = alignment_id

    @property
    def position(self):
        return Interval(min(self.start, self.end), max(self.start, self.end))

    @property
    def target_position(self):
        return Interval(min(self.target_start, self.target_end), max(self.target_start, self.target_end))

    def __repr__(self):
        return 'AlignmentSegment({}:{}-{}{} {} {}:{}-{} {}%)'.format(
            self.chr, self.start, self.end, self.strand, self.alignment_id,
            self.target, self.target_start, self.target_end, self.per_id)


def parse_gff3_attributes(attributes):
    """
    Example:
        >>> parse_gff3_attributes('ID=align.1;Target=t1 1 101 +')
        {'ID': 'align.1', 'Target': 't1 1 101 +'}
    """
    result = {}
    for keyval in attributes.split(';'):
        if not keyval.strip():
            continue
        key, _, val = keyval.partition('=')
        result[key.strip()] = val
    return result


def parse_gff3_line(line):
    """
    convert a single row of the gff3 alignments into a segment

    Raises:
        AlignmentFormatError: when the row is missing columns or attributes or its start is after its end
    """
    fields = line.split('\t')
    if len(fields) < len(GFF3_COLUMNS):
        raise AlignmentFormatError(
            'expected {} tab-delimited columns but found {}'.format(len(GFF3_COLUMNS), len(fields)), line)
    row = dict(zip(GFF3_COLUMNS, fields))
    attributes = parse_gff3_attributes(row['attributes'])
    for attr in ['ID', 'Target']:
        if attr not in attributes:
            raise AlignmentFormatError('missing required attribute: {}'.format(attr), line)
    target = attributes['Target'].split()
    if len(target) < 3:
        raise AlignmentFormatError('Target attribute must give the id, start and end of the query transcript', line)
    try:
        segment = AlignmentSegment(
            chr=row['chr'],
            start=row['start'],
            end=row['end'],
            strand=row['strand'],
            per_id=row['per_id'],
            target=target[0],
            target_start=target[1],
            target_end=target[2],
            alignment_id=attributes['ID']
        )
    except ValueError as err:
        raise AlignmentFormatError('non-numeric value in alignment row: {}'.format(err), line)
    if segment.start > segment.end:
        raise AlignmentFormatError('alignment start is after the end', line)
    return segment


def read_alignments(fh):
    """
    Args:
        fh: file handle (or any iterable of lines) of the gff3 alignments

    Yields:
        AlignmentSegment: one per alignment row, comment and blank lines are skipped
    """
    for line_number, line in enumerate(fh, start=1):
        line = line.rstrip('\n\r')
        if line.startswith('#') or not re.search(r'\w', line):
            continue
        try:
            yield parse_gff3_line(line)
        except AlignmentFormatError as err:
            raise AlignmentFormatError('line {}: {}'.format(line_number, err.args[0]), *err.args[1:])


def group_by_target(segments):
    """
    streams the segments and yields the alignments of each target transcript as soon as a new target is seen.

    The input must have all segments of a target contiguous. A target which appears again later in the
    input is yielded again as a separate group

    Args:
        segments (Iterable[AlignmentSegment]): the alignment segments

    Yields:
        Tuple[str,OrderedDict]: the target id and the segments of each alignment keyed by alignment id (in the
        order the alignments were first seen)
    """
    current_target = None
    alignments = OrderedDict()
    for segment in segments:
        if alignments and segment.target != current_target:
            yield current_target, alignments
            alignments = OrderedDict()
        current_target = segment.target
        alignments.setdefault(segment.alignment_id, []).append(segment)
    if alignments:
        yield current_target, alignments
