import numpy as np

from ..constants import STRAND
from ..error import SpanInconsistency
from ..interval import Interval


class AlignmentSpan:
    """
    a contiguous alignment block of a query transcript. Built from all segments sharing an alignment id
    """

    def __init__(self, chr, start, end, strand, target_start, target_end, per_id, alignment_id=None, segment_count=1):
        """
        Args:
            chr (str): the chromosome
            start (int): the minimum genomic position covered by any segment
            end (int): the maximum genomic position covered by any segment
            strand (str): the strand of the alignment
            target_start (int): the minimum query transcript position covered by any segment
            target_end (int): the maximum query transcript position covered by any segment
            per_id (float): the length weighted percent identity of the segments
            alignment_id (str): the id of the alignment the span was built from
            segment_count (int): the number of segments merged into this span
        """
        self.chr = chr
        self.position = Interval(start, end)
        self.strand = strand
        self.target_position = Interval(target_start, target_end)
        self.per_id = per_id
        self.alignment_id = alignment_id
        self.segment_count = segment_count

    @property
    def start(self):
        return self.position.start

    @property
    def end(self):
        return self.position.end

    @property
    def target_start(self):
        return self.target_position.start

    @property
    def target_end(self):
        return self.target_position.end

    @property
    def end5(self):
        """*int*: the genomic position aligned to the 5' end of the span (wrt the query transcript)"""
        return self.start if self.strand == STRAND.POS else self.end

    @property
    def end3(self):
        """*int*: the genomic position aligned to the 3' end of the span (wrt the query transcript)"""
        return self.end if self.strand == STRAND.POS else self.start

    def genome_to_transcript_mapping(self):
        """
        :class:`dict` of :class:`int` by :class:`int`: the query transcript position of the 5' and 3' genomic ends
        """
        return {self.end5: self.target_start, self.end3: self.target_end}

    def describe(self):
        """
        Example:
            >>> AlignmentSpan('chr1', 100, 200, '+', 1, 101, 99.5).describe()
            '[chr1:(1-101)100-200 (+) 99.50%]'
        """
        return '[{}:({}-{}){}-{} ({}) {:.2f}%]'.format(
            self.chr, self.target_start, self.target_end, self.start, self.end, self.strand, self.per_id)

    def __repr__(self):
        return 'AlignmentSpan({}, {}:{}-{}{}, target={}-{}, per_id={:.2f}, segments={})'.format(
            self.alignment_id, self.chr, self.start, self.end, self.strand,
            self.target_start, self.target_end, self.per_id, self.segment_count)


def weighted_percent_identity(segments):
    """
    the percent identity of the segments weighted by the genomic length of each segment, rounded to 2 decimals.
    For example segments of length 10 and 20 with 90% and 99% identity give (10 * 90 + 20 * 99) / 30 = 96.0
    """
    weights = [len(seg.position) for seg in segments]
    return round(float(np.average([seg.per_id for seg in segments], weights=weights)), 2)


def build_span(segments):
    """
    merge the segments of a single alignment into a span

    Args:
        segments (:class:`list` of :class:`~chimannot.align.segment.AlignmentSegment`): segments sharing an alignment id

    Returns:
        Union[AlignmentSpan,SpanInconsistency]: the span, or the inconsistency when the segments disagree on the
        chromosome or the strand
    """
    if not segments:
        raise AttributeError('cannot build a span from an empty set of segments')
    alignment_id = segments[0].alignment_id

    for attr in ['chr', 'strand']:
        values = {getattr(seg, attr) for seg in segments}
        if len(values) > 1:
            return SpanInconsistency(alignment_id, attr, values)

    position = Interval.union(*[seg.position for seg in segments])
    target_position = Interval.union(*[seg.target_position for seg in segments])

    return AlignmentSpan(
        chr=segments[0].chr,
        start=position.start,
        end=position.end,
        strand=segments[0].strand,
        target_start=target_position.start,
        target_end=target_position.end,
        per_id=weighted_percent_identity(segments),
        alignment_id=alignment_id,
        segment_count=len(segments)
    )
