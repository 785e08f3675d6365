import itertools

from .constants import DEFAULTS
from .junction import map_to_annotated_exon_junctions
from ..align.segment import group_by_target
from ..align.span import build_span
from ..constants import COLUMNS, SENSE, SIDE
from ..error import SpanInconsistency
from ..util import DEVNULL


class FusionPrediction:
    """
    a pair of junction candidates (on different genes) supporting a fusion of the query transcript
    """

    def __init__(self, target, left, right, left_span, right_span, num_spans):
        """
        Args:
            target (str): the query transcript id
            left (JunctionCandidate): the 5' partner (sense orientation)
            right (JunctionCandidate): the 3' partner (sense orientation)
            left_span (AlignmentSpan): the span the left candidate was mapped from
            right_span (AlignmentSpan): the span the right candidate was mapped from
            num_spans (int): the number of spans retained for the query transcript
        """
        if left.gene_id == right.gene_id:
            raise AttributeError('a fusion cannot pair a gene with itself', left.gene_id)
        self.target = target
        self.left = left
        self.right = right
        self.left_span = left_span
        self.right_span = right_span
        self.num_spans = num_spans

    @property
    def score(self):
        """*int*: the combined distance of both breakpoints from their annotated exon boundaries"""
        return self.left.delta + self.right.delta

    @property
    def gene_pair(self):
        return '{}--{}'.format(self.left.gene_id, self.right.gene_id)

    def flatten(self):
        """
        Returns:
            dict: the report columns for this prediction
        """
        return {
            COLUMNS.transcript: self.target,
            COLUMNS.num_alignments: self.num_spans,
            COLUMNS.align_descr: ';'.join([self.left_span.describe(), self.right_span.describe()]),
            COLUMNS.chim_annot_mapping: ';'.join([str(c) for c in [
                self.left.gene_id, self.left.delta, self.left.trans_brkpt, self.left.genomic_breakpoint,
                self.right.gene_id, self.right.delta, self.right.trans_brkpt, self.right.genomic_breakpoint,
                self.gene_pair
            ]])
        }

    def report_line(self):
        row = self.flatten()
        return '\t'.join([str(row[col]) for col in COLUMNS.values()])

    def __repr__(self):
        return 'FusionPrediction({}, {}, score={})'.format(self.target, self.gene_pair, self.score)


def header_line():
    return '\t'.join(COLUMNS.values())


def pair_junction_candidates(left_possibilities, right_possibilities):
    """
    combine the candidates of a left and right span into gene pairs

    Pairs on the same gene are dropped as are pairs which disagree on orientation. Antisense pairs are swapped so
    that all pairs are given as if the alignment were in the sense orientation

    Yields:
        Tuple[JunctionCandidate,JunctionCandidate]: the 5' and 3' partners
    """
    for left, right in itertools.product(left_possibilities, right_possibilities):
        if left.gene_id == right.gene_id:
            continue
        if left.sense != right.sense:
            continue
        if left.sense == SENSE.ANTISENSE:
            left, right = right, left
        yield left, right


def select_best_predictions(predictions):
    """
    Returns:
        :class:`list` of :class:`FusionPrediction`: all predictions tied for the minimum score, in input order
    """
    if not predictions:
        return []
    min_score = min([pred.score for pred in predictions])
    return [pred for pred in predictions if pred.score == min_score]


def build_spans(target, alignments, min_per_id, log=DEVNULL):
    """
    build the spans of a query transcript and order them by their position on the query transcript

    Args:
        target (str): the query transcript id
        alignments (:class:`dict` of :class:`list` of :class:`AlignmentSegment` by :class:`str`): segments by alignment id
        min_per_id (float): spans with a percent identity below this are dropped

    Returns:
        Tuple[:class:`list` of :class:`AlignmentSpan`, :class:`list` of :class:`SpanInconsistency`]: the retained
        spans and the errors found
    """
    spans = []
    errors = []
    for segments in alignments.values():
        span = build_span(segments)
        if isinstance(span, SpanInconsistency):
            log.warning('error in alignment of {}: {}'.format(target, span), time_stamp=False)
            errors.append(span)
        elif span.per_id >= min_per_id:
            spans.append(span)
        else:
            log.debug('dropping low identity span', span)
    spans.sort(key=lambda x: x.target_start)
    return spans, errors


def evaluate_target_alignments(target, alignments, genes, index, min_per_id=DEFAULTS.min_per_id, log=DEVNULL):
    """
    evaluate all the alignments of a single query transcript for a fusion

    Args:
        target (str): the query transcript id
        alignments (:class:`dict` of :class:`list` of :class:`AlignmentSegment` by :class:`str`): segments by alignment id
        genes (Genes): the reference gene models
        index (AnnotationIndex): the overlap index of the gene models
        min_per_id (float): minimum percent identity (0-100) of a span to be considered

    Returns:
        Tuple[:class:`list` of :class:`FusionPrediction`, :class:`list` of :class:`SpanInconsistency`]: the best
        scoring predictions and the span errors encountered
    """
    if len(alignments) < 2:
        log.debug('skipping', target, 'as non chimeric candidate')
        return [], []

    spans, errors = build_spans(target, alignments, min_per_id, log=log)
    log.debug('target', target, 'has spans:', spans)

    predictions = []
    for i in range(1, len(spans)):
        left_span, right_span = spans[i - 1], spans[i]
        left_possibilities = map_to_annotated_exon_junctions(
            left_span, SIDE.LEFT, genes, index, span_index=i - 1, log=log)
        right_possibilities = map_to_annotated_exon_junctions(
            right_span, SIDE.RIGHT, genes, index, span_index=i, log=log)

        for left, right in pair_junction_candidates(left_possibilities, right_possibilities):
            predictions.append(FusionPrediction(
                target, left, right,
                left_span=spans[left.span_index],
                right_span=spans[right.span_index],
                num_spans=len(spans)
            ))
    return select_best_predictions(predictions), errors


class FusionEvaluator:
    """
    holds the reference models and the error count for a run and evaluates the query transcripts as they are
    streamed in
    """

    def __init__(self, genes, index, min_per_id=DEFAULTS.min_per_id, log=DEVNULL):
        self.genes = genes
        self.index = index
        self.min_per_id = min_per_id
        self.log = log
        self.error_count = 0

    def evaluate(self, target, alignments):
        """
        Returns:
            :class:`list` of :class:`FusionPrediction`: the best predictions for the query transcript
        """
        predictions, errors = evaluate_target_alignments(
            target, alignments, self.genes, self.index, min_per_id=self.min_per_id, log=self.log)
        self.error_count += len(errors)
        return predictions

    def process_alignments(self, segments):
        """
        Args:
            segments (Iterable[AlignmentSegment]): alignment segments, contiguous by query transcript

        Yields:
            FusionPrediction: the best predictions of each query transcript in input order
        """
        for target, alignments in group_by_target(segments):
            self.log.debug('evaluating', target)
            for prediction in self.evaluate(target, alignments):
                yield prediction
