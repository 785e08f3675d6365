from collections import OrderedDict
import unittest

from chimannot.align.segment import read_alignments
from chimannot.annotate.file_io import load_annotations
from chimannot.annotate.index import AnnotationIndex
from chimannot.constants import SENSE
from chimannot.fusion.evaluate import (
    build_spans, evaluate_target_alignments, FusionEvaluator, FusionPrediction, header_line,
    pair_junction_candidates, select_best_predictions
)
from chimannot.fusion.junction import JunctionCandidate

from ..util import fusion_genes, get_data, segment


def alignments(*segments):
    result = OrderedDict()
    for seg in segments:
        result.setdefault(seg.alignment_id, []).append(seg)
    return result


def candidate(gene_id, delta=0, sense=SENSE.SENSE):
    return JunctionCandidate(gene_id, delta, sense, None, 'chr1', 100, 100, 1)


class TestPairJunctionCandidates(unittest.TestCase):

    def test_same_gene_rejected(self):
        pairs = list(pair_junction_candidates([candidate('A')], [candidate('A'), candidate('B')]))
        self.assertEqual([('A', 'B')], [(l.gene_id, r.gene_id) for l, r in pairs])

    def test_orientation_mismatch_rejected(self):
        pairs = list(pair_junction_candidates([candidate('A')], [candidate('B', sense=SENSE.ANTISENSE)]))
        self.assertEqual([], pairs)

    def test_antisense_swapped(self):
        pairs = list(pair_junction_candidates(
            [candidate('B', sense=SENSE.ANTISENSE)], [candidate('A', sense=SENSE.ANTISENSE)]))
        self.assertEqual([('A', 'B')], [(l.gene_id, r.gene_id) for l, r in pairs])

    def test_product_order(self):
        pairs = list(pair_junction_candidates([candidate('A'), candidate('B')], [candidate('C'), candidate('D')]))
        self.assertEqual(
            [('A', 'C'), ('A', 'D'), ('B', 'C'), ('B', 'D')], [(l.gene_id, r.gene_id) for l, r in pairs])


class TestSelectBestPredictions(unittest.TestCase):

    def test_empty(self):
        self.assertEqual([], select_best_predictions([]))

    def test_ties_kept_in_order(self):
        preds = [
            FusionPrediction('T1', candidate('A', 1), candidate('B', 1), None, None, 2),
            FusionPrediction('T1', candidate('A', 0), candidate('C', 3), None, None, 2),
            FusionPrediction('T1', candidate('A', 2), candidate('D', 0), None, None, 2),
        ]
        best = select_best_predictions(preds)
        self.assertEqual(['A--B', 'A--D'], [p.gene_pair for p in best])


class TestFusionPrediction(unittest.TestCase):

    def test_self_pair_error(self):
        with self.assertRaises(AttributeError):
            FusionPrediction('T1', candidate('A'), candidate('A'), None, None, 2)

    def test_header_line(self):
        self.assertEqual('#transcript\tnum_alignments\talign_descr(s)\t[chim_annot_mapping]', header_line())


class TestBuildSpans(unittest.TestCase):

    def test_ordered_by_transcript_position(self):
        spans, errors = build_spans('T1', alignments(
            segment('chr1', 1200, 1300, '+', 102, 201, alignment_id='a1'),
            segment('chr1', 100, 200, '+', 1, 101, alignment_id='a2'),
        ), 80)
        self.assertEqual([], errors)
        self.assertEqual(['a2', 'a1'], [s.alignment_id for s in spans])

    def test_low_identity_dropped(self):
        spans, errors = build_spans('T1', alignments(
            segment('chr1', 100, 200, '+', 1, 101, alignment_id='a1'),
            segment('chr1', 1200, 1300, '+', 102, 201, per_id=79.9, alignment_id='a2'),
        ), 80)
        self.assertEqual(['a1'], [s.alignment_id for s in spans])
        self.assertEqual([], errors)

    def test_identity_at_threshold_kept(self):
        spans, _ = build_spans('T1', alignments(segment('chr1', 100, 200, '+', 1, 101, per_id=80)), 80)
        self.assertEqual(1, len(spans))

    def test_inconsistent_span(self):
        spans, errors = build_spans('T1', alignments(
            segment('chr1', 100, 200, '+', 1, 101, alignment_id='a1'),
            segment('chr2', 300, 400, '+', 102, 201, alignment_id='a1'),
            segment('chr1', 1200, 1300, '+', 202, 301, alignment_id='a2'),
        ), 80)
        self.assertEqual(['a2'], [s.alignment_id for s in spans])
        self.assertEqual(1, len(errors))
        self.assertEqual('a1', errors[0].alignment_id)


class TestEvaluateTargetAlignments(unittest.TestCase):

    def setUp(self):
        self.genes, self.index = fusion_genes()

    def evaluate(self, aligns, genes=None, index=None, min_per_id=80):
        return evaluate_target_alignments(
            'T1', aligns, genes or self.genes, index or self.index, min_per_id=min_per_id)

    def test_single_alignment(self):
        self.assertEqual(([], []), self.evaluate(alignments(segment('chr1', 100, 200, '+', 1, 101))))

    def test_fusion(self):
        preds, errors = self.evaluate(alignments(
            segment('chr1', 100, 200, '+', 1, 101, alignment_id='a1'),
            segment('chr1', 1200, 1300, '+', 102, 201, per_id=98, alignment_id='a2'),
        ))
        self.assertEqual([], errors)
        self.assertEqual(1, len(preds))
        pred = preds[0]
        self.assertEqual('GENE_A--GENE_B', pred.gene_pair)
        self.assertEqual(0, pred.score)
        self.assertEqual(
            'T1\t2\t[chr1:(1-101)100-200 (+) 99.00%];[chr1:(102-201)1200-1300 (+) 98.00%]\t'
            'GENE_A;0;101;chr1:200;GENE_B;0;102;chr1:1200;GENE_A--GENE_B',
            pred.report_line()
        )

    def test_self_fusion_rejected(self):
        preds, _ = self.evaluate(alignments(
            segment('chr1', 100, 200, '+', 1, 101, alignment_id='a1'),
            segment('chr1', 300, 400, '+', 102, 201, alignment_id='a2'),
        ))
        self.assertEqual([], preds)

    def test_antisense_fusion(self):
        preds, _ = self.evaluate(alignments(
            segment('chr1', 1200, 1300, '-', 1, 101, alignment_id='a1'),
            segment('chr1', 100, 200, '-', 102, 201, alignment_id='a2'),
        ))
        self.assertEqual(1, len(preds))
        pred = preds[0]
        self.assertEqual('GENE_A--GENE_B', pred.gene_pair)
        self.assertEqual(102, pred.left.trans_brkpt)
        self.assertEqual(101, pred.right.trans_brkpt)
        self.assertEqual('a2', pred.left_span.alignment_id)
        self.assertEqual('a1', pred.right_span.alignment_id)

    def test_orientation_mismatch_rejected(self):
        genes, index = fusion_genes(('GENE_R', 'chr1', '-', {'TR1': [(1100, 1150), (1200, 1300), (1400, 1500)]}))
        preds, _ = self.evaluate(alignments(
            segment('chr1', 100, 200, '+', 1, 101, alignment_id='a1'),
            segment('chr1', 1200, 1300, '+', 102, 201, alignment_id='a2'),
        ), genes, index)
        self.assertEqual(['GENE_A--GENE_B'], [p.gene_pair for p in preds])

    def test_ties_all_reported(self):
        genes, index = fusion_genes(('GENE_C', 'chr1', '+', {'TC1': [(1150, 1180), (1200, 1300), (1400, 1500)]}))
        preds, _ = self.evaluate(alignments(
            segment('chr1', 100, 200, '+', 1, 101, alignment_id='a1'),
            segment('chr1', 1200, 1300, '+', 102, 201, alignment_id='a2'),
        ), genes, index)
        self.assertEqual(['GENE_A--GENE_B', 'GENE_A--GENE_C'], [p.gene_pair for p in preds])

    def test_minimum_score_selected(self):
        genes, index = fusion_genes(('GENE_C', 'chr1', '+', {'TC1': [(1150, 1180), (1210, 1300), (1400, 1500)]}))
        preds, _ = self.evaluate(alignments(
            segment('chr1', 100, 200, '+', 1, 101, alignment_id='a1'),
            segment('chr1', 1200, 1300, '+', 102, 201, alignment_id='a2'),
        ), genes, index)
        self.assertEqual(['GENE_A--GENE_B'], [p.gene_pair for p in preds])

    def test_low_identity_span_not_paired(self):
        preds, _ = self.evaluate(alignments(
            segment('chr1', 100, 200, '+', 1, 101, alignment_id='a1'),
            segment('chr1', 1200, 1300, '+', 102, 201, per_id=50, alignment_id='a2'),
        ))
        self.assertEqual([], preds)

    def test_low_identity_span_skipped_between(self):
        preds, _ = self.evaluate(alignments(
            segment('chr1', 100, 200, '+', 1, 101, alignment_id='a1'),
            segment('chr2', 5000, 5050, '+', 102, 150, per_id=50, alignment_id='a2'),
            segment('chr1', 1200, 1300, '+', 151, 250, alignment_id='a3'),
        ))
        self.assertEqual(1, len(preds))
        self.assertEqual(2, preds[0].num_spans)
        self.assertEqual(151, preds[0].right.trans_brkpt)


class TestFusionEvaluator(unittest.TestCase):

    def test_error_count(self):
        genes, index = fusion_genes()
        evaluator = FusionEvaluator(genes, index, min_per_id=80)
        preds = evaluator.evaluate('T1', alignments(
            segment('chr1', 100, 200, '+', 1, 101, alignment_id='a1'),
            segment('chr1', 1200, 1300, '+', 102, 201, alignment_id='a2'),
            segment('chr1', 2000, 2100, '+', 202, 301, alignment_id='a3'),
            segment('chr2', 3000, 3100, '+', 302, 401, alignment_id='a3'),
        ))
        self.assertEqual(['GENE_A--GENE_B'], [p.gene_pair for p in preds])
        self.assertEqual(1, evaluator.error_count)

    def test_process_alignments(self):
        genes = load_annotations(get_data('mock_annotations.gtf'))
        evaluator = FusionEvaluator(genes, AnnotationIndex.build(genes))
        with open(get_data('mock_alignments.gff3')) as fh:
            preds = list(evaluator.process_alignments(read_alignments(fh)))
        self.assertEqual(['T1', 'T6'], [p.target for p in preds])
        self.assertEqual(['GENE_A--GENE_B', 'GENE_A--GENE_B'], [p.gene_pair for p in preds])
        self.assertEqual(1, evaluator.error_count)
