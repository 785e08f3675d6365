"""
maps the ends of an alignment span onto the nearest annotated exon boundaries

Two options, depending on whether the alignment is sense or antisense to the gene (the antisense orientation
is just an artifact of strand-agnostic transcript assembly)

.. code-block:: text

             L                               R
           ------> gt...................ag -------->

      |=================>              |==================>
            gene A                            gene B

           <------ ......................<---------
              R                               L

- left span: the donor (3') of a sense gene A, or the acceptor (5') of an antisense gene B
- right span: the acceptor (5') of a sense gene B, or the donor (3') of an antisense gene A
"""
from ..constants import SENSE, SIDE
from ..interval import Interval
from ..util import DEVNULL


class JunctionCandidate:
    """
    the best matching exon boundary of a single gene for one end of an alignment span
    """

    def __init__(self, gene_id, delta, sense, exon, chr, pt_align, pt_exon, trans_brkpt, span_index=None):
        """
        Args:
            gene_id (str): the gene the matched exon belongs to
            delta (int): the genomic distance between the alignment breakpoint and the exon boundary
            sense (SENSE): orientation of the alignment relative to the gene
            exon (Exon): the exon matched
            chr (str): the chromosome of the alignment
            pt_align (int): the genomic breakpoint of the alignment
            pt_exon (int): the genomic position of the exon boundary
            trans_brkpt (int): the breakpoint wrt the query transcript
            span_index (int): the position of the alignment span in the ordered spans of the query transcript
        """
        self.gene_id = gene_id
        self.delta = delta
        self.sense = SENSE.enforce(sense)
        self.exon = exon
        self.chr = chr
        self.pt_align = pt_align
        self.pt_exon = pt_exon
        self.trans_brkpt = trans_brkpt
        self.span_index = span_index

    @property
    def genomic_breakpoint(self):
        return '{}:{}'.format(self.chr, self.pt_align)

    def __repr__(self):
        return 'JunctionCandidate({}, delta={}, {}, exon={}, brkpt={}, trans_brkpt={})'.format(
            self.gene_id, self.delta, self.sense, self.exon, self.genomic_breakpoint, self.trans_brkpt)


def compare_breakpoint(span, exon, side):
    """
    decide which end of the span is compared to which end of the exon

    Returns:
        Tuple[SENSE,int,int]: the orientation, the span coordinate and the exon coordinate
    """
    if exon.get_strand() == span.strand:
        if side == SIDE.LEFT:  # donor
            return SENSE.SENSE, span.end3, exon.end3
        return SENSE.SENSE, span.end5, exon.end5  # acceptor
    elif side == SIDE.LEFT:
        return SENSE.ANTISENSE, span.end3, exon.end5
    return SENSE.ANTISENSE, span.end5, exon.end3


def map_to_annotated_exon_junctions(span, side, genes, index, span_index=None, log=DEVNULL):
    """
    find, for every gene overlapping the span, the internal exon boundary closest to the breakpoint end of the span

    Args:
        span (AlignmentSpan): the alignment span
        side (SIDE): left if the span is the upstream alignment of the pair, right otherwise
        genes (Genes): the reference gene models
        index (AnnotationIndex): the overlap index of the gene models
        span_index (int): position of the span in the ordered spans of the query transcript, stored on the candidates

    Returns:
        :class:`list` of :class:`JunctionCandidate`: at most one candidate per gene (the one with the smallest delta)
        sorted by delta
    """
    SIDE.enforce(side)
    genome_to_trans = span.genome_to_transcript_mapping()
    hits = []

    for gene_id in sorted(index.query(span.chr, span.start, span.end)):
        gene = genes.get(span.chr, gene_id)
        for transcript in gene.transcripts.values():
            if not Interval.overlaps_interior(transcript, span.position):
                continue
            for exon in transcript.exons:
                if not Interval.overlaps_interior(exon, span.position):
                    continue
                sense, align_coord, exon_coord = compare_breakpoint(span, exon, side)
                if exon.terminal and transcript.is_outer_boundary(exon_coord):
                    continue
                hits.append(JunctionCandidate(
                    gene_id=gene_id,
                    delta=abs(align_coord - exon_coord),
                    sense=sense,
                    exon=exon,
                    chr=span.chr,
                    pt_align=align_coord,
                    pt_exon=exon_coord,
                    trans_brkpt=genome_to_trans[align_coord],
                    span_index=span_index
                ))

    hits.sort(key=lambda x: x.delta)
    seen = set()
    result = []
    for hit in hits:
        if hit.gene_id not in seen:
            result.append(hit)
            seen.add(hit.gene_id)
    log.debug(side, 'end of', span, 'maps to', result)
    return result
