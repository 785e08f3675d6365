import os

from chimannot.align.segment import AlignmentSegment
from chimannot.annotate.genomic import Exon, Gene, Genes, Transcript
from chimannot.annotate.index import AnnotationIndex

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def get_data(filename):
    return os.path.join(DATA_DIR, filename)


def build_genes(*gene_defns):
    """
    build a gene store from simple definitions

    Args:
        gene_defns: tuples of (gene name, chr, strand, {transcript id: [(exon start, exon end), ...]})

    Returns:
        Tuple[Genes,AnnotationIndex]: the genes and their overlap index
    """
    genes = Genes()
    for name, chrom, strand, transcripts in gene_defns:
        positions = [pos for exons in transcripts.values() for exon in exons for pos in exon]
        gene = Gene(chrom, min(positions), max(positions), name=name, strand=strand)
        for transcript_id, exons in transcripts.items():
            gene.add_transcript(Transcript(transcript_id, [Exon(s, t, strand=strand) for s, t in exons], strand=strand))
        genes.add(gene)
    return genes, AnnotationIndex.build(genes)


def segment(chrom, start, end, strand, target_start, target_end, per_id=99, target='T1', alignment_id='a1'):
    return AlignmentSegment(
        chr=chrom, start=start, end=end, strand=strand, per_id=per_id,
        target=target, target_start=target_start, target_end=target_end, alignment_id=alignment_id)


def fusion_genes(*extra):
    """
    GENE_A (chr1:100-200,300-400 +) and GENE_B (chr1:1000-1100,1200-1300 +)
    """
    return build_genes(
        ('GENE_A', 'chr1', '+', {'TA1': [(100, 200), (300, 400)]}),
        ('GENE_B', 'chr1', '+', {'TB1': [(1000, 1100), (1200, 1300)]}),
        *extra
    )
