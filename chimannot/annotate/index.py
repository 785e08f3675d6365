from intervaltree import IntervalTree

from ..interval import Interval
from ..util import DEVNULL


class AnnotationIndex:
    """
    per chromosome interval trees over the genomic extent of the reference genes, used to find the genes an
    alignment may overlap without scanning the full annotation
    """

    def __init__(self):
        self.trees = {}

    @classmethod
    def build(cls, genes, log=DEVNULL):
        """
        Args:
            genes (Genes): the reference gene models

        Returns:
            AnnotationIndex: the index of the gene extents
        """
        index = cls()
        log('building interval tree for fast searching of gene overlaps', time_stamp=True)
        for gene in genes:
            index.insert(gene.chr, gene.name, gene.start, gene.end)
        return index

    def insert(self, chr, gene_id, start, end):
        tree = self.trees.setdefault(chr, IntervalTree())
        # intervaltree intervals are half-open
        tree.addi(start, end + 1, (gene_id, start, end))

    def query(self, chr, start, end):
        """
        find the genes whose extent overlaps the interior of the query range

        Args:
            chr (str): the chromosome
            start (int): the query start
            end (int): the query end

        Returns:
            :class:`set` of :class:`str`: the gene ids whose extent overlaps the query. Empty when the query is a single
            point (start == end) or the chromosome has no annotated genes
        """
        if start == end:
            return set()
        tree = self.trees.get(chr)
        if tree is None:
            return set()
        result = set()
        for iv in tree.overlap(start, end + 1):
            gene_id, gene_start, gene_end = iv.data
            if Interval.overlaps_interior((gene_start, gene_end), (start, end)):
                result.add(gene_id)
        return result

    def __len__(self):
        return sum([len(tree) for tree in self.trees.values()])
