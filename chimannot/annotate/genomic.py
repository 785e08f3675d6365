from .base import BioInterval
from ..constants import STRAND


class Gene(BioInterval):
    """
    all transcripts sharing a gene id. The start and end of the gene are the outer bounds of all of its
    exons and are only used to build the overlap index
    """

    def __init__(self, chr, start, end, name=None, strand=None, aliases=None):
        """
        Args:
            chr (str): the chromosome
            start (int): the minimum genomic position of any of the exons of the gene
            end (int): the maximum genomic position of any of the exons of the gene
            name (str): the gene name/id i.e. ENSG0001 or KRAS
            strand (STRAND): the genomic strand '+' or '-'
            aliases (:class:`list` of :class:`str`): other names for the gene, for example the gene_id when the
                gene_name was used as the name
        Example:
            >>> Gene('X', 1, 1000, 'ENG0001', '+', ['KRAS'])
        """
        BioInterval.__init__(self, name=name, reference_object=chr, start=start, end=end)
        self.strand = None if strand is None else STRAND.enforce(strand)
        self.aliases = [] if aliases is None else aliases
        self.transcripts = {}

    @property
    def chr(self):
        """returns the name of the chromosome that this gene resides on"""
        return self.reference_object

    def add_transcript(self, transcript):
        if transcript.name in self.transcripts:
            raise KeyError('duplicate transcript for gene', transcript.name, self.name)
        transcript.reference_object = self
        self.transcripts[transcript.name] = transcript


class Transcript(BioInterval):
    """
    an ordered set of annotated exons. Exons are kept sorted by their genomic start
    """

    def __init__(self, name, exons, gene=None, strand=None):
        """
        Args:
            name (str): the transcript id
            exons (:class:`list` of :class:`Exon`): the exons of the transcript
            gene (Gene): the gene this transcript belongs to

        Raises:
            AttributeError: if no exons are given
        """
        if not exons:
            raise AttributeError('a transcript requires at least one exon', name)
        exons = sorted(exons, key=lambda x: (x.start, x.end))
        BioInterval.__init__(
            self, name=name, reference_object=gene, start=exons[0].start, end=max([e.end for e in exons]), strand=strand)
        self.exons = exons
        for i, exon in enumerate(self.exons):
            exon.reference_object = self
            exon.number = '{}/{}'.format(i + 1, len(self.exons))
            exon.terminal = i == 0 or i == len(self.exons) - 1

    @property
    def gene(self):
        return self.reference_object

    def is_outer_boundary(self, pos):
        """
        True if the position is the start of the first exon or the end of the last exon. These are the ends
        of the transcript itself and cannot be splice junctions
        """
        return pos == self.start or pos == self.end


class Exon(BioInterval):

    def __init__(self, start, end, strand=None, transcript=None, name=None):
        """
        Args:
            start (int): the genomic start position
            end (int): the genomic end position
            strand (STRAND): the strand of the exon as given by the annotation
            transcript (Transcript): the 'parent' transcript this exon belongs to
        Raises:
            AttributeError: if the exon start > the exon end
        Example:
            >>> Exon(15, 78, '+')
        """
        BioInterval.__init__(self, name=name, reference_object=transcript, start=start, end=end, strand=strand)
        self.number = None
        self.terminal = False

    @property
    def transcript(self):
        return self.reference_object

    @property
    def gene(self):
        return self.transcript.gene

    @property
    def gene_id(self):
        return self.gene.name

    @property
    def transcript_id(self):
        return self.transcript.name

    @property
    def chr(self):
        return self.gene.chr

    def __repr__(self):
        return 'Exon({}:{}-{}{}, number={})'.format(
            self.transcript_id if self.transcript else None, self.start, self.end, self.strand, self.number)


class Genes:
    """
    store of the reference gene models by chromosome and gene id. Chromosome names are matched exactly

    Example:
        >>> genes = Genes()
        >>> genes.add(Gene('1', 100, 400, 'GENE_A', '+'))
        >>> genes.get('1', 'GENE_A')
        Gene(1:100-400, name=GENE_A)
    """

    def __init__(self):
        self._genes_by_chr = {}

    def add(self, gene):
        genes = self._genes_by_chr.setdefault(gene.chr, {})
        if gene.name in genes:
            raise KeyError('duplicate gene on chromosome', gene.name, gene.chr)
        genes[gene.name] = gene

    def get(self, chr, gene_id):
        return self._genes_by_chr[chr][gene_id]

    def on_chr(self, chr):
        """:class:`dict` of :class:`Gene` by :class:`str`: the genes on a given chromosome keyed by gene id"""
        return self._genes_by_chr.get(chr, {})

    def __iter__(self):
        for genes in self._genes_by_chr.values():
            for gene in genes.values():
                yield gene

    def __len__(self):
        return sum([len(genes) for genes in self._genes_by_chr.values()])
