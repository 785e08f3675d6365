from ..constants import STRAND
from ..interval import Interval


class BioInterval:

    def __init__(self, reference_object, start, end=None, name=None, strand=None):
        """
        Args:
            reference_object: the object this interval is on
            start (int) start of the interval (inclusive)
            end (int): end of the interval (inclusive)
            name: optional
            strand (STRAND): the genomic strand

        Example:
            >>> b = BioInterval('1', 12572784, 12578898, 'q22.2')
            >>> b[0]
            12572784
            >>> b[1]
            12578898
        """
        self.reference_object = reference_object
        self.name = name
        self.position = Interval(start, end)
        self.strand = strand

    @property
    def start(self):
        """*int*: the start position"""
        return self.position.start

    @property
    def end(self):
        """*int*: the end position"""
        return self.position.end

    def __getitem__(self, index):
        return Interval.__getitem__(self, index)

    def get_strand(self):
        """
        pulls strand information from the current object, or follows reference
        objects until the strand is found

        Raises:
            AttributeError: raised if the strand is not set on this or any of its reference objects
        """
        if self.strand is not None:
            return self.strand
        parent = self.reference_object
        while parent is not None:
            if getattr(parent, 'strand', None) is not None:
                return parent.strand
            parent = getattr(parent, 'reference_object', None)
        raise AttributeError('strand has not been defined', self)

    @property
    def is_reverse(self):
        """True unless the interval is on the forward strand. Unstranded (.) intervals are treated as reverse"""
        return self.get_strand() != STRAND.POS

    @property
    def end5(self):
        """*int*: the genomic position of the 5' end wrt the strand of this interval"""
        return self.end if self.is_reverse else self.start

    @property
    def end3(self):
        """*int*: the genomic position of the 3' end wrt the strand of this interval"""
        return self.start if self.is_reverse else self.end

    def __repr__(self):
        cls = self.__class__.__name__
        refname = self.reference_object
        try:
            refname = self.reference_object.name
        except AttributeError:
            pass
        return '{}({}:{}-{}, name={})'.format(cls, refname, self.start, self.end, self.name)
