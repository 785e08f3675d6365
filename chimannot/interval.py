

class Interval:
    """
    a closed, 1-based integer range. Used for genomic and transcript coordinate ranges
    """

    def __init__(self, start, end=None):
        """
        Args:
            start (int): the start of the interval (inclusive)
            end (int): the end of the interval (inclusive)
        """
        self.start = int(start)
        self.end = int(end) if end is not None else self.start
        if self.start > self.end:
            raise AttributeError('interval start > end is not allowed', self.start, self.end)

    def __getitem__(self, index):
        try:
            index = int(index)
        except ValueError:
            raise IndexError('index input accessor must be an integer', index)
        if index == 0:
            return self.start
        elif index == 1:
            return self.end
        raise IndexError('index input accessor is out of bounds: 1 or 2 only', index)

    @classmethod
    def overlaps_interior(cls, first, other):
        """
        checks if two intervals overlap by more than a shared end point. This is the overlap used when
        comparing alignments to annotations since an alignment which only touches the boundary of an
        exon says nothing about it

        Example:
            >>> Interval.overlaps_interior((1, 10), (10, 11))
            False
            >>> Interval.overlaps_interior((1, 10), (9, 11))
            True
        """
        return first[0] < other[1] and first[1] > other[0]

    def __len__(self):
        """
        the length of the interval

        Example:
            >>> len(Interval(1, 11))
            11
        """
        return self.length()

    def length(self):
        return self[1] - self[0] + 1

    def __eq__(self, other):
        try:
            return self[0] == other[0] and self[1] == other[1]
        except (TypeError, IndexError):
            return False

    def __repr__(self):
        return '{}({}, {})'.format(self.__class__.__name__, self.start, self.end)

    @classmethod
    def union(cls, *intervals):
        """
        returns the union (outer envelope) of the set of input intervals

        Example:
            >>> Interval.union((1, 2), (4, 6), (4, 9), (20, 21))
            Interval(1, 21)
        """
        if len(intervals) < 1:
            raise AttributeError('cannot compute the union of an empty set of intervals')
        return Interval(min([i[0] for i in intervals]), max([i[1] for i in intervals]))
