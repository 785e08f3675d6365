class SpanInconsistency(Exception):
    """
    describes a group of alignment segments which cannot be merged into a single span because they
    disagree on the chromosome or the strand they were aligned to

    These are returned rather than raised by :func:`~chimannot.align.span.build_span` so that the
    caller can count and drop the span without disturbing the other spans of the transcript
    """
    def __init__(self, alignment_id, attribute, values):
        self.alignment_id = alignment_id
        self.attribute = attribute
        self.values = sorted(values)
        Exception.__init__(
            self, 'inconsistent {} assignments for alignment {}: {}'.format(attribute, alignment_id, self.values))


class AnnotationFormatError(Exception):
    """
    raised when a record of the reference annotation is missing required information
    """
    pass


class AlignmentFormatError(Exception):
    """
    raised when an alignment (gff3) record cannot be parsed
    """
    pass
