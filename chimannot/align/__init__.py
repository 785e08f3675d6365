"""
Spliced alignments of the query transcripts

- :mod:`~chimannot.align.segment` reads the gff3 alignment rows and groups them by query transcript and alignment id
- :mod:`~chimannot.align.span` merges the segments of one alignment into an alignment span
"""
