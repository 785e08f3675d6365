"""
Fusion calling from the alignment spans of chimeric transcripts

Algorithm Overview
----------------------

- order the alignment spans of a query transcript by their position on the query transcript
- for every adjacent pair of spans, map the 3' end of the upstream span and the 5' end of the downstream span
  to the nearest annotated exon boundary of each overlapping gene
- pair the candidates of different genes with matching orientation
- report all pairs tied for the smallest total distance from the annotated boundaries
"""
