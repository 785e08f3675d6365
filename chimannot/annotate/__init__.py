"""
Reference annotation models and loaders

- read the exon rows of a GTF into :class:`~chimannot.annotate.genomic.Gene`,
  :class:`~chimannot.annotate.genomic.Transcript` and :class:`~chimannot.annotate.genomic.Exon` objects
- index the gene extents by chromosome for overlap queries (:class:`~chimannot.annotate.index.AnnotationIndex`)
"""
