"""
module which holds all functions relating to loading the reference annotation files
"""
import re

import pandas as pd

from .genomic import Exon, Gene, Genes, Transcript
from ..constants import GTF_EXON_FEATURE, STRAND
from ..error import AnnotationFormatError
from ..util import DEVNULL

GTF_COLUMNS = ['seqname', 'source', 'feature', 'start', 'end', 'score', 'strand', 'frame', 'attribute']


def parse_gtf_attributes(attributes):
    """
    pull the gene and transcript identifiers from the attribute column of a GTF row. The gene_name is used
    in place of the gene_id whenever it is given

    Args:
        attributes (str): the 9th column of the GTF row

    Returns:
        Tuple[str,str,str]: the gene name, the transcript id and the original gene id

    Raises:
        AnnotationFormatError: if the gene_id or transcript_id cannot be found

    Example:
        >>> parse_gtf_attributes('gene_id "ENSG01"; transcript_id "ENST01"; gene_name "KRAS";')
        ('KRAS', 'ENST01', 'ENSG01')
    """
    match = re.search(r'gene_id "([^"]+)', attributes)
    if not match:
        raise AnnotationFormatError('cannot extract gene_id from: {}'.format(attributes))
    gene_id = match.group(1)
    gene_name = gene_id

    match = re.search(r'gene_name "([^"]+)', attributes)
    if match:
        gene_name = match.group(1)

    match = re.search(r'transcript_id "([^"]+)', attributes)
    if not match:
        raise AnnotationFormatError('cannot extract transcript_id from: {}'.format(attributes))
    return gene_name, match.group(1), gene_id


def read_gtf_exons(filename):
    """
    read the exon rows of a GTF file

    Args:
        filename: path to the GTF file (compression is inferred from the extension) or an open file handle

    Returns:
        pandas.DataFrame: one row per exon with the GTF columns plus the gene (name), gene_id and transcript
        parsed from the attributes

    Raises:
        AnnotationFormatError: if an exon row is missing columns, has non-integer coordinates, or is missing
            the gene or transcript identifiers
    """
    try:
        df = pd.read_csv(
            filename,
            sep='\t',
            dtype=str,
            index_col=False,
            header=None,
            comment='#',
            keep_default_na=False,
            names=GTF_COLUMNS,
        )
    except pd.errors.EmptyDataError:
        df = pd.DataFrame(columns=GTF_COLUMNS)
    df = df[df.feature == GTF_EXON_FEATURE].copy()

    missing = df[df[GTF_COLUMNS].isnull().any(axis=1)]
    if missing.shape[0]:
        raise AnnotationFormatError(
            'exon rows must have {} tab-delimited columns'.format(len(GTF_COLUMNS)), missing.index.tolist())

    bad_coords = df[~df.start.str.match(r'^\d+$') | ~df.end.str.match(r'^\d+$')]
    if bad_coords.shape[0]:
        raise AnnotationFormatError(
            'non-integer exon coordinates', bad_coords[['seqname', 'start', 'end']].values.tolist())
    df['start'] = df.start.astype(int)
    df['end'] = df.end.astype(int)

    ids = pd.DataFrame(
        df.attribute.apply(parse_gtf_attributes).tolist(),
        columns=['gene', 'transcript', 'gene_id'],
        index=df.index
    )
    return df.join(ids)


def load_annotations(*filepaths, log=DEVNULL):
    """
    loads gene models from GTF file(s). Only the exon rows are used, genes and transcripts are built from the exons

    Args:
        filepaths (str): path(s) to the GTF files. Files ending with .gz are decompressed
        log (Log): logging function

    Returns:
        Genes: the gene models by chromosome and gene id

    Raises:
        AnnotationFormatError: on exon rows missing the gene or transcript identifiers
    """
    frames = []
    for filename in filepaths:
        log('parsing', filename, time_stamp=True)
        frames.append(read_gtf_exons(filename))
    df = pd.concat(frames, ignore_index=True)

    genes = Genes()
    for (chrom, gene_name), gene_df in df.groupby(['seqname', 'gene'], sort=False):
        strands = set(gene_df.strand)
        gene = Gene(
            chr=chrom,
            start=gene_df.start.min(),
            end=gene_df.end.max(),
            name=gene_name,
            strand=strands.pop() if len(strands) == 1 and strands <= set(STRAND.values()) else None,
            aliases=sorted(set(gene_df.gene_id) - {gene_name})
        )
        for transcript_id, tx_df in gene_df.groupby('transcript', sort=False):
            exons = [Exon(start, end, strand=strand) for start, end, strand in zip(tx_df.start, tx_df.end, tx_df.strand)]
            gene.add_transcript(Transcript(transcript_id, exons, strand=tx_df.strand.iloc[0]))
        genes.add(gene)
    log('loaded', len(genes), 'genes', time_stamp=False)
    return genes
