"""
maps chimeric transcript alignments onto reference gene annotations to call candidate gene fusions
"""
__version__ = '0.1.0'
