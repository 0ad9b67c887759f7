"""Corpus reading module.

Plain text is read directly; PDFs are read with PyMuPDF.
"""

from simplespell.readers.corpus_reader import PDF_SUFFIXES, CorpusReader

__all__ = [
    "CorpusReader",
    "PDF_SUFFIXES",
]
