"""
Corpus reader for plain-text and PDF sources.

PDF corpora are read with PyMuPDF (fitz), one page at a time. Any other
file is read as text in the configured encoding. Read failures surface
as CorpusLoadError with the original error chained.
"""

from __future__ import annotations

import logging
from pathlib import Path

import fitz  # PyMuPDF

from simplespell.exceptions import CorpusLoadError

logger = logging.getLogger(__name__)

PDF_SUFFIXES = frozenset({".pdf"})


class CorpusReader:
    """Reads corpus text from files.

    Usage:
        reader = CorpusReader()
        text = reader.read("/path/to/big.txt")
    """

    def __init__(self, *, encoding: str = "utf-8"):
        """Initialize the corpus reader.

        Args:
            encoding: Text encoding for non-PDF corpora.
        """
        self.encoding = encoding

    def read(self, path: str | Path) -> str:
        """Read a corpus file.

        Args:
            path: Path to a text or PDF file.

        Returns:
            The corpus text.

        Raises:
            CorpusLoadError: If the file is missing or cannot be read or decoded.
        """
        path = Path(path)
        if not path.is_file():
            raise CorpusLoadError(f"Corpus file not found: {path}")

        if path.suffix.lower() in PDF_SUFFIXES:
            text = self._read_pdf(path)
        else:
            text = self._read_text(path)

        logger.info("Loaded corpus %s: %d chars", path, len(text))
        return text

    def _read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise CorpusLoadError(f"Could not load corpus file {path}: {e}") from e

    def _read_pdf(self, path: Path) -> str:
        try:
            doc = fitz.open(path)
        except Exception as e:
            raise CorpusLoadError(f"Could not open corpus PDF {path}: {e}") from e

        try:
            pages = [page.get_text("text") for page in doc]
        except Exception as e:
            raise CorpusLoadError(f"Could not extract text from {path}: {e}") from e
        finally:
            doc.close()

        logger.debug("Read %d pages from %s", len(pages), path)
        return "\n\n".join(pages)
