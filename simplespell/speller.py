"""
Spell checker facade.

This module provides the Speller class that wires together:
- FrequencyModel (corpus word counts)
- SuggestionSearch (ranked alternatives)
- TextChecker (unknown words in text)
- AutoCorrector (rewriting text)
- CorpusReader (loading corpora from files)

Module-level functions operate on a lazily created default Speller, for
callers that only ever need one model per process.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from simplespell.config import SpellCheckConfig
from simplespell.readers.corpus_reader import CorpusReader
from simplespell.spelling.candidates import CandidateGenerator
from simplespell.spelling.checker import TextChecker
from simplespell.spelling.corrector import AutoCorrector
from simplespell.spelling.frequency import FrequencyModel
from simplespell.spelling.suggest import SuggestionSearch

if TYPE_CHECKING:
    from collections.abc import Iterable

    from simplespell.models import CorrectionResult, SpellCheckItem

logger = logging.getLogger(__name__)


class Speller:
    """
    Frequency-based spell checker and auto-corrector.

    Useless until a corpus has been built: every query before the first
    build raises NotInitializedError. Works for any language written in
    the unaccented Roman alphabet, given a corpus in that language.

    Example:
        >>> speller = Speller()
        >>> speller.build_corpus("the quick brown fox the the")
        >>> speller.suggest_alternatives("teh")
        ['the']
        >>> speller.auto_correct("Teh fox")
        'The fox'
    """

    def __init__(self, config: SpellCheckConfig | None = None) -> None:
        """Initialize an empty speller."""
        self.config = config or SpellCheckConfig()
        self.model = FrequencyModel()
        self.reader = CorpusReader(encoding=self.config.corpus_encoding)
        self.search = SuggestionSearch(
            self.model,
            CandidateGenerator(self.config.alphabet),
            self.config,
        )
        self.checker = TextChecker(self.search)
        self.corrector = AutoCorrector(self.checker)

    @classmethod
    def from_config(cls, config: SpellCheckConfig) -> Speller:
        """
        Create a speller and build it from config.corpus_path if set.

        Raises:
            CorpusLoadError: If the configured corpus cannot be read.
        """
        speller = cls(config)
        if config.corpus_path is not None:
            speller.build_corpus_from_file(config.corpus_path)
        else:
            logger.warning("No corpus_path configured; call build_corpus() before querying")
        return speller

    @property
    def is_built(self) -> bool:
        return self.model.is_built

    # -------------------------------------------------------------------------
    # Corpus
    # -------------------------------------------------------------------------

    def build_corpus(self, text: str) -> None:
        """
        Replace the frequency model with word counts from sample text.

        Args:
            text: Corpus text establishing known words and their frequency.
        """
        self.model.build(text)

    def build_corpus_from_file(self, path: str | Path) -> None:
        """
        Read a corpus file and replace the frequency model with it.

        The file is read completely before the model is touched, so a
        failed read leaves any existing model intact.

        Raises:
            CorpusLoadError: If the file cannot be read.
        """
        text = self.reader.read(path)
        self.model.build(text)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_known(self, word: str) -> bool:
        return self.model.is_known(word)

    def frequency(self, word: str) -> int:
        return self.model.frequency(word)

    def find_known_words(self, words: Iterable[str]) -> list[str]:
        """Distinct words from the input that are in the model (lowercased)."""
        return self.model.filter_known(words)

    def find_unknown_words(self, words: Iterable[str]) -> list[str]:
        """Distinct words from the input that are not in the model (lowercased)."""
        return self.model.filter_unknown(words)

    def suggest_alternatives(self, word: str) -> list[str]:
        """Alternatives for a word, most frequent first. See SuggestionSearch."""
        return self.search.suggest(word)

    def check(self, text: str) -> list[SpellCheckItem]:
        """Unknown words in text with their suggestions. See TextChecker."""
        return self.checker.check(text)

    def auto_correct(self, text: str) -> str:
        """Text with unknown words replaced. See AutoCorrector."""
        return self.corrector.auto_correct(text)

    def auto_correct_with_report(self, text: str) -> CorrectionResult:
        return self.corrector.auto_correct_with_report(text)


# ═══════════════════════════════════════════════════════════════════════════════
# Default instance
# ═══════════════════════════════════════════════════════════════════════════════

_default_speller: Speller | None = None


def get_default_speller() -> Speller:
    """Return the process-wide default Speller, creating it on first use."""
    global _default_speller
    if _default_speller is None:
        _default_speller = Speller()
    return _default_speller


def build_corpus(text: str) -> None:
    get_default_speller().build_corpus(text)


def build_corpus_from_file(path: str | Path) -> None:
    get_default_speller().build_corpus_from_file(path)


def find_known_words(words: Iterable[str]) -> list[str]:
    return get_default_speller().find_known_words(words)


def find_unknown_words(words: Iterable[str]) -> list[str]:
    return get_default_speller().find_unknown_words(words)


def suggest_alternatives(word: str) -> list[str]:
    return get_default_speller().suggest_alternatives(word)


def check(text: str) -> list[SpellCheckItem]:
    return get_default_speller().check(text)


def auto_correct(text: str) -> str:
    return get_default_speller().auto_correct(text)
