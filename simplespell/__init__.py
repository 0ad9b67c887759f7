"""
SimpleSpell: frequency-based spelling suggestions and auto-correction.

This library builds a word-frequency model from sample text, then uses
it to spot unknown words, rank likely corrections by how often they
occur in the corpus, and auto-correct text while keeping initial capitals.

Example:
    >>> import simplespell
    >>> speller = simplespell.Speller()
    >>> speller.build_corpus_from_file("big.txt")
    >>> speller.suggest_alternatives("speling")
    ['spelling']

    >>> for item in speller.check("I saw teh fox"):
    ...     print(item.suspected_word, item.suggested_alternatives)
    >>> speller.auto_correct("Teh fox")
    'The fox'
"""

from simplespell.config import SpellCheckConfig
from simplespell.exceptions import (
    ConfigurationError,
    CorpusLoadError,
    NotInitializedError,
    SimpleSpellError,
)
from simplespell.models import CorrectionResult, SpellCheckItem
from simplespell.speller import (
    Speller,
    auto_correct,
    build_corpus,
    build_corpus_from_file,
    check,
    find_known_words,
    find_unknown_words,
    get_default_speller,
    suggest_alternatives,
)

__version__ = "0.1.0"
__all__ = [
    # Main API
    "Speller",
    "get_default_speller",
    "build_corpus",
    "build_corpus_from_file",
    "find_known_words",
    "find_unknown_words",
    "suggest_alternatives",
    "check",
    "auto_correct",
    # Configuration
    "SpellCheckConfig",
    # Output
    "SpellCheckItem",
    "CorrectionResult",
    # Exceptions
    "SimpleSpellError",
    "NotInitializedError",
    "CorpusLoadError",
    "ConfigurationError",
]
