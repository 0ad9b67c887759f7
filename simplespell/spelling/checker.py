"""
Text checking: find unknown words and pair them with suggestions.
"""

from __future__ import annotations

import logging

from simplespell.models import SpellCheckItem
from simplespell.spelling.suggest import SuggestionSearch
from simplespell.spelling.tokenizer import extract_words

logger = logging.getLogger(__name__)


class TextChecker:
    """
    Identifies possible misspellings in a block of text.

    Example:
        >>> checker = TextChecker(search)
        >>> checker.check("teh fox")
        [SpellCheckItem(suspected_word='teh', suggested_alternatives=('the',))]
    """

    def __init__(self, search: SuggestionSearch):
        self.search = search

    def check(self, text: str) -> list[SpellCheckItem]:
        """
        Check text for unknown words.

        Args:
            text: The text to check.

        Returns:
            One SpellCheckItem per distinct unknown word, in order of
            first occurrence.

        Raises:
            NotInitializedError: If the model has never been built.
        """
        if text is None:
            raise ValueError("Input text cannot be None")

        # Every word is classified and searched against the same snapshot
        frequencies = self.search.model.snapshot()
        unknown = frequencies.filter_unknown(extract_words(text))
        items = [
            SpellCheckItem(word, tuple(self.search.suggest(word, frequencies))) for word in unknown
        ]

        logger.debug(
            "Checked %d chars: %d unknown words, %d with suggestions",
            len(text),
            len(items),
            sum(1 for item in items if item.has_suggestions),
        )
        return items
