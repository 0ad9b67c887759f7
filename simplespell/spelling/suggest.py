"""
Nearest-known-word search over one and two edit generations.

The search is a fixed two-stage pipeline rather than recursion:
generate -> filter known -> (if empty) generate again -> filter known.
Results are ranked by descending corpus frequency, ties alphabetically.

It's possible to get false positives from this: some misspellings of
correct words are dictionary words themselves, so they are accepted
as-is and no correction is offered.
"""

from __future__ import annotations

import logging
from itertools import chain

from simplespell.config import SpellCheckConfig
from simplespell.spelling.candidates import CandidateGenerator
from simplespell.spelling.frequency import FrequencyModel, WordFrequencies

logger = logging.getLogger(__name__)


class SuggestionSearch:
    """
    Suggests known alternatives for a word, most likely first.

    Attributes:
        model: FrequencyModel providing known words and frequencies.
        generator: CandidateGenerator for single-edit variants.
        max_word_length: Unknown words longer than this are not searched.

    Example:
        >>> model = FrequencyModel()
        >>> model.build("the quick brown fox the the")
        >>> SuggestionSearch(model).suggest("teh")
        ['the']
    """

    def __init__(
        self,
        model: FrequencyModel,
        generator: CandidateGenerator | None = None,
        config: SpellCheckConfig | None = None,
    ):
        self.config = config or SpellCheckConfig()
        self.model = model
        self.generator = generator or CandidateGenerator(self.config.alphabet)
        self.max_word_length = self.config.max_word_length

    def suggest(self, word: str, frequencies: WordFrequencies | None = None) -> list[str]:
        """
        Suggest alternatives for a possibly misspelled word.

        Args:
            word: The word to check (case-insensitive).
            frequencies: Snapshot to search against; defaults to the
                model's current one. Pass one to keep several searches
                on the same model.

        Returns:
            [word] (lowercased) if the word is already known; otherwise the
            known words within one edit, or failing that within two edits,
            ranked by frequency. Empty if nothing is found.

        Raises:
            NotInitializedError: If the model has never been built.
        """
        # One snapshot for the whole search
        if frequencies is None:
            frequencies = self.model.snapshot()
        w = word.lower()

        if frequencies.is_known(w):
            return [w]

        if self.max_word_length is not None and len(w) > self.max_word_length:
            logger.debug("Skipping search for '%s': longer than %d", w, self.max_word_length)
            return []

        first_generation = self.generator.generate(w)
        known = frequencies.filter_known(first_generation)
        if known:
            logger.debug("Found %d first-generation candidates for '%s'", len(known), w)
            return frequencies.rank(known)

        # Expand every first-generation variant, known or not
        second_generation = chain.from_iterable(
            self.generator.generate(candidate) for candidate in first_generation
        )
        known = frequencies.filter_known(second_generation)
        if known:
            logger.debug("Found %d second-generation candidates for '%s'", len(known), w)
            return frequencies.rank(known)

        logger.debug("No candidates within two edits of '%s'", w)
        return []
