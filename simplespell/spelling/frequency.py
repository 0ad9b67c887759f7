"""
Word frequency model built from a corpus.

The model holds a single reference to an immutable WordFrequencies
snapshot. build() computes a complete new snapshot before swapping the
reference, so readers holding a snapshot always see a whole model and a
failed build leaves the previous model in place.
"""

from __future__ import annotations

import logging
from collections import Counter
from types import MappingProxyType
from typing import TYPE_CHECKING

from simplespell.exceptions import NotInitializedError
from simplespell.spelling.tokenizer import extract_words

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)


# =============================================================================
# SNAPSHOT
# =============================================================================


class WordFrequencies:
    """
    Read-only mapping of lowercase word to occurrence count.

    Every key is a non-empty run of a-z and every count is at least 1.

    Example:
        >>> freqs = WordFrequencies.from_text("the quick brown fox the the")
        >>> freqs.frequency("The")
        3
        >>> freqs.filter_known(["fox", "Fox", "teh"])
        ['fox']
    """

    __slots__ = ("_counts", "_total")

    def __init__(self, counts: Mapping[str, int]):
        self._counts = MappingProxyType(dict(counts))
        self._total = sum(self._counts.values())

    @classmethod
    def from_text(cls, text: str) -> WordFrequencies:
        """Tokenize text and count each distinct word."""
        return cls(Counter(extract_words(text)))

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._counts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordFrequencies):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"WordFrequencies(words={len(self._counts)}, total={self._total})"

    @property
    def total(self) -> int:
        """Total number of tokens counted."""
        return self._total

    def as_dict(self) -> dict[str, int]:
        """Copy of the underlying word counts."""
        return dict(self._counts)

    def is_known(self, word: str) -> bool:
        """Check if word (case-insensitive) is in the model."""
        return word.lower() in self._counts

    def frequency(self, word: str) -> int:
        """
        Occurrence count of word (case-insensitive).

        Raises:
            KeyError: If the word is unknown. Guard with is_known().
        """
        return self._counts[word.lower()]

    def filter_known(self, words: Iterable[str]) -> list[str]:
        """Distinct known words, lowercased, in first-occurrence order."""
        counts = self._counts
        found: dict[str, None] = {}
        for word in words:
            w = word.lower()
            if w in counts:
                found[w] = None
        return list(found)

    def filter_unknown(self, words: Iterable[str]) -> list[str]:
        """Distinct unknown words, lowercased, in first-occurrence order."""
        counts = self._counts
        found: dict[str, None] = {}
        for word in words:
            w = word.lower()
            if w not in counts:
                found[w] = None
        return list(found)

    def rank(self, words: Iterable[str]) -> list[str]:
        """Sort known words by descending frequency, ties alphabetically."""
        counts = self._counts
        return sorted(words, key=lambda w: (-counts[w], w))

    def most_common(self, n: int | None = None) -> list[tuple[str, int]]:
        """The n most frequent words with counts, ties alphabetically."""
        ranked = sorted(self._counts.items(), key=lambda item: (-item[1], item[0]))
        return ranked if n is None else ranked[:n]


# =============================================================================
# FREQUENCY MODEL
# =============================================================================


class FrequencyModel:
    """
    Owner of the current word-frequency snapshot.

    Independent instances can coexist (e.g. one per language). Queries
    made before the first successful build() raise NotInitializedError.

    Example:
        >>> model = FrequencyModel()
        >>> model.build("the quick brown fox the the")
        >>> model.is_known("Quick")
        True
        >>> model.filter_unknown(["teh", "fox", "Teh"])
        ['teh']
    """

    def __init__(self) -> None:
        self._snapshot: WordFrequencies | None = None

    @property
    def is_built(self) -> bool:
        """Whether build() has completed at least once."""
        return self._snapshot is not None

    def build(self, text: str) -> WordFrequencies:
        """
        Replace the model with word counts from text.

        Rebuilding with the same text yields the same mapping; counts
        never accumulate across builds.

        Args:
            text: Raw corpus text.

        Returns:
            The newly published snapshot.
        """
        snapshot = WordFrequencies.from_text(text)
        # Single reference swap publishes the new model
        self._snapshot = snapshot
        logger.info(
            "Built frequency model: %d distinct words from %d tokens",
            len(snapshot),
            snapshot.total,
        )
        return snapshot

    def snapshot(self) -> WordFrequencies:
        """
        Current snapshot, for callers that make several queries.

        Raises:
            NotInitializedError: If build() has never succeeded.
        """
        snapshot = self._snapshot
        if snapshot is None:
            raise NotInitializedError()
        return snapshot

    def is_known(self, word: str) -> bool:
        return self.snapshot().is_known(word)

    def frequency(self, word: str) -> int:
        return self.snapshot().frequency(word)

    def filter_known(self, words: Iterable[str]) -> list[str]:
        return self.snapshot().filter_known(words)

    def filter_unknown(self, words: Iterable[str]) -> list[str]:
        return self.snapshot().filter_unknown(words)
