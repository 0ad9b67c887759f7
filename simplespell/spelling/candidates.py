"""
Single-edit candidate generation.

Possible misspellings include missing letters (today -> tday), transposed
letters (the -> teh), substitutions (date -> dzte) and insertions
(date -> dzate). Each word is sliced at every position, e.g. 'date' into
('', 'date'), ('d', 'ate'), ('da', 'te'), ('dat', 'e'), ('date', ''),
and each slice yields the variants of the four kinds.
"""

from __future__ import annotations

from simplespell.config import DEFAULT_ALPHABET


class CandidateGenerator:
    """
    Generates every string one edit away from a word.

    Output order is fixed: deletions, transpositions, substitutions, then
    insertions. Substitutions and insertions run letter by letter through
    the alphabet, and within a letter by split position. Duplicates keep
    their first position.

    Example:
        >>> gen = CandidateGenerator()
        >>> "the" in gen.generate("teh")
        True
        >>> len(gen.generate("ab"))
        130
    """

    def __init__(self, alphabet: str = DEFAULT_ALPHABET):
        self.alphabet = alphabet

    def generate(self, word: str) -> list[str]:
        """
        Distinct strings within one deletion, adjacent transposition,
        substitution or insertion of word (lowercased).

        Args:
            word: Word to vary; may be empty.

        Returns:
            Candidates in the documented deterministic order.
        """
        word = word.lower()
        splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]

        deletions = [left + right[1:] for left, right in splits if right]
        transpositions = [
            left + right[1] + right[0] + right[2:] for left, right in splits if len(right) > 1
        ]
        substitutions = [
            left + c + right[1:] for c in self.alphabet for left, right in splits if right
        ]
        insertions = [left + c + right for c in self.alphabet for left, right in splits]

        return list(dict.fromkeys(deletions + transpositions + substitutions + insertions))
