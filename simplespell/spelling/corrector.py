"""
Auto-correction: rewrite text with the most likely alternative for each
unknown word.

Corrections are made in lower case, except that an initial capital on
an occurrence is kept on its replacement.

Matching is case-insensitive and substring-based, not word-based: a
suspected word that appears inside a longer word is replaced there too
("teh" in "tehran"). Items are applied one after another, each against
the text as already rewritten by the previous ones, so corrections for
different words can interact.
"""

from __future__ import annotations

import logging
import re

from simplespell.models import CorrectionResult, SpellCheckItem
from simplespell.spelling.checker import TextChecker

logger = logging.getLogger(__name__)


def _match_case(original: str, replacement: str) -> str:
    """Carry an initial capital over from original to replacement."""
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def apply_correction(text: str, item: SpellCheckItem) -> tuple[str, int]:
    """
    Replace every occurrence of item.suspected_word with its top suggestion.

    Args:
        text: Current text.
        item: Item with at least one suggestion.

    Returns:
        Tuple of (rewritten text, number of occurrences replaced).
    """
    replacement = item.top_suggestion
    if replacement is None:
        return text, 0

    pattern = re.compile(re.escape(item.suspected_word), re.IGNORECASE | re.ASCII)
    return pattern.subn(lambda match: _match_case(match.group(), replacement), text)


class AutoCorrector:
    """
    Replaces unknown words with their top-ranked suggestion.

    Words without any suggestion are left untouched.

    Example:
        >>> corrector = AutoCorrector(checker)
        >>> corrector.auto_correct("Teh fox")
        'The fox'
    """

    def __init__(self, checker: TextChecker):
        self.checker = checker

    def auto_correct(self, text: str) -> str:
        """
        Correct a block of text.

        Raises:
            NotInitializedError: If the model has never been built.
        """
        return self.auto_correct_with_report(text).corrected_text

    def auto_correct_with_report(self, text: str) -> CorrectionResult:
        """
        Correct a block of text and report what was changed.

        The items are computed once from the original text before any
        rewriting starts.

        Args:
            text: The text to correct.

        Returns:
            CorrectionResult with the corrected text and the check items.
        """
        items = self.checker.check(text)
        corrected = text
        total = 0

        for item in items:
            if not item.has_suggestions:
                continue
            corrected, count = apply_correction(corrected, item)
            total += count
            logger.debug(
                "Replaced %d occurrence(s) of '%s' with '%s'",
                count,
                item.suspected_word,
                item.top_suggestion,
            )

        return CorrectionResult(
            original_text=text,
            corrected_text=corrected,
            items=items,
            corrections_made=total,
        )
