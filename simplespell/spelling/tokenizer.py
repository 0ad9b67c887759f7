"""
Word extraction for corpus building and text checking.

Words are maximal runs of unaccented Roman letters. Everything else
(digits, punctuation, whitespace, accented letters) separates words and
is dropped.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

# Only a-z after lowercasing; accented letters are separators
WORD_PATTERN = re.compile(r"[a-z]+", re.IGNORECASE | re.ASCII)


def extract_words(text: str) -> list[str]:
    """
    Slice text into lowercase words.

    This is not a distinct list: repeated words repeat, in order of
    appearance, since repeats matter for frequency counting.

    Example:
        >>> extract_words("The café, the CAT!")
        ['the', 'caf', 'the', 'cat']
    """
    return [match.group().lower() for match in WORD_PATTERN.finditer(text)]


def iter_word_spans(text: str) -> Iterator[tuple[str, int, int]]:
    """Yield (lowercase word, start, end) for each word in text."""
    for match in WORD_PATTERN.finditer(text):
        yield match.group().lower(), match.start(), match.end()
