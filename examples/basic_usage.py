#!/usr/bin/env python3
"""
Basic SimpleSpell Usage Example

This example demonstrates the core workflow:
1. Build a frequency model from a corpus
2. Find known and unknown words
3. Suggest alternatives for a misspelling
4. Check a block of text
5. Auto-correct text
"""

import logging

from simplespell import Speller
from simplespell.config import SpellCheckConfig

CORPUS = """
The quick brown fox jumps over the lazy dog. The dog sleeps in the sun,
and the fox watches the dog from the edge of the forest.
"""


def main():
    logging.basicConfig(level=logging.INFO)

    # ─────────────────────────────────────────────────────────────────────────
    # 1. Build the model
    # ─────────────────────────────────────────────────────────────────────────

    speller = Speller(SpellCheckConfig(max_word_length=20))
    speller.build_corpus(CORPUS)
    # Or from a file (plain text or PDF):
    # speller.build_corpus_from_file("path/to/big.txt")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Known and unknown words
    # ─────────────────────────────────────────────────────────────────────────

    words = ["The", "fox", "jmups", "forrest"]
    print(f"Known:   {speller.find_known_words(words)}")
    print(f"Unknown: {speller.find_unknown_words(words)}")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Suggestions, most frequent first
    # ─────────────────────────────────────────────────────────────────────────

    for word in ("teh", "dgo", "forrest"):
        print(f"{word} -> {speller.suggest_alternatives(word)}")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Check a block of text
    # ─────────────────────────────────────────────────────────────────────────

    for item in speller.check("Teh qiuck fox jumsp ovr the dgo"):
        print(f"  {item.suspected_word}: {', '.join(item.suggested_alternatives) or '-'}")

    # ─────────────────────────────────────────────────────────────────────────
    # 5. Auto-correct
    # ─────────────────────────────────────────────────────────────────────────

    result = speller.auto_correct_with_report("Teh qiuck fox jumsp ovr the dgo.")
    print(result.corrected_text)
    print(f"  {result.corrections_made} correction(s)")


if __name__ == "__main__":
    main()
