"""
Spelling suggestion and correction core.

This module provides frequency-ranked spelling suggestions using:
- Word extraction (a-z runs, lowercased)
- A corpus word-frequency model
- Single-edit candidate generation, applied up to two generations
- Text checking and auto-correction that keeps initial capitals

Example:
    >>> from simplespell.spelling import FrequencyModel, SuggestionSearch
    >>> model = FrequencyModel()
    >>> model.build("the quick brown fox the the")
    >>> SuggestionSearch(model).suggest("teh")
    ['the']
"""

from simplespell.spelling.candidates import CandidateGenerator
from simplespell.spelling.checker import TextChecker
from simplespell.spelling.corrector import AutoCorrector, apply_correction
from simplespell.spelling.frequency import FrequencyModel, WordFrequencies
from simplespell.spelling.suggest import SuggestionSearch
from simplespell.spelling.tokenizer import extract_words, iter_word_spans

__all__ = [
    # Tokenizer
    "extract_words",
    "iter_word_spans",
    # Model
    "FrequencyModel",
    "WordFrequencies",
    # Search
    "CandidateGenerator",
    "SuggestionSearch",
    # Text
    "TextChecker",
    "AutoCorrector",
    "apply_correction",
]
