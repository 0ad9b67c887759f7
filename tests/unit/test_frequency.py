"""
Unit tests for word extraction and the frequency model.

Tests:
- extract_words / iter_word_spans
- WordFrequencies snapshots
- FrequencyModel build and queries
"""

import pytest

from simplespell.exceptions import NotInitializedError
from simplespell.spelling.frequency import FrequencyModel, WordFrequencies
from simplespell.spelling.tokenizer import extract_words, iter_word_spans

# =============================================================================
# Tokenizer Tests
# =============================================================================


class TestExtractWords:
    """Tests for extract_words()."""

    def test_lowercases_words(self):
        """Words are returned in lower case."""
        assert extract_words("The QUICK Brown") == ["the", "quick", "brown"]

    def test_repeats_kept_in_order(self):
        """Repeated words are not deduplicated."""
        assert extract_words("the fox the the") == ["the", "fox", "the", "the"]

    def test_punctuation_and_digits_separate(self):
        """Non-letters split words and are dropped."""
        assert extract_words("hello123world, don't!") == ["hello", "world", "don", "t"]

    def test_accented_letters_separate(self):
        """Accented letters are separators, not part of words."""
        assert extract_words("The café naïve") == ["the", "caf", "na", "ve"]

    def test_empty_text(self):
        """Text without letters yields no words."""
        assert extract_words("") == []
        assert extract_words("123 -- !!") == []

    def test_word_spans(self):
        """Spans report positions in the original text."""
        spans = list(iter_word_spans("I saw Teh fox"))
        assert spans[2] == ("teh", 6, 9)
        assert [word for word, _, _ in spans] == ["i", "saw", "teh", "fox"]


# =============================================================================
# WordFrequencies Tests
# =============================================================================


class TestWordFrequencies:
    """Tests for the immutable snapshot."""

    @pytest.fixture
    def freqs(self, sample_corpus):
        return WordFrequencies.from_text(sample_corpus)

    def test_counts(self, freqs):
        """Counts match the corpus."""
        assert freqs.as_dict() == {"the": 3, "quick": 1, "brown": 1, "fox": 1}
        assert freqs.total == 6
        assert len(freqs) == 4

    def test_case_insensitive_lookup(self, freqs):
        """Queries ignore case."""
        assert freqs.is_known("FOX")
        assert "The" in freqs
        assert freqs.frequency("THE") == 3

    def test_unknown_frequency_raises(self, freqs):
        """frequency() on an unknown word is a KeyError."""
        with pytest.raises(KeyError):
            freqs.frequency("teh")

    def test_as_dict_is_a_copy(self, freqs):
        """Mutating as_dict() output does not touch the snapshot."""
        counts = freqs.as_dict()
        counts["teh"] = 10
        assert not freqs.is_known("teh")

    def test_rank_by_frequency_then_alphabet(self):
        """rank() orders by descending count, then alphabetically."""
        freqs = WordFrequencies({"cat": 1, "bat": 1, "the": 5, "hat": 2})
        assert freqs.rank(["cat", "hat", "bat", "the"]) == ["the", "hat", "bat", "cat"]

    def test_most_common(self, freqs):
        """most_common() uses the same ordering."""
        assert freqs.most_common(2) == [("the", 3), ("brown", 1)]
        assert len(freqs.most_common()) == 4


# =============================================================================
# FrequencyModel Tests
# =============================================================================


class TestFrequencyModel:
    """Tests for FrequencyModel class."""

    @pytest.fixture
    def model(self, sample_corpus):
        model = FrequencyModel()
        model.build(sample_corpus)
        return model

    def test_not_built_initially(self):
        """A new model is not built."""
        assert not FrequencyModel().is_built

    @pytest.mark.parametrize(
        "query",
        [
            lambda m: m.is_known("the"),
            lambda m: m.frequency("the"),
            lambda m: m.filter_known(["the"]),
            lambda m: m.filter_unknown(["the"]),
            lambda m: m.snapshot(),
        ],
    )
    def test_queries_before_build_raise(self, query):
        """Every query fails before the first build."""
        with pytest.raises(NotInitializedError):
            query(FrequencyModel())

    def test_build_counts(self, model):
        """Building counts each distinct word."""
        assert model.is_built
        assert model.snapshot().as_dict() == {"the": 3, "quick": 1, "brown": 1, "fox": 1}

    def test_rebuild_is_idempotent(self, model, sample_corpus):
        """Rebuilding with the same text does not double counts."""
        first = model.snapshot()
        model.build(sample_corpus)
        assert model.snapshot() == first
        assert model.frequency("the") == 3

    def test_rebuild_replaces(self, model):
        """A new build replaces the previous mapping entirely."""
        model.build("cat cat dog")
        assert model.snapshot().as_dict() == {"cat": 2, "dog": 1}
        assert not model.is_known("fox")

    def test_old_snapshot_unchanged_by_rebuild(self, model):
        """Readers holding a snapshot keep a consistent view."""
        old = model.snapshot()
        model.build("cat")
        assert old.is_known("fox")
        assert not model.is_known("fox")

    def test_empty_corpus_builds(self):
        """An empty corpus builds a model with no known words."""
        model = FrequencyModel()
        model.build("")
        assert model.is_built
        assert not model.is_known("the")

    def test_filter_known(self, model):
        """filter_known is case-insensitive, distinct, and ordered."""
        assert model.filter_known(["Fox", "teh", "fox", "THE", "qick"]) == ["fox", "the"]

    def test_filter_unknown(self, model):
        """filter_unknown is case-insensitive, distinct, and ordered."""
        assert model.filter_unknown(["Teh", "fox", "teh", "xyz", "TEH"]) == ["teh", "xyz"]

    def test_independent_models(self, model):
        """Separate models do not share state."""
        other = FrequencyModel()
        other.build("hund katze")
        assert other.is_known("hund")
        assert not model.is_known("hund")
        assert not other.is_known("fox")
